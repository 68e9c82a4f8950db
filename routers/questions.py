from __future__ import annotations

import logging
import random as _rnd
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

import config
from bank import generate_questions, list_topics
from errors import GenerationError, UnknownTopicError
from schemas.questions import Question, TopicOut

logger = logging.getLogger("hebrew-maths")

router = APIRouter(tags=["questions"])


@router.get("/topics", response_model=List[TopicOut])
def get_topics():
    return list_topics()


@router.get("/questions/{topic}", response_model=List[Question])
def get_questions(
    topic: str,
    count: int = Query(default=config.SESSION_LENGTH, ge=1, le=100),
    seed: Optional[int] = Query(default=None, description="Fixed seed for a reproducible batch"),
):
    rng = _rnd.Random(seed) if seed is not None else None
    try:
        return generate_questions(topic, count, rng)
    except UnknownTopicError:
        raise HTTPException(status_code=404, detail="topic not found")
    except GenerationError as e:
        logger.error("question generation failed for %s: %s", topic, e)
        raise HTTPException(status_code=500, detail=f"generation_error: {e}")
