from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Query

from expressions import INVALID_CHARS_MSG, evaluate as eval_expr
from grading import mark_answer
from schemas.marking import (
    EvaluateRequest,
    EvaluateResponse,
    MarkBatchRequest,
    MarkBatchResponse,
    MarkRequest,
    MarkResponse,
    StarsResponse,
)
from scoring import get_stars

router = APIRouter(tags=["marking"])


@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate(req: EvaluateRequest):
    try:
        return {"ok": True, "value": eval_expr(req.expr)}
    except ValueError as e:
        return {"ok": False, "value": None, "feedback": str(e)}
    except Exception:
        return {"ok": False, "value": None, "feedback": INVALID_CHARS_MSG}


@router.post("/mark", response_model=MarkResponse)
def mark(req: MarkRequest):
    return mark_answer(req.question, req.answer, steps=req.steps)


@router.post("/mark-batch", response_model=MarkBatchResponse)
def mark_batch(req: MarkBatchRequest):
    results: List[MarkResponse] = [
        mark_answer(it.question, it.answer, steps=it.steps) for it in req.items
    ]
    total = len(results)
    correct_count = sum(1 for r in results if r.correct)
    return {
        "ok": True,
        "total": total,
        "correct": correct_count,
        "stars": get_stars(correct_count, total) if total else None,
        "results": results,
    }


@router.get("/stars", response_model=StarsResponse)
def stars(score: int = Query(ge=0), total: int = Query(ge=1)):
    if score > total:
        raise HTTPException(status_code=422, detail="score cannot exceed total")
    return {"score": score, "total": total, "stars": get_stars(score, total)}
