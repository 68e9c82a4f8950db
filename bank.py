# bank.py

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from catalog import TOPICS
from errors import UnknownTopicError
from rng import RandomSource
from schemas.questions import TopicOut
from topics import arithmetic, decimal_structure, distribution, order_of_ops, vertical_math
from topics.triangles import get_triangle_questions

logger = logging.getLogger("hebrew-maths")

BatchGenerator = Callable[[int, Optional[RandomSource]], List[Any]]


def _one_at_a_time(gen: Callable[[Optional[RandomSource]], Any]) -> BatchGenerator:
    def batch(count: int, rng: Optional[RandomSource]) -> List[Any]:
        return [gen(rng) for _ in range(count)]

    return batch


class QuestionBank:
    """Maps topic ids to batch generators. Triangles deal from a shuffled pool."""

    _generators: Dict[str, BatchGenerator] = {
        "arithmetic": _one_at_a_time(arithmetic.generate_question),
        "distribution": _one_at_a_time(distribution.generate_question),
        "triangles": get_triangle_questions,
        "orderOfOps": _one_at_a_time(order_of_ops.generate_question),
        "decimalStructure": _one_at_a_time(decimal_structure.generate_question),
        "verticalMath": _one_at_a_time(vertical_math.generate_question),
    }

    @classmethod
    def topics(cls) -> List[str]:
        return list(cls._generators)

    @classmethod
    def generate(cls, topic: str, count: int, rng: Optional[RandomSource] = None) -> List[Any]:
        gen = cls._generators.get(topic)
        if gen is None:
            raise UnknownTopicError(topic)
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")

        questions = gen(count, rng)
        logger.debug("generated %d %s questions", len(questions), topic)
        return questions


# Public API
def generate_questions(topic: str, count: int, rng: Optional[RandomSource] = None) -> List[Any]:
    return QuestionBank.generate(topic, count, rng)


def list_topics() -> List[TopicOut]:
    return [TopicOut(**t) for t in TOPICS if t["id"] in QuestionBank.topics()]
