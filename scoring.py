# scoring.py
from __future__ import annotations

from typing import Any, List, Optional, Union

import config
from bank import generate_questions
from grading import mark_answer
from rng import RandomSource
from schemas.marking import DistributionSteps, MarkResponse

THREE_STARS = 0.90
TWO_STARS = 0.60


def get_stars(score: int, total: int) -> int:
    """3 stars from 90%, 2 from 60%, otherwise 1. Both thresholds inclusive."""
    if total < 1:
        raise ValueError(f"total must be positive, got {total}")
    # integer comparison keeps 9/10 exactly on the 90% boundary
    if score * 100 >= total * round(THREE_STARS * 100):
        return 3
    if score * 100 >= total * round(TWO_STARS * 100):
        return 2
    return 1


class QuizSession:
    """
    One run of a fixed-length quiz for a single topic.

    Questions are generated up front and presented in order. Only the first
    submission for a question is graded; anything after that just reveals
    the expected answer again.
    """

    def __init__(self, topic: str, questions: List[Any], rng: Optional[RandomSource] = None):
        if not questions:
            raise ValueError("a session needs at least one question")
        self.topic = topic
        self.questions = list(questions)
        self.index = 0
        self.score = 0
        self._rng = rng
        self._last: Optional[MarkResponse] = None

    @classmethod
    def start(
        cls, topic: str, total: Optional[int] = None, rng: Optional[RandomSource] = None
    ) -> "QuizSession":
        total = config.SESSION_LENGTH if total is None else total
        return cls(topic, generate_questions(topic, total, rng), rng)

    def restart(self) -> "QuizSession":
        return QuizSession.start(self.topic, self.total, self._rng)

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current(self) -> Any:
        return self.questions[self.index]

    @property
    def answered(self) -> bool:
        return self._last is not None

    @property
    def finished(self) -> bool:
        return self.index == self.total - 1 and self.answered

    @property
    def stars(self) -> int:
        return get_stars(self.score, self.total)

    def submit(
        self, answer: Union[str, int], steps: Optional[DistributionSteps] = None
    ) -> MarkResponse:
        """`steps` grades a distribution question stage by stage."""
        if self._last is not None:
            # already graded: reveal, never re-score
            return self._last.model_copy(update={"score": 0})

        result = mark_answer(self.current, answer, self._rng, steps=steps)
        if not result.ok:
            # malformed input is not an attempt
            return result
        if result.correct:
            self.score += 1
        self._last = result
        return result

    def advance(self) -> bool:
        """Move to the next question. Returns False once the last one is done."""
        if self._last is None:
            raise RuntimeError("answer the current question before moving on")
        if self.index + 1 >= self.total:
            return False
        self.index += 1
        self._last = None
        return True
