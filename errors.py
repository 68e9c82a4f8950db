from __future__ import annotations


class QuizError(Exception):
    """Base class for question generation and scoring errors."""


class GenerationError(QuizError):
    """A generator could not satisfy its constraints within the attempt cap."""


class UnknownTopicError(QuizError, KeyError):
    def __init__(self, topic: str):
        super().__init__(topic)
        self.topic = topic

    def __str__(self) -> str:
        return f"unknown topic: {self.topic!r}"
