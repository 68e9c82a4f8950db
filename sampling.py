from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

import config
from errors import GenerationError

logger = logging.getLogger("hebrew-maths")

T = TypeVar("T")


def sample_until(
    draw: Callable[[], T],
    accept: Callable[[T], bool],
    max_attempts: Optional[int] = None,
) -> T:
    """
    Rejection sampling with a hard stop: keep drawing until `accept` holds.
    Raises GenerationError once `max_attempts` draws have been rejected.
    """
    limit = config.MAX_SAMPLING_ATTEMPTS if max_attempts is None else max_attempts
    for _ in range(limit):
        value = draw()
        if accept(value):
            return value
    logger.warning("rejection sampling gave up after %d attempts (%s)", limit, draw)
    raise GenerationError(f"no acceptable draw after {limit} attempts")
