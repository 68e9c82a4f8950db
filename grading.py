# grading.py
#
# Marks a single answer against the question it was given for. Malformed
# input comes back in-band (ok=False) rather than as an exception, like the
# marking endpoints expect.
from __future__ import annotations

import re
from typing import Any, Optional, Union

from catalog import ENCOURAGEMENTS, WRONG_MESSAGES
from rng import RandomSource, choice
from schemas.marking import DistributionSteps, MarkResponse
from schemas.questions import DistributionQuestion, TriangleQuestion
from topics.triangles import ANGLE_LABELS, SIDE_LABELS

LEN_LIMIT = 20
_NUMBER_RE = re.compile(r"^[+-]?(\d{1,3}(,\d{3})+|\d+)$")
_NUMBER_MSG = "התשובה צריכה להיות מספר שלם."
_REQUIRED_MSG = "נא לכתוב תשובה."
_TOO_LONG_MSG = f"התשובה ארוכה מדי (> {LEN_LIMIT})."


def parse_int_answer(answer: Union[str, int]) -> Union[int, str]:
    """Return the integer, or a feedback message when the text is not one."""
    if isinstance(answer, bool):
        return _NUMBER_MSG
    if isinstance(answer, int):
        return answer
    s = (answer or "").strip()
    if not s:
        return _REQUIRED_MSG
    if len(s) > LEN_LIMIT:
        return _TOO_LONG_MSG
    if _NUMBER_RE.fullmatch(s) is None:
        return _NUMBER_MSG
    return int(s.replace(",", ""))


def parse_choice_answer(q: TriangleQuestion, answer: Union[str, int]) -> Optional[str]:
    """Accept a category key ("acute") or its Hebrew label."""
    if not isinstance(answer, str):
        return None
    s = answer.strip()
    labels = ANGLE_LABELS if q.mode == "angles" else SIDE_LABELS
    if s.lower() in labels:
        return s.lower()
    for key, label in labels.items():
        if s == label:
            return key
    return None


def expected_text(q: Any) -> str:
    if isinstance(q, TriangleQuestion):
        labels = ANGLE_LABELS if q.mode == "angles" else SIDE_LABELS
        return labels[q.answer]
    return str(q.answer)


def _invalid(q: Any, feedback: str) -> MarkResponse:
    return MarkResponse(
        ok=False,
        correct=False,
        score=0,
        feedback=feedback,
        expected=expected_text(q),
    )


def mark_distribution(
    q: DistributionQuestion,
    tens: Union[str, int],
    ones: Union[str, int],
    tens_product: Union[str, int],
    ones_product: Union[str, int],
    total: Union[str, int],
    rng: Optional[RandomSource] = None,
) -> MarkResponse:
    """
    Grade the three stages of a split multiplication: the split of the
    two-digit factor, both partial products, and their sum. The question
    scores only when every stage is right.
    """
    values = []
    for raw in (tens, ones, tens_product, ones_product, total):
        parsed = parse_int_answer(raw)
        if isinstance(parsed, str):
            return _invalid(q, parsed)
        values.append(parsed)
    t, o, tp, op, s = values

    stages = {
        "split": (t, o) == (q.tens, q.ones),
        "multiply": (tp, op) == (q.tens_product, q.ones_product),
        "sum": s == q.answer,
    }
    correct = all(stages.values())

    if correct:
        feedback = choice(ENCOURAGEMENTS, rng)
    elif not stages["split"]:
        feedback = f"לא בדיוק... {q.two_digit} = {q.tens} + {q.ones}"
    elif not stages["multiply"]:
        feedback = (
            f"{q.tens} × {q.one_digit} = {q.tens_product} | "
            f"{q.ones} × {q.one_digit} = {q.ones_product}"
        )
    else:
        feedback = choice(WRONG_MESSAGES, rng)

    return MarkResponse(
        ok=True,
        correct=correct,
        score=1 if correct else 0,
        feedback=feedback,
        expected=expected_text(q),
        hint=() if correct else tuple(q.hint),
        stages=stages,
    )


def mark_answer(
    q: Any,
    answer: Union[str, int],
    rng: Optional[RandomSource] = None,
    steps: Optional[DistributionSteps] = None,
) -> MarkResponse:
    if steps is not None:
        if not isinstance(q, DistributionQuestion):
            return _invalid(q, "שלבי פתרון מתאימים רק לתרגילי פילוג.")
        return mark_distribution(
            q, steps.tens, steps.ones, steps.tens_product, steps.ones_product, answer, rng
        )

    if isinstance(q, TriangleQuestion):
        picked = parse_choice_answer(q, answer)
        if picked is None:
            labels = ANGLE_LABELS if q.mode == "angles" else SIDE_LABELS
            return _invalid(q, "יש לבחור אחת מהאפשרויות: " + ", ".join(labels))
        correct = picked == q.answer
    else:
        parsed = parse_int_answer(answer)
        if isinstance(parsed, str):
            return _invalid(q, parsed)
        correct = parsed == q.answer

    return MarkResponse(
        ok=True,
        correct=correct,
        score=1 if correct else 0,
        feedback=choice(ENCOURAGEMENTS if correct else WRONG_MESSAGES, rng),
        expected=expected_text(q),
        hint=() if correct else tuple(q.hint),
    )
