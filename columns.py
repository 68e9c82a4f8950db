# Digit-column simulator for long addition and subtraction.
#
# Steps run from the ones column leftwards over zero-padded operands. The
# same trace drives the carry/borrow checks used by the vertical-math
# generator and the step-by-step solution shown to the learner.

from __future__ import annotations

from typing import List, Tuple

from schemas.questions import ColumnStep

PLACE_NAMES = ("יחידות", "עשרות", "מאות", "אלפים")


def _place(col: int) -> str:
    if col < len(PLACE_NAMES):
        return PLACE_NAMES[col]
    return f"טור {col + 1}"


def _padded_digits(a: int, b: int) -> List[Tuple[int, int]]:
    """Digit pairs, least significant first."""
    a_str, b_str = str(a), str(b)
    width = max(len(a_str), len(b_str))
    a_str, b_str = a_str.zfill(width), b_str.zfill(width)
    return [(int(x), int(y)) for x, y in zip(reversed(a_str), reversed(b_str))]


def addition_steps(a: int, b: int) -> List[ColumnStep]:
    if a < 0 or b < 0:
        raise ValueError("column addition needs non-negative operands")

    steps: List[ColumnStep] = []
    carry = 0
    for col, (da, db) in enumerate(_padded_digits(a, b)):
        total = da + db + carry
        result, carry_out = total % 10, total // 10
        place = _place(col)

        expr = f"{da} + {db} + {carry} = {total}" if carry else f"{da} + {db} = {total}"
        label = f"{place}: כותבים {result}, נשיאה {carry_out}" if carry_out else f"{place}:"

        steps.append(
            ColumnStep(
                place=place,
                digit_a=da,
                digit_b=db,
                carry_in=carry,
                result=result,
                carry_out=carry_out,
                label=label,
                expr=expr,
            )
        )
        carry = carry_out

    if carry:
        place = _place(len(steps))
        steps.append(
            ColumnStep(
                place=place,
                digit_a=0,
                digit_b=0,
                carry_in=carry,
                result=carry,
                carry_out=0,
                label=f"{place}: כותבים {carry} (נשיאה)",
                expr="",
            )
        )
    return steps


def subtraction_steps(a: int, b: int) -> List[ColumnStep]:
    if b < 0 or a < b:
        raise ValueError("column subtraction needs a >= b >= 0")

    steps: List[ColumnStep] = []
    borrow = 0
    for col, (da, db) in enumerate(_padded_digits(a, b)):
        current = da - borrow
        place = _place(col)

        if current < db:
            borrow_out = 1
            result = current + 10 - db
            expr = f"{current + 10} - {db} = {result}"
            if borrow:
                label = f"{place}: אחרי פריטה קודמת, {current} קטן מ-{db}, פריטה!"
            else:
                label = f"{place}: {da} קטן מ-{db}, פריטה!"
        else:
            borrow_out = 0
            result = current - db
            expr = f"{current} - {db} = {result}"
            label = f"{place}: אחרי פריטה" if borrow else f"{place}:"

        steps.append(
            ColumnStep(
                place=place,
                digit_a=da,
                digit_b=db,
                carry_in=borrow,
                result=result,
                carry_out=borrow_out,
                label=label,
                expr=expr,
            )
        )
        borrow = borrow_out
    return steps


def column_steps(a: int, b: int, op: str) -> List[ColumnStep]:
    if op == "+":
        return addition_steps(a, b)
    if op == "-":
        return subtraction_steps(a, b)
    raise ValueError(f"unsupported column operator: {op!r}")


def has_carry(a: int, b: int) -> bool:
    return any(s.carry_out for s in addition_steps(a, b))


def has_borrow(a: int, b: int) -> bool:
    return any(s.carry_out for s in subtraction_steps(a, b))


def steps_to_digits(steps: List[ColumnStep]) -> int:
    """Read the result back off a trace (most significant column first)."""
    return int("".join(str(s.result) for s in reversed(steps)) or "0")
