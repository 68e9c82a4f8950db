# topics/vertical_math.py
#
# Column addition and subtraction, with and without carrying/borrowing.
# Vertical problems use three-digit operands, horizontal ones two-digit.
# Every variant draws operand pairs until the column simulator agrees with
# the variant's carry/borrow tag.
from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from columns import addition_steps, has_borrow, has_carry, steps_to_digits, subtraction_steps
from rng import RandomSource, choice, rand_int
from sampling import sample_until
from schemas.questions import VerticalMathQuestion

Pair = Tuple[int, int]


def _add_hint(a: int, b: int, answer: int, carry: bool) -> Tuple[str, ...]:
    lines: List[str] = [f"{a} + {b} = ?"]
    if carry:
        lines.append("שימו לב: יש המרה (נשאה)!")
        a_ones, b_ones = a % 10, b % 10
        ones_sum = a_ones + b_ones
        if ones_sum >= 10:
            lines.append(
                f"יחידות: {a_ones} + {b_ones} = {ones_sum} → כותבים {ones_sum % 10} ומעבירים 1"
            )
    lines.append(f"התשובה: {a} + {b} = {answer}")
    return tuple(lines)


def _sub_hint(a: int, b: int, answer: int, borrow: bool) -> Tuple[str, ...]:
    lines: List[str] = [f"{a} - {b} = ?"]
    if borrow:
        lines.append("שימו לב: יש פריטה (הלוואה)!")
        a_ones, b_ones = a % 10, b % 10
        if a_ones < b_ones:
            lines.append(f"יחידות: {a_ones} < {b_ones} → לוקחים 1 מהעשרות")
            lines.append(f"{a_ones + 10} - {b_ones} = {a_ones + 10 - b_ones}")
    lines.append(f"התשובה: {a} - {b} = {answer}")
    return tuple(lines)


def _addition(
    rng: Optional[RandomSource], mode: str, lo: int, hi: int, max_sum: int, carry: bool
) -> VerticalMathQuestion:
    a, b = sample_until(
        lambda: (rand_int(lo, hi, rng), rand_int(lo, hi, rng)),
        lambda p: has_carry(*p) == carry and p[0] + p[1] <= max_sum,
    )
    steps = addition_steps(a, b)
    # the answer is read off the column trace the learner is shown
    answer = steps_to_digits(steps)
    return VerticalMathQuestion(
        a=a,
        b=b,
        op="+",
        answer=answer,
        mode=mode,
        has_carry=carry,
        steps=tuple(steps),
        hint=_add_hint(a, b, answer, carry),
    )


def _subtraction(
    rng: Optional[RandomSource],
    mode: str,
    a_range: Pair,
    b_low: int,
    gap: int,
    borrow: bool,
) -> VerticalMathQuestion:
    # b never exceeds a - gap, so the difference stays non-negative
    def draw() -> Pair:
        a = rand_int(a_range[0], a_range[1], rng)
        return a, rand_int(b_low, a - gap, rng)

    a, b = sample_until(draw, lambda p: has_borrow(*p) == borrow)
    steps = subtraction_steps(a, b)
    answer = steps_to_digits(steps)
    return VerticalMathQuestion(
        a=a,
        b=b,
        op="-",
        answer=answer,
        mode=mode,
        has_carry=borrow,
        steps=tuple(steps),
        hint=_sub_hint(a, b, answer, borrow),
    )


# --- vertical: three-digit operands ---


def vertical_add_no_carry(rng: Optional[RandomSource] = None) -> VerticalMathQuestion:
    return _addition(rng, "vertical", 100, 899, 999, carry=False)


def vertical_add_with_carry(rng: Optional[RandomSource] = None) -> VerticalMathQuestion:
    return _addition(rng, "vertical", 100, 899, 9999, carry=True)


def vertical_sub_no_borrow(rng: Optional[RandomSource] = None) -> VerticalMathQuestion:
    return _subtraction(rng, "vertical", (200, 999), 100, 100, borrow=False)


def vertical_sub_with_borrow(rng: Optional[RandomSource] = None) -> VerticalMathQuestion:
    return _subtraction(rng, "vertical", (200, 999), 100, 10, borrow=True)


# --- horizontal: two-digit operands ---


def horizontal_add_no_carry(rng: Optional[RandomSource] = None) -> VerticalMathQuestion:
    return _addition(rng, "horizontal", 10, 89, 99, carry=False)


def horizontal_add_with_carry(rng: Optional[RandomSource] = None) -> VerticalMathQuestion:
    return _addition(rng, "horizontal", 10, 89, 99, carry=True)


def horizontal_sub_no_borrow(rng: Optional[RandomSource] = None) -> VerticalMathQuestion:
    return _subtraction(rng, "horizontal", (20, 99), 10, 5, borrow=False)


def horizontal_sub_with_borrow(rng: Optional[RandomSource] = None) -> VerticalMathQuestion:
    return _subtraction(rng, "horizontal", (20, 99), 10, 5, borrow=True)


GENERATORS: Tuple[Callable[[Optional[RandomSource]], VerticalMathQuestion], ...] = (
    vertical_add_no_carry,
    vertical_add_with_carry,
    vertical_sub_no_borrow,
    vertical_sub_with_borrow,
    horizontal_add_no_carry,
    horizontal_add_with_carry,
    horizontal_sub_no_borrow,
    horizontal_sub_with_borrow,
)


def generate_question(rng: Optional[RandomSource] = None) -> VerticalMathQuestion:
    return choice(GENERATORS, rng)(rng)
