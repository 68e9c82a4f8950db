# topics/arithmetic.py
from __future__ import annotations

from typing import Optional

from rng import RandomSource, choice, rand_int
from schemas.questions import ArithmeticQuestion


def _addition(rng: Optional[RandomSource]) -> ArithmeticQuestion:
    a = rand_int(10, 99, rng)
    b = rand_int(10, 99, rng)
    answer = a + b
    return ArithmeticQuestion(
        a=a,
        b=b,
        op="+",
        answer=answer,
        hint=(f"{a} + {b} = ?", f"נחבר: {a} + {b} = {answer}"),
    )


def _subtraction(rng: Optional[RandomSource]) -> ArithmeticQuestion:
    # built backwards from the result so it is never negative
    answer = rand_int(5, 80, rng)
    b = rand_int(5, 50, rng)
    a = answer + b
    return ArithmeticQuestion(
        a=a,
        b=b,
        op="-",
        answer=answer,
        hint=(f"{a} - {b} = ?", f"נחסיר: {a} - {b} = {answer}"),
    )


def _multiplication(rng: Optional[RandomSource]) -> ArithmeticQuestion:
    a = rand_int(2, 10, rng)
    b = rand_int(2, 10, rng)
    answer = a * b
    return ArithmeticQuestion(
        a=a,
        b=b,
        op="×",
        answer=answer,
        hint=(
            f"{a} × {b} = ?",
            f"נכפול: {a} × {b} = {answer}",
            f"(כלומר {a} פעמים {b})",
        ),
    )


def _division(rng: Optional[RandomSource]) -> ArithmeticQuestion:
    # dividend = divisor * quotient, so the division is always exact
    b = rand_int(2, 10, rng)
    answer = rand_int(2, 10, rng)
    a = b * answer
    return ArithmeticQuestion(
        a=a,
        b=b,
        op="÷",
        answer=answer,
        hint=(
            f"{a} ÷ {b} = ?",
            f"נחשוב: כמה פעמים {b} נכנס ב-{a}?",
            f"{b} × {answer} = {a}",
            f"לכן {a} ÷ {b} = {answer}",
        ),
    )


GENERATORS = (_addition, _subtraction, _multiplication, _division)


def generate_question(rng: Optional[RandomSource] = None) -> ArithmeticQuestion:
    return choice(GENERATORS, rng)(rng)


def apply_op(a: int, op: str, b: int) -> int:
    """Exact integer evaluation of `a op b`; division must leave no remainder."""
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "×":
        return a * b
    if op == "÷":
        q, r = divmod(a, b)
        if r:
            raise ValueError(f"{a} ÷ {b} is not exact")
        return q
    raise ValueError(f"unsupported operator: {op!r}")
