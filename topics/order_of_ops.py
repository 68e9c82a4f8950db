# topics/order_of_ops.py
#
# Six expression shapes. Each shape evaluates itself in the order standard
# precedence dictates and records those steps as the hint, so the answer
# and the explanation come from the same arithmetic.
from __future__ import annotations

from typing import Optional

from rng import RandomSource, choice, rand_int
from schemas.questions import OrderOfOpsQuestion


def _shape1(rng: Optional[RandomSource]) -> OrderOfOpsQuestion:
    # a + b × c
    b = rand_int(2, 9, rng)
    c = rand_int(2, 9, rng)
    a = rand_int(1, 20, rng)
    product = b * c
    answer = a + product
    return OrderOfOpsQuestion(
        shape=1,
        expression=f"{a} + {b} × {c}",
        answer=answer,
        hint=(
            f"קודם כפל: {b} × {c} = {product}",
            f"אחר כך חיבור: {a} + {product} = {answer}",
        ),
    )


def _shape2(rng: Optional[RandomSource]) -> OrderOfOpsQuestion:
    # a × b - c
    a = rand_int(2, 9, rng)
    b = rand_int(2, 9, rng)
    product = a * b
    c = rand_int(1, product - 1, rng)
    answer = product - c
    return OrderOfOpsQuestion(
        shape=2,
        expression=f"{a} × {b} - {c}",
        answer=answer,
        hint=(
            f"קודם כפל: {a} × {b} = {product}",
            f"אחר כך חיסור: {product} - {c} = {answer}",
        ),
    )


def _shape3(rng: Optional[RandomSource]) -> OrderOfOpsQuestion:
    # a + b × c - d
    b = rand_int(2, 8, rng)
    c = rand_int(2, 8, rng)
    a = rand_int(1, 15, rng)
    product = b * c
    total = a + product
    d = rand_int(1, min(total - 1, 15), rng)
    answer = total - d
    return OrderOfOpsQuestion(
        shape=3,
        expression=f"{a} + {b} × {c} - {d}",
        answer=answer,
        hint=(
            f"קודם כפל: {b} × {c} = {product}",
            f"חיבור: {a} + {product} = {total}",
            f"חיסור: {total} - {d} = {answer}",
        ),
    )


def _shape4(rng: Optional[RandomSource]) -> OrderOfOpsQuestion:
    # (a + b) × c
    a = rand_int(2, 10, rng)
    b = rand_int(2, 10, rng)
    c = rand_int(2, 6, rng)
    paren = a + b
    answer = paren * c
    return OrderOfOpsQuestion(
        shape=4,
        expression=f"({a} + {b}) × {c}",
        answer=answer,
        hint=(
            f"קודם סוגריים: {a} + {b} = {paren}",
            f"אחר כך כפל: {paren} × {c} = {answer}",
        ),
    )


def _shape5(rng: Optional[RandomSource]) -> OrderOfOpsQuestion:
    # a × (b - c)
    c = rand_int(1, 8, rng)
    b = rand_int(c + 2, 15, rng)
    a = rand_int(2, 7, rng)
    paren = b - c
    answer = a * paren
    return OrderOfOpsQuestion(
        shape=5,
        expression=f"{a} × ({b} - {c})",
        answer=answer,
        hint=(
            f"קודם סוגריים: {b} - {c} = {paren}",
            f"אחר כך כפל: {a} × {paren} = {answer}",
        ),
    )


def _shape6(rng: Optional[RandomSource]) -> OrderOfOpsQuestion:
    # a ÷ b + c × d
    b = rand_int(2, 8, rng)
    quotient = rand_int(2, 10, rng)
    a = b * quotient
    c = rand_int(2, 7, rng)
    d = rand_int(2, 7, rng)
    product = c * d
    answer = quotient + product
    return OrderOfOpsQuestion(
        shape=6,
        expression=f"{a} ÷ {b} + {c} × {d}",
        answer=answer,
        hint=(
            "כפל וחילוק קודם (משמאל לימין):",
            f"{a} ÷ {b} = {quotient}",
            f"{c} × {d} = {product}",
            f"חיבור: {quotient} + {product} = {answer}",
        ),
    )


GENERATORS = (_shape1, _shape2, _shape3, _shape4, _shape5, _shape6)


def generate_question(rng: Optional[RandomSource] = None) -> OrderOfOpsQuestion:
    return choice(GENERATORS, rng)(rng)
