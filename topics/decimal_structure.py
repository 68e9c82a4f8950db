# topics/decimal_structure.py
#
# Place-value questions on four-digit numbers: decompose, compose,
# positional value of a digit, and which of two numbers is larger.
from __future__ import annotations

from typing import Dict, Optional

from rng import RandomSource, choice, rand_int
from sampling import sample_until
from schemas.questions import DecimalQuestion, Option

LOW, HIGH = 1000, 9999

# (field, Hebrew place name, positional multiplier), most significant first
PLACES = (
    ("thousands", "אלפים", 1000),
    ("hundreds", "מאות", 100),
    ("tens", "עשרות", 10),
    ("ones", "יחידות", 1),
)


def decompose(n: int) -> Dict[str, int]:
    return {
        "thousands": n // 1000,
        "hundreds": (n % 1000) // 100,
        "tens": (n % 100) // 10,
        "ones": n % 10,
    }


def fmt(n: int) -> str:
    return f"{n:,}"


def _decompose(rng: Optional[RandomSource]) -> DecimalQuestion:
    n = rand_int(LOW, HIGH, rng)
    d = decompose(n)
    field, place, _ = PLACES[rand_int(0, len(PLACES) - 1, rng)]
    answer = d[field]
    return DecimalQuestion(
        kind="decompose",
        number=n,
        **d,
        prompt=f"כמה {place} יש במספר {fmt(n)}?",
        answer=answer,
        hint=(
            f"{fmt(n)} = {d['thousands']} אלפים, {d['hundreds']} מאות, "
            f"{d['tens']} עשרות, {d['ones']} יחידות",
            f"מספר ה{place}: {answer}",
        ),
    )


def _compose(rng: Optional[RandomSource]) -> DecimalQuestion:
    th = rand_int(1, 9, rng)
    h = rand_int(0, 9, rng)
    t = rand_int(0, 9, rng)
    o = rand_int(0, 9, rng)
    n = th * 1000 + h * 100 + t * 10 + o
    return DecimalQuestion(
        kind="compose",
        number=n,
        thousands=th,
        hundreds=h,
        tens=t,
        ones=o,
        prompt=f"{th} אלפים, {h} מאות, {t} עשרות ו-{o} יחידות = ?",
        answer=n,
        hint=(
            f"{th} אלפים = {th * 1000}",
            f"{h} מאות = {h * 100}",
            f"{t} עשרות = {t * 10}",
            f"{o} יחידות = {o}",
            f"{th * 1000} + {h * 100} + {t * 10} + {o} = {n}",
        ),
    )


def _digit_value(rng: Optional[RandomSource]) -> DecimalQuestion:
    n = rand_int(LOW, HIGH, rng)
    d = decompose(n)
    # zero digits make a pointless question; thousands is never zero here
    candidates = [p for p in PLACES if d[p[0]] > 0] or [PLACES[0]]
    field, place, multiplier = choice(candidates, rng)
    digit = d[field]
    value = digit * multiplier
    return DecimalQuestion(
        kind="digitValue",
        number=n,
        **d,
        prompt=f"מה הערך של הספרה {digit} במספר {fmt(n)}?",
        answer=value,
        hint=(
            f"הספרה {digit} נמצאת במקום ה{place}",
            f"ערכה: {digit} × {multiplier} = {value}",
        ),
    )


def _compare(rng: Optional[RandomSource]) -> DecimalQuestion:
    a = rand_int(LOW, HIGH, rng)
    b = sample_until(lambda: rand_int(LOW, HIGH, rng), lambda x: x != a)
    bigger = max(a, b)
    return DecimalQuestion(
        kind="compare",
        number=a,
        **decompose(a),
        prompt="איזה מספר גדול יותר?",
        answer=bigger,
        options=(Option(value=a, label=fmt(a)), Option(value=b, label=fmt(b))),
        hint=(
            "נשווה ספרה ספרה מהשמאל:",
            f"{fmt(a)} {'>' if a > b else '<'} {fmt(b)}",
            f"לכן {fmt(bigger)} גדול יותר",
        ),
    )


GENERATORS = (_decompose, _compose, _digit_value, _compare)


def generate_question(rng: Optional[RandomSource] = None) -> DecimalQuestion:
    return choice(GENERATORS, rng)(rng)
