# topics/triangles.py
#
# Triangle classification by angles and by sides. The pool is a fixed set
# of point triples (SVG coordinates); side lengths and angles are derived
# from the coordinates once, at import time.
from __future__ import annotations

import math
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from rng import RandomSource, rand_int, shuffle
from schemas.questions import Option, TriangleQuestion

Point = Tuple[int, int]

# one side unit per this many SVG pixels
SIDE_UNIT = 20
# raw lengths this close (relative) are drawn and labelled as equal
EQUAL_SIDE_TOLERANCE = 0.05
SNAP_ORDER = ((0, 1), (1, 2), (0, 2))

ANGLE_LABELS: Dict[str, str] = {
    "acute": "משולש חד-זווית",
    "right": "משולש ישר-זווית",
    "obtuse": "משולש קהה-זווית",
}

SIDE_LABELS: Dict[str, str] = {
    "equilateral": "משולש שווה-צלעות",
    "isosceles": "משולש שווה-שוקיים",
    "scalene": "משולש שונה-צלעות",
}

ANGLE_HINTS: Dict[str, Tuple[str, ...]] = {
    "acute": (
        "משולש חד-זווית הוא משולש שכל הזוויות שלו קטנות מ-90°",
        "שלוש הזוויות חדות (פחות מ-90°)",
    ),
    "right": (
        "משולש ישר-זווית הוא משולש שיש בו זווית אחת של 90° בדיוק",
        "שימו לב לסימון הריבוע בזווית",
    ),
    "obtuse": (
        "משולש קהה-זווית הוא משולש שיש בו זווית אחת גדולה מ-90°",
        "אחת הזוויות רחבה (יותר מ-90°)",
    ),
}

SIDE_HINTS: Dict[str, Tuple[str, ...]] = {
    "equilateral": (
        "משולש שווה-צלעות: כל שלוש הצלעות שוות באורכן",
        "שימו לב: כל הצלעות באותו אורך",
    ),
    "isosceles": (
        "משולש שווה-שוקיים: שתי צלעות שוות באורכן",
        "שימו לב: יש שתי צלעות באותו אורך",
    ),
    "scalene": (
        "משולש שונה-צלעות: כל הצלעות באורך שונה",
        "שימו לב: אין שתי צלעות שוות",
    ),
}

POINTS: Tuple[Tuple[Point, Point, Point], ...] = (
    # equilateral
    ((150, 27), (50, 200), (250, 200)),
    ((150, 10), (40, 200), (260, 200)),
    # right isosceles
    ((50, 200), (50, 50), (200, 200)),
    # right scalene
    ((50, 200), (50, 50), (250, 200)),
    ((40, 210), (40, 60), (220, 210)),
    ((60, 200), (60, 80), (260, 200)),
    # acute isosceles
    ((150, 20), (90, 200), (210, 200)),
    ((150, 40), (70, 200), (230, 200)),
    # acute scalene
    ((120, 30), (40, 200), (250, 180)),
    ((121, 74), (40, 200), (250, 200)),
    # obtuse isosceles
    ((150, 116), (40, 180), (260, 180)),
    ((150, 100), (30, 200), (270, 200)),
    # obtuse scalene
    ((90, 150), (30, 200), (270, 200)),
    ((100, 120), (20, 190), (260, 210)),
)


class Triangle(NamedTuple):
    points: Tuple[Point, Point, Point]
    sides: Tuple[int, int, int]
    angles: Tuple[int, int, int]
    angle_type: str
    side_type: str


def classify_angles(angles: Sequence[int]) -> str:
    if any(a == 90 for a in angles):
        return "right"
    if any(a > 90 for a in angles):
        return "obtuse"
    return "acute"


def classify_sides(sides: Sequence[int]) -> str:
    distinct = len(set(sides))
    if distinct == 1:
        return "equilateral"
    if distinct == 2:
        return "isosceles"
    return "scalene"


def _distance(p: Point, q: Point) -> float:
    return math.hypot(q[0] - p[0], q[1] - p[1])


def _angle_at(vertex: Point, p: Point, q: Point) -> float:
    ux, uy = p[0] - vertex[0], p[1] - vertex[1]
    vx, vy = q[0] - vertex[0], q[1] - vertex[1]
    cos = (ux * vx + uy * vy) / (math.hypot(ux, uy) * math.hypot(vx, vy))
    return math.degrees(math.acos(max(-1.0, min(1.0, cos))))


def normalize_angles(raw: Sequence[float]) -> List[int]:
    """Round to whole degrees, then fix the sum at 180 via the smallest angle."""
    angles = [round(a) for a in raw]
    smallest = angles.index(min(angles))
    angles[smallest] += 180 - sum(angles)
    return angles


def normalize_sides(raw: Sequence[float], unit: float = SIDE_UNIT) -> List[int]:
    """
    Rescale pixel lengths to small integers. Pairs whose raw lengths are
    within EQUAL_SIDE_TOLERANCE are snapped together, in SNAP_ORDER, the
    second side taking the first side's value.
    """
    sides = [max(1, round(d / unit)) for d in raw]
    for i, j in SNAP_ORDER:
        if abs(raw[i] - raw[j]) / max(raw[i], raw[j]) <= EQUAL_SIDE_TOLERANCE:
            sides[j] = sides[i]
    return sides


def measure(points: Tuple[Point, Point, Point]) -> Triangle:
    # side i runs from point i to point i+1; angle i sits at point i
    raw_sides = [_distance(points[i], points[(i + 1) % 3]) for i in range(3)]
    raw_angles = [_angle_at(points[i], points[(i + 1) % 3], points[(i + 2) % 3]) for i in range(3)]

    sides = tuple(normalize_sides(raw_sides))
    angles = tuple(normalize_angles(raw_angles))
    return Triangle(
        points=points,
        sides=sides,
        angles=angles,
        angle_type=classify_angles(angles),
        side_type=classify_sides(sides),
    )


POOL: Tuple[Triangle, ...] = tuple(measure(p) for p in POINTS)


def make_question(tri: Triangle, mode: str) -> TriangleQuestion:
    if mode == "angles":
        answer, labels, hints = tri.angle_type, ANGLE_LABELS, ANGLE_HINTS[tri.angle_type]
        detail = "הזוויות: " + ", ".join(f"{a}°" for a in tri.angles)
    elif mode == "sides":
        answer, labels, hints = tri.side_type, SIDE_LABELS, SIDE_HINTS[tri.side_type]
        detail = "אורכי הצלעות: " + ", ".join(str(s) for s in tri.sides)
    else:
        raise ValueError(f"unknown classification mode: {mode!r}")

    return TriangleQuestion(
        points=tri.points,
        sides=tri.sides,
        angles=tri.angles,
        angle_type=tri.angle_type,
        side_type=tri.side_type,
        mode=mode,
        answer=answer,
        options=tuple(Option(value=k, label=v) for k, v in labels.items()),
        hint=(*hints, detail),
    )


def get_triangle_questions(
    count: int, rng: Optional[RandomSource] = None, pool: Sequence[Triangle] = POOL
) -> List[TriangleQuestion]:
    """
    Shuffle the pool and deal `count` triangles from it, dealing the same
    shuffled order again if more are asked for than the pool holds.
    """
    if not pool:
        raise ValueError("triangle pool is empty")
    dealt = shuffle(pool, rng)
    picked: List[Triangle] = []
    while len(picked) < count:
        picked.extend(dealt)
    return [
        make_question(tri, "angles" if rand_int(0, 1, rng) == 0 else "sides")
        for tri in picked[:count]
    ]

