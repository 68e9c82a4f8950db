import random

import pytest

from topics.triangles import (
    ANGLE_LABELS,
    POINTS,
    POOL,
    SIDE_LABELS,
    classify_angles,
    classify_sides,
    get_triangle_questions,
    make_question,
    measure,
    normalize_angles,
    normalize_sides,
)


def test_equilateral_is_acute():
    assert classify_sides([7, 7, 7]) == "equilateral"
    assert classify_angles([60, 60, 60]) == "acute"


def test_any_exact_right_angle_wins():
    assert classify_angles([90, 45, 45]) == "right"
    assert classify_angles([30, 60, 90]) == "right"
    assert classify_angles([100, 40, 40]) == "obtuse"
    assert classify_angles([89, 46, 45]) == "acute"


def test_side_classes():
    assert classify_sides([8, 8, 12]) == "isosceles"
    assert classify_sides([5, 8, 9]) == "scalene"


def test_angles_always_sum_to_180():
    for tri in POOL:
        assert sum(tri.angles) == 180
        assert all(a > 0 for a in tri.angles)
        assert tri.angle_type == classify_angles(tri.angles)
        assert tri.side_type == classify_sides(tri.sides)


def test_normalize_angles_adjusts_smallest():
    assert normalize_angles([60.6, 60.6, 58.8]) == [61, 61, 58]
    assert normalize_angles([90.0, 44.6, 44.6]) == [90, 45, 45]


def test_near_equal_sides_snap_in_order():
    # 197.2 and 200 are within 5%, so the later side copies the earlier one
    assert normalize_sides([197.2, 200.0, 197.2]) == [10, 10, 10]
    assert normalize_sides([150.0, 250.0, 200.0]) == [8, 12, 10]


def test_axis_aligned_right_triangle():
    tri = measure(((50, 200), (50, 50), (250, 200)))
    assert tri.angles[0] == 90
    assert tri.angle_type == "right"
    assert tri.side_type == "scalene"


def test_pool_covers_every_class():
    assert len(POOL) == len(POINTS) == 14
    assert {t.angle_type for t in POOL} == set(ANGLE_LABELS)
    assert {t.side_type for t in POOL} == set(SIDE_LABELS)


def test_ten_questions_from_the_pool_without_repeats():
    qs = get_triangle_questions(10, random.Random(4))
    assert len(qs) == 10
    points = [q.points for q in qs]
    assert len(set(points)) == 10
    assert set(points) <= set(POINTS)


def test_more_questions_than_pool_repeats_the_deal():
    qs = get_triangle_questions(20, random.Random(4))
    assert len(qs) == 20
    assert [q.points for q in qs[14:]] == [q.points for q in qs[:6]]


def test_question_answer_follows_mode():
    tri = POOL[0]
    by_angles = make_question(tri, "angles")
    by_sides = make_question(tri, "sides")
    assert by_angles.answer == tri.angle_type
    assert by_sides.answer == tri.side_type
    assert {o.value for o in by_sides.options} == set(SIDE_LABELS)
    with pytest.raises(ValueError):
        make_question(tri, "area")


def test_equal_sides_face_equal_angles():
    # side i joins point i and i+1, so the angle facing it sits at point i+2
    for tri in POOL:
        for i in range(3):
            for j in range(i + 1, 3):
                if tri.sides[i] == tri.sides[j]:
                    assert tri.angles[(i + 2) % 3] == tri.angles[(j + 2) % 3], tri


def test_obtuse_isosceles_angles_round_cleanly():
    tri = measure(((150, 116), (40, 180), (260, 180)))
    assert tri.sides == (6, 11, 6)
    assert tri.angles == (120, 30, 30)
    assert (tri.angle_type, tri.side_type) == ("obtuse", "isosceles")
