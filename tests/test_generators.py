import random

import pytest

from bank import generate_questions
from columns import has_borrow, has_carry, steps_to_digits
from errors import UnknownTopicError
from expressions import evaluate
from topics.arithmetic import apply_op

N = 300


def _batch(topic, seed=11, n=N):
    return generate_questions(topic, n, random.Random(seed))


def test_arithmetic_answers_are_exact():
    ops = set()
    for q in _batch("arithmetic"):
        ops.add(q.op)
        assert q.answer == apply_op(q.a, q.op, q.b)
        assert q.answer >= 0
        if q.op == "÷":
            assert q.a % q.b == 0
        assert q.hint
    assert ops == {"+", "-", "×", "÷"}


def test_apply_op_rejects_inexact_division():
    with pytest.raises(ValueError):
        apply_op(7, "÷", 2)


def test_order_of_ops_matches_standard_precedence():
    shapes = set()
    for q in _batch("orderOfOps"):
        shapes.add(q.shape)
        assert evaluate(q.expression) == q.answer
        assert q.answer >= 0
        assert q.hint[-1].endswith(f"= {q.answer}")
    assert shapes == {1, 2, 3, 4, 5, 6}


def test_decimal_structure_kinds():
    kinds = set()
    for q in _batch("decimalStructure"):
        kinds.add(q.kind)
        assert 1000 <= q.number <= 9999
        assert q.thousands * 1000 + q.hundreds * 100 + q.tens * 10 + q.ones == q.number
        if q.kind == "compose":
            assert q.thousands * 1000 + q.hundreds * 100 + q.tens * 10 + q.ones == q.answer
        elif q.kind == "decompose":
            assert q.answer in (q.thousands, q.hundreds, q.tens, q.ones)
        elif q.kind == "digitValue":
            assert q.answer > 0
            assert q.answer in (q.thousands * 1000, q.hundreds * 100, q.tens * 10, q.ones)
        else:
            a, b = (o.value for o in q.options)
            assert a != b
            assert q.answer == max(a, b)
            assert q.options[0].label == f"{a:,}"
    assert kinds == {"decompose", "compose", "digitValue", "compare"}


def test_distribution_partial_products():
    for q in _batch("distribution"):
        assert 11 <= q.two_digit <= 29
        assert 2 <= q.one_digit <= 9
        assert q.answer == q.two_digit * q.one_digit <= 200
        assert q.tens + q.ones == q.two_digit
        assert q.tens % 10 == 0
        assert q.tens_product + q.ones_product == q.answer


def test_vertical_math_carry_tags_match_simulator():
    variants = set()
    for q in _batch("verticalMath"):
        variants.add((q.mode, q.op, q.has_carry))
        if q.op == "+":
            assert q.answer == q.a + q.b
            assert has_carry(q.a, q.b) == q.has_carry
            assert any(s.carry_out for s in q.steps) == q.has_carry
        else:
            assert q.answer == q.a - q.b >= 0
            assert has_borrow(q.a, q.b) == q.has_carry
        if q.mode == "vertical":
            assert 100 <= q.b and q.a <= 999
        else:
            assert 10 <= q.b and q.a <= 99
            if q.op == "+":
                assert q.answer <= 99
    assert len(variants) == 8


def test_batches_are_exact_length_and_reproducible():
    a = generate_questions("verticalMath", 10, random.Random(5))
    b = generate_questions("verticalMath", 10, random.Random(5))
    assert len(a) == 10
    assert a == b


def test_unknown_topic():
    with pytest.raises(UnknownTopicError):
        generate_questions("geometry", 10)


def test_count_must_be_positive():
    with pytest.raises(ValueError):
        generate_questions("arithmetic", 0)


def test_vertical_math_answer_matches_column_trace():
    for q in _batch("verticalMath", seed=23):
        assert steps_to_digits(q.steps) == q.answer
