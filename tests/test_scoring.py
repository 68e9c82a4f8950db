import random

import pytest

from schemas.marking import DistributionSteps
from scoring import QuizSession, get_stars


@pytest.mark.parametrize(
    "score,total,stars",
    [(10, 10, 3), (9, 10, 3), (8, 10, 2), (6, 10, 2), (5, 10, 1), (0, 10, 1), (3, 5, 2), (9, 9, 3)],
)
def test_get_stars(score, total, stars):
    assert get_stars(score, total) == stars


def test_get_stars_needs_positive_total():
    with pytest.raises(ValueError):
        get_stars(0, 0)


def test_full_session_all_correct():
    s = QuizSession.start("arithmetic", rng=random.Random(2))
    assert s.total == 10
    seen = 0
    while True:
        res = s.submit(s.current.answer)
        assert res.correct
        seen += 1
        if not s.advance():
            break
    assert seen == 10
    assert s.finished
    assert s.score == 10
    assert s.stars == 3


def test_only_first_attempt_counts():
    s = QuizSession.start("distribution", total=3, rng=random.Random(9))
    wrong = s.submit(s.current.answer + 1)
    assert wrong.ok and not wrong.correct
    again = s.submit(s.current.answer)
    assert again.expected == str(s.current.answer)
    assert again.score == 0
    assert s.score == 0


def test_malformed_input_is_not_an_attempt():
    s = QuizSession.start("orderOfOps", total=2, rng=random.Random(1))
    bad = s.submit("abc")
    assert not bad.ok
    assert not s.answered
    assert s.submit(str(s.current.answer)).correct
    assert s.score == 1


def test_cannot_skip_questions():
    s = QuizSession.start("verticalMath", total=2, rng=random.Random(1))
    with pytest.raises(RuntimeError):
        s.advance()


def test_restart_gives_fresh_session():
    s = QuizSession.start("triangles", rng=random.Random(6))
    s.submit(s.current.answer)
    fresh = s.restart()
    assert fresh.topic == "triangles"
    assert fresh.total == 10
    assert fresh.index == 0 and fresh.score == 0


def test_distribution_steps_must_all_be_right():
    s = QuizSession.start("distribution", total=2, rng=random.Random(4))
    q = s.current
    wrong_product = DistributionSteps(
        tens=q.tens, ones=q.ones, tens_product=q.tens_product + 1, ones_product=q.ones_product
    )
    res = s.submit(q.answer, wrong_product)
    assert res.ok and not res.correct
    assert res.stages["multiply"] is False
    assert s.score == 0

    s.advance()
    q = s.current
    right = DistributionSteps(
        tens=q.tens, ones=q.ones, tens_product=q.tens_product, ones_product=q.ones_product
    )
    assert s.submit(q.answer, right).correct
    assert s.score == 1
