import pytest

from errors import GenerationError
from sampling import sample_until


def test_returns_first_accepted():
    draws = iter([1, 3, 4, 6])
    assert sample_until(lambda: next(draws), lambda x: x % 2 == 0) == 4


def test_gives_up_loudly():
    calls = []

    def draw():
        calls.append(1)
        return 1

    with pytest.raises(GenerationError):
        sample_until(draw, lambda x: x > 1, max_attempts=25)
    assert len(calls) == 25


def test_default_cap_from_config(monkeypatch):
    import config

    monkeypatch.setattr(config, "MAX_SAMPLING_ATTEMPTS", 3)
    with pytest.raises(GenerationError):
        sample_until(lambda: 0, lambda x: False)
