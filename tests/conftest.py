import pytest


class SequenceRandom:
    """Replays a fixed list of floats in [0, 1), cycling when exhausted."""

    def __init__(self, values):
        self.values = list(values)
        self.i = 0

    def random(self):
        v = self.values[self.i % len(self.values)]
        self.i += 1
        return v


@pytest.fixture
def sequence_random():
    return SequenceRandom
