import random
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import timeline_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


class ConstantRandom(random.Random):
    """Random source whose random() always returns the same value.

    uniform() is derived from random(), so every draw lands at the same
    relative point of its interval. Counts calls to random().
    """

    def __init__(self, value: float = 0.5):
        super().__init__(0)
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


# Common test fixtures
@pytest.fixture
def seeded_rng():
    """Return a deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def constant_rng():
    """Return a random source that always draws the interval midpoint."""
    return ConstantRandom(0.5)


@pytest.fixture
def opinions():
    """Eight opaque opinion payloads."""
    return [{"id": f"op-{i}", "opinion": f"Opinion {i}"} for i in range(8)]
