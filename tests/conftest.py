import os
from datetime import datetime

import pytest

from vitalwatch.vitals.generator import VitalsGenerator

NOW = datetime(2024, 3, 1, 12, 0, 0)


class ScriptedRng:
    """
    Deterministic stand-in for random.Random.
    random(): pops from `randoms`, then returns 0.99 (never spikes at 0.03)
    uniform(a, b): the point at `frac` of the way from a to b (0.5 = no noise)
    choice(seq): `pick` if given, else seq[0]
    """

    def __init__(self, randoms=(), pick=None, frac=0.5):
        self.randoms = list(randoms)
        self.pick = pick
        self.frac = frac
        self.choices = 0

    def random(self):
        if self.randoms:
            return self.randoms.pop(0)
        return 0.99

    def uniform(self, a, b):
        return a + (b - a) * self.frac

    def choice(self, seq):
        self.choices += 1
        return self.pick if self.pick is not None else seq[0]


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def make_gen(clock):
    def _make(randoms=(), pick=None, frac=0.5, **kw):
        rng = ScriptedRng(randoms=randoms, pick=pick, frac=frac)
        return VitalsGenerator(rng=rng, clock=clock, **kw)
    return _make


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
