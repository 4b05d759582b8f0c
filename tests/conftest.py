import random
from typing import List

import pytest

from matika.models import ExerciseModel


class ScriptedRandom(random.Random):
    """randint / random の戻り値を順番に返す乱数源。"""

    def __init__(self, ints: List[int], coins: List[float]):
        super().__init__(0)
        self._ints = list(ints)
        self._coins = list(coins)

    def randint(self, a, b):
        value = self._ints.pop(0)
        assert a <= value <= b
        return value

    def random(self):
        return self._coins.pop(0)


@pytest.fixture
def scripted():
    def make(ints, coins, min=0, max=100):
        return ExerciseModel(min=min, max=max, rng=ScriptedRandom(ints, coins))

    return make
