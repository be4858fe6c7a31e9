"""
Shared fixtures: a random source whose answers can be forced
"""

import random

import pytest


class ScriptedRandom(random.Random):
    """
    random.Random with forced results
        randint     {(a, b): [values...]} answered in order for that range
        choice      [values...] answered in order for any sequence
    Anything not forced falls through to the seeded generator.
    """
    def __init__(self, randint=None, choice=None, seed=1234):
        super().__init__(seed)
        self.forced_randint = {k: list(v) for k, v in (randint or {}).items()}
        self.forced_choice = list(choice or [])
        self.choice_calls = 0

    def randint(self, a, b):
        forced = self.forced_randint.get((a, b))
        if forced:
            return forced.pop(0)
        return super().randint(a, b)

    def choice(self, seq):
        self.choice_calls += 1
        if self.forced_choice:
            return self.forced_choice.pop(0)
        return super().choice(seq)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def seeded():
    return random.Random(20240601)
