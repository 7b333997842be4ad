"""Shared fixtures: hand-built puzzles, scripted randomness and a manual clock."""

import random

import pytest

from src.environment import DifficultyConfig, GameConfig, Scheduler, Session
from src.puzzle import Placement, Puzzle


class ScriptedRandom(random.Random):
    """Random generator whose draws come from a fixed script."""

    def __init__(self, values=(), default=0.0):
        super().__init__(0)
        self.values = list(values)
        self.default = default

    def random(self):
        return self.values.pop(0) if self.values else self.default

    def choice(self, seq):
        return seq[0]


def horizontal(word, row, col=0):
    return Placement(word=word, cells=[(row, col + i) for i in range(len(word))])


FIVE_WORD_ROWS = (
    "CATQWERT",
    "ZZZZZZZZ",
    "DOGPLKJH",
    "ZZZZZZZZ",
    "BIRDXXXX",
    "FISHXXXX",
    "SUNXXXXX",
    "XXXXXXXX",
)


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture
def two_word_puzzle():
    """8x8 puzzle with CAT on row 0 and DOG on row 2."""
    return Puzzle(
        size=8,
        grid=FIVE_WORD_ROWS,
        placements=[horizontal("CAT", 0), horizontal("DOG", 2)],
    )


@pytest.fixture
def five_word_puzzle():
    """8x8 puzzle with CAT, DOG, BIRD, FISH and SUN laid out horizontally."""
    return Puzzle(
        size=8,
        grid=FIVE_WORD_ROWS,
        placements=[
            horizontal("CAT", 0),
            horizontal("DOG", 2),
            horizontal("BIRD", 4),
            horizontal("FISH", 5),
            horizontal("SUN", 6),
        ],
    )


@pytest.fixture
def make_session():
    """
    Factory for sessions on a manual clock starting at t=0.

    Holds are 0.25s (human) and 0.5s (rival) so that times stay exact.
    """
    def _make(skill=0.0, interval=1.0, prefer_longest=0.0, rng=None, **session_kwargs):
        config = GameConfig(
            human_hold_seconds=0.25,
            rival_hold_seconds=0.5,
            difficulties={
                "Test": DifficultyConfig(
                    grid_size=8,
                    words=["CAT", "DOG", "BIRD", "FISH", "SUN"],
                    rival_interval=interval,
                    rival_skill=skill,
                    rival_prefer_longest=prefer_longest,
                ),
            },
        )
        return Session(
            config=config,
            scheduler=Scheduler(clock=lambda: 0.0),
            rng=rng if rng is not None else random.Random(7),
            **session_kwargs,
        )
    return _make
