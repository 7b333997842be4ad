"""
Rival class for the simulated opponent.

The rival does not search the grid. It already knows every placement and
only decides, once per tick, whether to claim a word and which one.
"""

import random
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

from .ledger import ClaimLedger
from .models import ClaimResult, DifficultyConfig
from ..puzzle.models import Placement


class Rival(BaseModel):
    """
    Per-tick claiming policy of the rival.

    Attributes:
        skill: Probability of attempting a claim on each tick
        interval: Seconds between ticks
        prefer_longest: Probability of going for the longest remaining word
            instead of a random one
        rng: Random generator for all of the rival's draws
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    skill: float = Field(..., ge=0.0, le=1.0)
    interval: float = Field(..., gt=0)
    prefer_longest: float = Field(default=0.0, ge=0.0, le=1.0)
    rng: random.Random = Field(default_factory=random.Random)

    @classmethod
    def create(cls, difficulty: DifficultyConfig, rng: Optional[random.Random] = None) -> "Rival":
        """
        Factory method to create a rival tuned to a difficulty.

        Args:
            difficulty: Difficulty settings supplying skill and pacing
            rng: Optional random generator (fresh and unseeded by default)

        Returns:
            A new Rival instance
        """
        return cls(
            skill=difficulty.rival_skill,
            interval=difficulty.rival_interval,
            prefer_longest=difficulty.rival_prefer_longest,
            rng=rng if rng is not None else random.Random(),
        )

    def choose(self, candidates: List[Placement]) -> Optional[Placement]:
        """
        Pick the word to go for among the unclaimed candidates.

        With probability `prefer_longest` the longest word is taken (the
        earliest one on ties); otherwise the pick is uniform.
        """
        if not candidates:
            return None

        if self.prefer_longest > 0 and self.rng.random() < self.prefer_longest:
            return max(candidates, key=lambda p: len(p.word))

        return self.rng.choice(candidates)

    def take_turn(self, ledger: ClaimLedger, timestamp: float = 0.0) -> Optional[ClaimResult]:
        """
        Play one tick against the ledger.

        Args:
            ledger: The session's claim ledger
            timestamp: Time of the tick

        Returns:
            The claim result if the rival went for a word this tick,
            None if it idled
        """
        if self.rng.random() >= self.skill:
            return None

        chosen = self.choose(ledger.unclaimed())
        if chosen is None:
            return None

        return ledger.claim(chosen.word, "rival", timestamp=timestamp)
