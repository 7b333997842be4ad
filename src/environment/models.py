"""
Pydantic models for the environment layer.

This module contains the data models (configurations, claim records, session
summaries) used throughout the environment layer. The main logic classes
(ClaimLedger, Rival, Scheduler, Session) remain in their respective files.
"""

from typing import List, Dict, Optional, Literal
from pydantic import BaseModel, Field, model_validator

from ..puzzle.models import Cell, Claimant


# Type aliases
SessionState = Literal[
    "setup",
    "playing",
    "resolving_human_claim",
    "resolving_rival_claim",
    "completed",
]
ClaimStatus = Literal["claimed", "already_claimed"]


class DifficultyConfig(BaseModel):
    """Grid size, word list and rival pacing for one difficulty level."""
    grid_size: int = Field(..., ge=2)
    words: List[str] = Field(..., min_length=1)
    rival_interval: float = Field(..., gt=0)  # seconds between rival ticks
    rival_skill: float = Field(..., ge=0.0, le=1.0)  # chance to claim per tick
    rival_prefer_longest: float = Field(default=0.0, ge=0.0, le=1.0)

    @model_validator(mode='after')
    def _check_grid_fits_words(self) -> "DifficultyConfig":
        longest = max(len(w.strip()) for w in self.words)
        if longest > self.grid_size:
            raise ValueError(
                f"Grid size {self.grid_size} is smaller than the longest word ({longest} letters)"
            )
        return self


def default_difficulties() -> Dict[str, DifficultyConfig]:
    """The standard Easy / Medium / Hard table (a fresh copy on every call)."""
    return {
        "Easy": DifficultyConfig(
            grid_size=8,
            words=["CAT", "DOG", "TREE", "BOOK", "FISH", "SUN", "MOON", "CAR", "BIRD", "STAR"],
            rival_interval=1.8,
            rival_skill=0.3,
        ),
        "Medium": DifficultyConfig(
            grid_size=12,
            words=[
                "ELEPHANT", "COMPUTER", "JAVASCRIPT", "FLOWER", "MOUNTAIN", "PYTHON",
                "OCEAN", "LAPTOP", "SPIDER", "GUITAR", "PLANET", "RIVER",
            ],
            rival_interval=1.3,
            rival_skill=0.55,
        ),
        "Hard": DifficultyConfig(
            grid_size=16,
            words=[
                "ASTRONOMY", "MICROSCOPE", "ARCHITECTURE", "PHILOSOPHY", "INTERNATIONAL",
                "NEXTJS", "EXPERIMENT", "TECHNOLOGY", "ALGORITHM", "THEORY", "ENIGMA",
                "SYNTHESIS", "DEVELOPMENT", "QUANTUM", "CALCULATOR", "STRATEGY",
            ],
            rival_interval=0.9,
            rival_skill=0.8,
            rival_prefer_longest=0.6,
        ),
    }


class GameConfig(BaseModel):
    """Configuration for a game: the difficulty table plus timing and history settings."""
    seed: Optional[int] = None
    human_hold_seconds: float = Field(default=0.4, gt=0)
    rival_hold_seconds: float = Field(default=0.7, gt=0)
    history_path: Optional[str] = None
    history_limit: int = Field(default=8, ge=1)
    difficulties: Dict[str, DifficultyConfig] = Field(default_factory=default_difficulties)

    @model_validator(mode='after')
    def _check_difficulties(self) -> "GameConfig":
        if not self.difficulties:
            raise ValueError("At least one difficulty must be configured")
        return self

    def difficulty(self, label: str) -> DifficultyConfig:
        """
        Look up a difficulty by label.

        Raises:
            ValueError: If the label is not configured
        """
        if label not in self.difficulties:
            known = ", ".join(self.difficulties)
            raise ValueError(f"Unknown difficulty '{label}' (expected one of: {known})")
        return self.difficulties[label]


class ClaimEvent(BaseModel):
    """One successful claim, in ledger order."""
    sequence: int
    word: str
    claimant: Claimant
    cells: List[Cell]
    timestamp: float


class ClaimResult(BaseModel):
    """Outcome of a claim attempt."""
    status: ClaimStatus
    word: str
    claimant: Claimant
    event: Optional[ClaimEvent] = None

    @property
    def success(self) -> bool:
        return self.status == "claimed"


class SessionSummary(BaseModel):
    """Final tally of a completed session, handed to the score history."""
    player_score: int = 0
    rival_score: int = 0
    difficulty: str
    timestamp: str = ""
    duration_seconds: float = 0.0
    winner: Optional[Claimant] = None  # None on a tie

    @property
    def outcome(self) -> str:
        if self.winner == "human":
            return "You won"
        if self.winner == "rival":
            return "Rival won"
        return "Tie"
