"""Game environment for WordPlay."""

from .models import (
    SessionState,
    ClaimStatus,
    DifficultyConfig,
    GameConfig,
    ClaimEvent,
    ClaimResult,
    SessionSummary,
    default_difficulties,
)
from .ledger import ClaimLedger
from .scheduler import Scheduler, TimerHandle
from .rival import Rival
from .session import Session
from .history import ScoreHistory

__all__ = [
    "SessionState",
    "ClaimStatus",
    "DifficultyConfig",
    "GameConfig",
    "ClaimEvent",
    "ClaimResult",
    "SessionSummary",
    "default_difficulties",
    "ClaimLedger",
    "Scheduler",
    "TimerHandle",
    "Rival",
    "Session",
    "ScoreHistory",
]
