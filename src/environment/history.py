"""
Score history persistence.

Completed-game summaries are stored most-recent-first in a JSON file and
capped at a fixed number of entries. A history file that cannot be read is
treated as empty so a corrupt scoreboard never stops a game.
"""

import json
import logging
from pathlib import Path
from typing import List
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from .models import SessionSummary


_log = logging.getLogger(__name__)

_ENTRIES = TypeAdapter(List[SessionSummary])


class ScoreHistory(BaseModel):
    """
    Scoreboard of past games backed by a JSON file.

    Attributes:
        path: Location of the JSON file
        limit: Maximum number of entries kept
    """

    path: Path
    limit: int = Field(default=8, ge=1)

    def load(self) -> List[SessionSummary]:
        """
        Load the stored entries, most recent first.

        Returns:
            The entries, or an empty list if the file is missing or malformed
        """
        if not self.path.exists():
            return []

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            return _ENTRIES.validate_python(data)[:self.limit]
        except (OSError, ValueError, RecursionError, ValidationError) as e:
            _log.warning("ignoring unreadable score history %s: %s", self.path, e)
            return []

    def save(self, entries: List[SessionSummary]) -> None:
        """
        Write entries to the history file.

        Args:
            entries: Entries to store, most recent first
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding="utf-8") as f:
            json.dump([e.model_dump() for e in entries[:self.limit]], f, indent=2)

    def record(self, summary: SessionSummary) -> List[SessionSummary]:
        """
        Add a completed game to the front of the history.

        Args:
            summary: The game's summary

        Returns:
            The updated entries, most recent first
        """
        entries = [summary] + self.load()
        entries = entries[:self.limit]
        self.save(entries)
        return entries
