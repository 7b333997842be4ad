from typing import List, Dict, Optional
from pydantic import BaseModel, Field

from .models import ClaimEvent, ClaimResult
from ..puzzle.models import Cell, Claimant, Placement


class ClaimLedger(BaseModel):
    """
    Authoritative record of which words are claimed, by whom, and in what order.

    The ledger owns its own copy of the session's placements. Claims only move
    a placement from unclaimed to claimed, so a losing claimant in a race gets
    a no-op result and no score.

    The ledger assumes single-threaded, run-to-completion callers. A threaded
    host must serialize calls to `claim` with a lock.

    Attributes:
        placements: The session's placements, in generation order
        events: Append-only log of successful claims
        scores: Running number of claims per claimant
    """

    placements: List[Placement] = Field(default_factory=list)
    events: List[ClaimEvent] = Field(default_factory=list)
    scores: Dict[str, int] = Field(default_factory=lambda: {"human": 0, "rival": 0})

    @classmethod
    def from_placements(cls, placements: List[Placement]) -> "ClaimLedger":
        """
        Create an empty ledger over copies of the given placements.

        Args:
            placements: Placements produced by the generator

        Returns:
            A new ClaimLedger with every placement unclaimed
        """
        return cls(placements=[p.model_copy(update={"claimed_by": None}, deep=True) for p in placements])

    def placement(self, word: str) -> Optional[Placement]:
        """Get the placement for a word, or None if it is not in this session."""
        for p in self.placements:
            if p.word == word:
                return p
        return None

    def claimed_by(self, word: str) -> Optional[Claimant]:
        p = self.placement(word)
        return p.claimed_by if p else None

    def unclaimed(self) -> List[Placement]:
        """Placements nobody has claimed yet, in generation order."""
        return [p for p in self.placements if p.claimed_by is None]

    @property
    def is_complete(self) -> bool:
        """True once every placement is claimed."""
        return all(p.claimed_by is not None for p in self.placements)

    def claim(self, word: str, claimant: Claimant, timestamp: float = 0.0) -> ClaimResult:
        """
        Claim a word for a claimant.

        Args:
            word: The word to claim
            claimant: "human" or "rival"
            timestamp: Time of the claim, recorded in the event log

        Returns:
            ClaimResult with status "claimed", or "already_claimed" if
            another claim got there first

        Raises:
            ValueError: If the word is not one of this ledger's placements
        """
        placement = self.placement(word)
        if placement is None:
            raise ValueError(f"'{word}' is not a word in this session")

        if placement.claimed_by is not None:
            return ClaimResult(status="already_claimed", word=word, claimant=claimant)

        placement.claimed_by = claimant
        event = ClaimEvent(
            sequence=len(self.events) + 1,
            word=word,
            claimant=claimant,
            cells=list(placement.cells),
            timestamp=timestamp,
        )
        self.events.append(event)
        self.scores[claimant] = self.scores.get(claimant, 0) + 1

        return ClaimResult(status="claimed", word=word, claimant=claimant, event=event)

    def cell_owners(self) -> Dict[Cell, Claimant]:
        """
        Map each claimed cell to its claimant, for highlighting.

        Where claimed words share a cell, the later claim wins.
        """
        owners: Dict[Cell, Claimant] = {}
        for event in self.events:
            for cell in event.cells:
                owners[tuple(cell)] = event.claimant
        return owners

    def get_state(self) -> Dict:
        """
        Get the current ledger state as a dictionary.

        Useful for serialization and logging.

        Returns:
            Dictionary containing ledger state
        """
        return {
            "words": {p.word: p.claimed_by for p in self.placements},
            "scores": dict(self.scores),
            "claims": len(self.events),
            "is_complete": self.is_complete,
        }
