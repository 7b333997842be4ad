"""
Selection resolution: turning a drag gesture into a word claim.

A drag is anchored at the cell where the pointer went down. Hovering another
cell extends the selection to the straight line between the two, and releasing
the pointer resolves the line against the unclaimed placements.
"""

from typing import List, Optional, Sequence
from pydantic import BaseModel, Field

from .models import Cell, Placement
from .grid import line_cells, read_cells


def extend_selection(anchor: Cell, candidate: Cell) -> Optional[List[Cell]]:
    """
    Compute the straight line from anchor to candidate, inclusive.

    Horizontal, vertical and 45-degree diagonal lines are valid. Any other
    pair returns None, and the caller should keep its previous selection.
    """
    dr = candidate[0] - anchor[0]
    dc = candidate[1] - anchor[1]

    if dr != 0 and dc != 0 and abs(dr) != abs(dc):
        return None

    length = max(abs(dr), abs(dc)) + 1
    step = ((dr > 0) - (dr < 0), (dc > 0) - (dc < 0))
    return line_cells(tuple(anchor), step, length)


def resolve(sequence: Sequence[Cell], placements: Sequence[Placement]) -> Optional[Placement]:
    """
    Find the unclaimed placement covered by a finished selection.

    The selection matches if it equals the placement's cells in forward
    or exactly reversed order. Selections shorter than two cells never match.
    """
    if len(sequence) < 2:
        return None

    for placement in placements:
        if placement.claimed_by is None and placement.matches(list(sequence)):
            return placement
    return None


def selected_word(grid: Sequence[str], sequence: Sequence[Cell]) -> str:
    """The letters under a selection, in selection order."""
    return read_cells(grid, sequence)


class Selection(BaseModel):
    """The human's in-progress drag."""
    cells: List[Cell] = Field(default_factory=list)

    @property
    def anchor(self) -> Optional[Cell]:
        return self.cells[0] if self.cells else None

    @property
    def is_empty(self) -> bool:
        return not self.cells

    def begin(self, cell: Cell) -> None:
        """Start a new drag at the given cell."""
        self.cells = [tuple(cell)]

    def extend(self, cell: Cell) -> bool:
        """
        Extend the drag to the given cell.

        Returns:
            True if the selection changed, False if there is no anchor
            or the cell is not on a straight line from it
        """
        if not self.cells:
            return False

        line = extend_selection(self.cells[0], cell)
        if line is None:
            return False

        self.cells = line
        return True

    def clear(self) -> None:
        self.cells = []
