"""Data models for puzzle generation and selection."""

from typing import List, Optional, Literal, Tuple
from pydantic import BaseModel, Field, field_validator, model_validator

from .grid import line_step


# Type aliases
Cell = Tuple[int, int]
Claimant = Literal["human", "rival"]


class Placement(BaseModel):
    """A target word and the straight line of cells it occupies."""
    word: str = Field(..., min_length=2, pattern=r'^[A-Z]+$')
    cells: List[Cell]
    claimed_by: Optional[Claimant] = None

    @model_validator(mode='after')
    def _check_line(self) -> "Placement":
        if len(self.cells) != len(self.word):
            raise ValueError(
                f"'{self.word}' has {len(self.word)} letters but covers {len(self.cells)} cells"
            )
        if line_step(self.cells) is None:
            raise ValueError(f"Cells of '{self.word}' do not form a straight line")
        return self

    @property
    def is_claimed(self) -> bool:
        return self.claimed_by is not None

    @property
    def direction(self) -> Tuple[int, int]:
        """Unit (row, col) step from the first letter to the next."""
        return line_step(self.cells)

    def matches(self, sequence: List[Cell]) -> bool:
        """True if the sequence equals the cells forward or exactly reversed."""
        sequence = [tuple(cell) for cell in sequence]
        return sequence == self.cells or sequence == self.cells[::-1]


class Puzzle(BaseModel):
    """A generated grid with the words hidden in it."""
    size: int = Field(..., ge=1)
    grid: Tuple[str, ...]
    placements: List[Placement] = Field(default_factory=list)
    dropped: List[str] = Field(default_factory=list)  # Words that did not fit

    @field_validator('grid')
    @classmethod
    def _check_grid(cls, rows: Tuple[str, ...]) -> Tuple[str, ...]:
        for row in rows:
            if not row.isascii() or not row.isalpha() or not row.isupper():
                raise ValueError(f"Grid row '{row}' must contain only letters A-Z")
        return rows

    @model_validator(mode='after')
    def _check_shape(self) -> "Puzzle":
        if len(self.grid) != self.size or any(len(row) != self.size for row in self.grid):
            raise ValueError(f"Grid must be {self.size}x{self.size}")
        return self

    @property
    def words(self) -> List[str]:
        """Words that made it onto the grid, in placement order."""
        return [p.word for p in self.placements]
