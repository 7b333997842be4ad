"""
Word-search grid generation.

Embeds a word list into an N x N letter grid:
1. Words are placed one at a time, in list order (earlier words win contested cells)
2. Each word gets up to 100 random (direction, anchor) attempts
3. A line is valid if every cell is empty or already holds the needed letter
4. Words that never fit are dropped; remaining empty cells get random letters
"""

import logging
import random
import re
import string
from typing import Dict, List, Optional, Tuple

from .models import Cell, Placement, Puzzle
from .grid import line_cells


_log = logging.getLogger(__name__)

# 8 compass directions for placement (row delta, col delta)
DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "E":  (0, 1),
    "S":  (1, 0),
    "W":  (0, -1),
    "N":  (-1, 0),
    "SE": (1, 1),
    "NW": (-1, -1),
    "SW": (1, -1),
    "NE": (-1, 1),
}

MAX_ATTEMPTS = 100
ALPHABET = string.ascii_uppercase

Grid = List[List[Optional[str]]]


def normalize_words(words: List[str]) -> List[str]:
    """
    Upper-case and validate a word list.

    Raises:
        ValueError: If a word is not 2+ letters A-Z, or appears twice
    """
    normalized: List[str] = []
    seen = set()
    for raw in words:
        word = raw.strip().upper()
        if not re.fullmatch(r'[A-Z]{2,}', word):
            raise ValueError(f"Invalid word '{raw}': words must be 2+ letters A-Z")
        if word in seen:
            raise ValueError(f"Duplicate word '{word}' is not supported")
        seen.add(word)
        normalized.append(word)
    return normalized


def _anchor_range(size: int, length: int, delta: int) -> Tuple[int, int]:
    """Inclusive range of anchor coordinates keeping the word on-grid along one axis."""
    if delta == 1:
        return 0, size - length
    if delta == -1:
        return length - 1, size - 1
    return 0, size - 1


def _fits(grid: Grid, word: str, cells: List[Cell]) -> bool:
    """A line fits if every cell is empty or already holds the same letter."""
    for letter, (row, col) in zip(word, cells):
        existing = grid[row][col]
        if existing is not None and existing != letter:
            return False
    return True


def place_word(
    grid: Grid,
    word: str,
    rng: random.Random,
    max_attempts: int = MAX_ATTEMPTS
) -> Optional[List[Cell]]:
    """
    Try to write a word into the grid along a random straight line.

    Args:
        grid: Working grid, None marks an empty cell (modified in place)
        word: Normalized word to place
        rng: Random generator to draw directions and anchors from
        max_attempts: Number of random lines to try before giving up

    Returns:
        The cells the word now occupies, or None if no attempt was valid
    """
    size = len(grid)
    if len(word) > size:
        return None

    steps = list(DIRECTIONS.values())
    for _ in range(max_attempts):
        dr, dc = rng.choice(steps)
        row_lo, row_hi = _anchor_range(size, len(word), dr)
        col_lo, col_hi = _anchor_range(size, len(word), dc)
        anchor = (rng.randint(row_lo, row_hi), rng.randint(col_lo, col_hi))

        cells = line_cells(anchor, (dr, dc), len(word))
        if _fits(grid, word, cells):
            for letter, (row, col) in zip(word, cells):
                grid[row][col] = letter
            return cells

    return None


def fill_grid(grid: Grid, rng: random.Random) -> Tuple[str, ...]:
    """Fill every empty cell with a random letter and freeze the rows."""
    return tuple(
        ''.join(letter if letter is not None else rng.choice(ALPHABET) for letter in row)
        for row in grid
    )


def generate(
    size: int,
    words: List[str],
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS
) -> Puzzle:
    """
    Generate a word-search puzzle.

    Words that cannot be placed are dropped rather than reported as errors,
    so callers must tolerate fewer placements than requested words.

    Args:
        size: Grid side length
        words: Words to hide (case-insensitive)
        rng: Optional random generator (a fresh unseeded one by default)
        max_attempts: Random attempts per word

    Returns:
        Puzzle with the filled grid, placements and dropped words

    Raises:
        ValueError: If size is not positive or the word list is malformed
    """
    if size < 1:
        raise ValueError(f"Grid size must be positive, got {size}")

    words = normalize_words(words)
    if rng is None:
        rng = random.Random()

    grid: Grid = [[None] * size for _ in range(size)]
    placements: List[Placement] = []
    dropped: List[str] = []

    for word in words:
        cells = place_word(grid, word, rng, max_attempts)
        if cells is None:
            _log.debug("dropped %s after %d attempts on %dx%d grid", word, max_attempts, size, size)
            dropped.append(word)
            continue
        placements.append(Placement(word=word, cells=cells))

    return Puzzle(
        size=size,
        grid=fill_grid(grid, rng),
        placements=placements,
        dropped=dropped,
    )
