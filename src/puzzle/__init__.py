"""Puzzle generation and selection resolution for WordPlay."""

from .models import Cell, Claimant, Placement, Puzzle
from .grid import in_bounds, line_cells, line_step, read_cells, render_grid
from .generator import generate, normalize_words, place_word, fill_grid, DIRECTIONS, MAX_ATTEMPTS
from .selection import extend_selection, resolve, selected_word, Selection

__all__ = [
    # Models
    "Cell",
    "Claimant",
    "Placement",
    "Puzzle",
    # Grid utilities
    "in_bounds",
    "line_cells",
    "line_step",
    "read_cells",
    "render_grid",
    # Generation
    "generate",
    "normalize_words",
    "place_word",
    "fill_grid",
    "DIRECTIONS",
    "MAX_ATTEMPTS",
    # Selection
    "extend_selection",
    "resolve",
    "selected_word",
    "Selection",
]
