"""Text rendering of a word-search board and its word list."""

from typing import Dict, List, Optional, Sequence, Tuple

from ..puzzle.models import Placement

# Cell markers: (left, right) brackets around the letter
MARKERS: Dict[str, Tuple[str, str]] = {
    "human": ("[", "]"),
    "rival": ("(", ")"),
    "selected": ("<", ">"),
    "highlight": ("*", "*"),
}


def render_board(
    grid: Sequence[str],
    owners: Optional[Dict[Tuple[int, int], str]] = None,
    selected: Sequence[Tuple[int, int]] = (),
    highlight: Sequence[Tuple[int, int]] = (),
) -> str:
    """
    Render the grid with row/column indices and claim markers.

    Human claims are shown as [X], rival claims as (X), the in-progress
    selection as <X> and the rival's pending claim as *X*. The selection
    takes precedence over the rival highlight, which takes precedence over
    claims.
    """
    if not grid:
        return ""

    owners = owners or {}
    selected = {tuple(c) for c in selected}
    highlight = {tuple(c) for c in highlight}
    size = len(grid)
    width = len(str(size - 1))

    header = ' ' * (width + 1) + ''.join(f"{col:^3}" for col in range(size))
    lines = [header.rstrip()]

    for row in range(size):
        cells = []
        for col in range(size):
            cell = (row, col)
            if cell in selected:
                left, right = MARKERS["selected"]
            elif cell in highlight:
                left, right = MARKERS["highlight"]
            elif cell in owners:
                left, right = MARKERS[owners[cell]]
            else:
                left, right = " ", " "
            cells.append(f"{left}{grid[row][col]}{right}")
        lines.append(f"{row:>{width}} " + ''.join(cells))

    return '\n'.join(lines)


def render_word_list(placements: List[Placement]) -> str:
    """One word per line, tagged with who found it."""
    labels = {"human": "you", "rival": "rival"}
    lines = []
    for p in placements:
        if p.claimed_by:
            lines.append(f"  {p.word} ({labels[p.claimed_by]})")
        else:
            lines.append(f"  {p.word}")
    return '\n'.join(lines)


def format_duration(seconds: float) -> str:
    """Format seconds as MM:SS."""
    seconds = int(seconds)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


if __name__ == '__main__':
    example = (
        "CATX",
        "QDOG",
        "ZZZZ",
        "ABCD",
    )
    print(render_board(
        example,
        owners={(0, 0): "human", (0, 1): "human", (0, 2): "human"},
        highlight=[(1, 1), (1, 2), (1, 3)],
    ))
