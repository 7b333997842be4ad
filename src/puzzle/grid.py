"""Grid geometry and reading utilities."""

from typing import List, Optional, Sequence, Tuple


def in_bounds(cell: Tuple[int, int], size: int) -> bool:
    """Check whether a (row, col) cell lies on an N x N grid."""
    row, col = cell
    return 0 <= row < size and 0 <= col < size


def line_cells(start: Tuple[int, int], step: Tuple[int, int], length: int) -> List[Tuple[int, int]]:
    """Cells of a line of `length` cells starting at `start` and moving by `step`."""
    row, col = start
    dr, dc = step
    return [(row + dr * i, col + dc * i) for i in range(length)]


def line_step(cells: Sequence[Tuple[int, int]]) -> Optional[Tuple[int, int]]:
    """
    Return the constant unit step between consecutive cells.

    The step has both components in {-1, 0, 1} and is never (0, 0).
    Returns None if the cells are fewer than two or do not form a
    contiguous straight line.
    """
    if len(cells) < 2:
        return None

    step = (cells[1][0] - cells[0][0], cells[1][1] - cells[0][1])
    if step == (0, 0) or abs(step[0]) > 1 or abs(step[1]) > 1:
        return None

    for prev, cell in zip(cells, cells[1:]):
        if (cell[0] - prev[0], cell[1] - prev[1]) != step:
            return None

    return step


def read_cells(grid: Sequence[str], cells: Sequence[Tuple[int, int]]) -> str:
    """Concatenate the letters found at the given cells."""
    return ''.join(grid[row][col] for row, col in cells)


def render_grid(grid: Sequence[str]) -> str:
    """Render the grid to a string, one space between letters."""
    return '\n'.join(' '.join(row) for row in grid)
