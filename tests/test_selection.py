"""Test selection geometry and resolution of finished drags."""

import pytest
from pydantic import ValidationError

from src.puzzle import Placement, Selection, extend_selection, resolve, selected_word


class TestExtendSelection:
    """Straight-line extension from an anchor to a hovered cell."""

    def test_horizontal(self):
        """Same row gives the inclusive horizontal line."""
        assert extend_selection((0, 0), (0, 3)) == [(0, 0), (0, 1), (0, 2), (0, 3)]

    def test_horizontal_backwards(self):
        """Dragging leftwards walks from the anchor towards the candidate."""
        assert extend_selection((2, 3), (2, 1)) == [(2, 3), (2, 2), (2, 1)]

    def test_vertical(self):
        """Same column gives the inclusive vertical line."""
        assert extend_selection((1, 4), (3, 4)) == [(1, 4), (2, 4), (3, 4)]

    def test_diagonal(self):
        """Equal row and column distances give a 45-degree diagonal."""
        assert extend_selection((0, 0), (2, 2)) == [(0, 0), (1, 1), (2, 2)]
        assert extend_selection((3, 0), (1, 2)) == [(3, 0), (2, 1), (1, 2)]

    def test_same_cell(self):
        """Hovering the anchor itself selects just the anchor."""
        assert extend_selection((2, 2), (2, 2)) == [(2, 2)]

    @pytest.mark.parametrize("candidate", [(1, 2), (2, 1), (3, 1), (2, 3)])
    def test_non_straight_rejected(self, candidate):
        """Knight moves and other bent lines are rejected."""
        assert extend_selection((0, 0), candidate) is None


class TestResolve:
    """Matching finished selections against placements."""

    @pytest.fixture
    def cat(self):
        return Placement(word="CAT", cells=[(0, 0), (0, 1), (0, 2)])

    def test_forward_match(self, cat):
        """The exact cell sequence resolves to the word."""
        assert resolve([(0, 0), (0, 1), (0, 2)], [cat]) is cat

    def test_reverse_match(self, cat):
        """The exactly reversed cell sequence resolves to the same word."""
        assert resolve([(0, 2), (0, 1), (0, 0)], [cat]) is cat

    def test_partial_selection_does_not_match(self, cat):
        """A prefix of the word's cells is not a match."""
        assert resolve([(0, 0), (0, 1)], [cat]) is None

    def test_overlong_selection_does_not_match(self, cat):
        """Selecting past the end of the word is not a match."""
        assert resolve([(0, 0), (0, 1), (0, 2), (0, 3)], [cat]) is None

    def test_short_selection_never_matches(self):
        """Single-cell and empty selections resolve to nothing."""
        two = Placement(word="AT", cells=[(0, 1), (0, 2)])
        assert resolve([(0, 1)], [two]) is None
        assert resolve([], [two]) is None

    def test_claimed_placement_skipped(self, cat):
        """Claimed words cannot be resolved again."""
        cat.claimed_by = "human"
        assert resolve([(0, 0), (0, 1), (0, 2)], [cat]) is None

    def test_selected_word_reads_letters(self):
        """Letters under a selection are read in selection order."""
        grid = ("CATX", "XXXX", "XXXX", "XXXX")
        assert selected_word(grid, [(0, 2), (0, 1), (0, 0)]) == "TAC"


class TestSelection:
    """The in-progress drag."""

    def test_begin_and_extend(self):
        """A drag starts at one cell and grows along a straight line."""
        selection = Selection()
        selection.begin((1, 1))
        assert selection.anchor == (1, 1)
        assert selection.extend((1, 3)) is True
        assert selection.cells == [(1, 1), (1, 2), (1, 3)]

    def test_invalid_hover_keeps_previous_line(self):
        """A bent hover does not clear the current selection."""
        selection = Selection()
        selection.begin((0, 0))
        selection.extend((0, 2))
        assert selection.extend((1, 2)) is False
        assert selection.cells == [(0, 0), (0, 1), (0, 2)]

    def test_extend_without_anchor(self):
        """Extending before any pointer-down is ignored."""
        selection = Selection()
        assert selection.extend((0, 1)) is False
        assert selection.is_empty

    def test_clear(self):
        """Clearing empties the selection."""
        selection = Selection()
        selection.begin((0, 0))
        selection.clear()
        assert selection.is_empty
        assert selection.anchor is None


class TestPlacementValidation:
    """Placements must describe a straight line covering the word."""

    def test_length_mismatch(self):
        """Cells must match the word length."""
        with pytest.raises(ValidationError):
            Placement(word="CAT", cells=[(0, 0), (0, 1)])

    def test_bent_line(self):
        """Cells must share one constant step."""
        with pytest.raises(ValidationError):
            Placement(word="CAT", cells=[(0, 0), (0, 1), (1, 1)])

    def test_gap_in_line(self):
        """Cells must be contiguous."""
        with pytest.raises(ValidationError):
            Placement(word="CAT", cells=[(0, 0), (0, 2), (0, 4)])

    def test_lowercase_word(self):
        """Words must already be uppercase."""
        with pytest.raises(ValidationError):
            Placement(word="cat", cells=[(0, 0), (0, 1), (0, 2)])

    def test_direction(self):
        """Direction is the unit step between consecutive cells."""
        p = Placement(word="CAT", cells=[(2, 2), (1, 1), (0, 0)])
        assert p.direction == (-1, -1)
