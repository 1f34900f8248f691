"""Tests for viewport scrolling helpers."""

import pytest

from tunepane.ui.blessed.helpers.scrolling import clamp_viewport, step_viewport


def assert_valid(reference, cursor, height, total):
    if total == 0:
        assert (reference, cursor) == (0, 0)
        return
    assert 0 <= cursor < min(height, total)
    assert 0 <= reference <= max(0, total - height)
    assert 0 <= reference + cursor < total


class TestStepViewport:
    """Test the single-step scrolling policy."""

    def test_cursor_moves_inside_viewport(self):
        assert step_viewport(0, 0, 1, 5, 20) == (0, 1)
        assert step_viewport(0, 3, -1, 5, 20) == (0, 2)

    def test_viewport_shifts_at_bottom_row(self):
        assert step_viewport(0, 4, 1, 5, 20) == (1, 4)

    def test_viewport_shifts_at_top_row(self):
        assert step_viewport(3, 0, -1, 5, 20) == (2, 0)

    def test_no_wraparound_at_end(self):
        assert step_viewport(15, 4, 1, 5, 20) == (15, 4)

    def test_no_wraparound_at_start(self):
        assert step_viewport(0, 0, -1, 5, 20) == (0, 0)

    def test_short_list_stops_at_last_option(self):
        """Fewer options than rows: the cursor stops on the last option."""
        assert step_viewport(0, 2, 1, 10, 3) == (0, 2)
        assert step_viewport(0, 1, 1, 10, 3) == (0, 2)

    def test_empty_pane_is_noop(self):
        assert step_viewport(0, 0, 1, 10, 0) == (0, 0)
        assert step_viewport(0, 0, -1, 10, 0) == (0, 0)

    def test_height_one(self):
        assert step_viewport(0, 0, 1, 1, 3) == (1, 0)
        assert step_viewport(2, 0, 1, 1, 3) == (2, 0)

    @pytest.mark.parametrize("height", [1, 2, 3, 5, 10])
    @pytest.mark.parametrize("total", [0, 1, 2, 4, 5, 6, 25])
    def test_down_then_up_restores_fresh_pane(self, height, total):
        moved = step_viewport(0, 0, 1, height, total)
        assert step_viewport(*moved, -1, height, total) == (0, 0)

    @pytest.mark.parametrize("height", [1, 3, 7])
    @pytest.mark.parametrize("total", [0, 1, 3, 7, 12])
    def test_walk_keeps_invariants(self, height, total):
        reference, cursor = 0, 0
        for delta in [1] * (total + 3) + [-1] * (total + 3):
            reference, cursor = step_viewport(reference, cursor, delta, height, total)
            assert_valid(reference, cursor, height, total)
        assert (reference, cursor) == (0, 0)

    def test_walk_down_visits_every_option(self):
        reference, cursor = 0, 0
        seen = [0]
        for _ in range(30):
            reference, cursor = step_viewport(reference, cursor, 1, 4, 9)
            seen.append(reference + cursor)
        assert sorted(set(seen)) == list(range(9))


class TestClampViewport:
    """Test re-clamping after resize."""

    def test_shrink_keeps_selection_visible(self):
        assert clamp_viewport(0, 8, 5, 20) == (4, 4)

    def test_grow_past_end(self):
        assert clamp_viewport(15, 4, 10, 20) == (10, 9)

    def test_unchanged_when_valid(self):
        assert clamp_viewport(3, 2, 5, 20) == (3, 2)

    def test_empty(self):
        assert clamp_viewport(4, 2, 5, 0) == (0, 0)

    @pytest.mark.parametrize("height", [1, 2, 5, 40])
    @pytest.mark.parametrize("total", [0, 1, 5, 17])
    @pytest.mark.parametrize("start", [(0, 0), (3, 4), (12, 4), (16, 0)])
    def test_invariants_hold(self, height, total, start):
        reference, cursor = clamp_viewport(*start, height, total)
        assert_valid(reference, cursor, height, total)

    def test_preserves_selected_index(self):
        reference, cursor = clamp_viewport(10, 3, 2, 20)
        assert reference + cursor == 13
