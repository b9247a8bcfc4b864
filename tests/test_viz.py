"""Tests for terminal display of frequency tables."""

import pytest
from rich.console import Console

from handfreq.game.frequencies import FrequencyTable, best_hand_frequencies
from handfreq.game.hand_rank import HandCategory
from handfreq.game.state import Perspective
from handfreq.viz import display_comparison, display_frequencies, frequency_table


@pytest.fixture
def console():
    return Console(record=True, width=120)


@pytest.fixture
def small_table():
    table = FrequencyTable()
    table.add(HandCategory.pair(13), 3)
    table.add(HandCategory.pair(12), 1)
    return table


class TestFrequencyTable:
    def test_rows(self, small_table):
        table = frequency_table(small_table)
        # Two categories plus the total row
        assert table.row_count == 3

    def test_by_kind_collapses_ranks(self, small_table):
        table = frequency_table(small_table, by_kind=True)
        assert table.row_count == 2


class TestDisplay:
    def test_display_frequencies(self, console, small_table):
        display_frequencies(small_table, title="Test", console=console)
        text = console.export_text()

        assert "Pair (K)" in text
        assert "75.00" in text
        assert "Total" in text

    def test_display_comparison(self, console, flop_state):
        tables = {
            "Self": best_hand_frequencies(flop_state, Perspective.SELF),
            "Opponent": best_hand_frequencies(flop_state, Perspective.OPPONENT),
        }
        display_comparison(tables, console=console)
        text = console.export_text()

        assert "Self" in text
        assert "Opponent" in text
        assert "Three of a Kind" in text
        assert "100.00" in text

    def test_display_comparison_empty(self, console):
        display_comparison({}, console=console)
        assert console.export_text() == ""
