"""Tests for transition tables, presets and the grid printer."""

import io

import pytest

from nfasim import (
    FIVE_STATE,
    PRESETS,
    TEN_STATE,
    Symbol,
    UnknownPresetError,
    format_states,
    get_preset,
)
from nfasim.printer import format_grid, print_table

from helpers import make_table


class TestFormatStates:
    @pytest.mark.parametrize(
        "states,expected",
        [
            ([], ""),
            ([0], "q0"),
            ([1, 0], "{q0, q1}"),
            ([5, 1, 5, 0], "{q0, q1, q5}"),
        ],
    )
    def test_format(self, states, expected):
        assert format_states(states) == expected


class TestTransitionTable:
    def test_missing_entry_has_no_successors(self):
        table = make_table({(0, "0"): {1}}, accepting={1})
        assert table.successors(0, Symbol.ONE) == frozenset()
        assert table.successors(7, Symbol.ZERO) == frozenset()

    def test_delta_is_read_only(self):
        table = make_table({(0, "0"): {1}}, accepting={1})
        with pytest.raises(TypeError):
            table.delta[(0, Symbol.ONE)] = frozenset({0})

    def test_states_include_targets_and_accepting(self):
        table = make_table({(0, "0"): {3}}, accepting={5})
        assert table.states() == [0, 3, 5]

    def test_negative_state_rejected(self):
        with pytest.raises(ValueError):
            make_table({(0, "0"): {-1}}, accepting=())

    def test_reachable_is_union_of_successors(self):
        assert TEN_STATE.reachable({0, 1}, Symbol.ZERO) == {0, 1, 5}
        assert TEN_STATE.reachable({2, 3}, Symbol.ZERO) == set()


class TestPresets:
    def test_preset_names(self):
        assert set(PRESETS) == {"five-state", "ten-state"}
        assert get_preset("five-state") is FIVE_STATE
        assert get_preset("ten-state") is TEN_STATE

    def test_unknown_preset(self):
        with pytest.raises(UnknownPresetError, match="eleven-state"):
            get_preset("eleven-state")

    def test_five_state_shape(self):
        assert FIVE_STATE.states() == [0, 1, 2, 3, 4]
        assert FIVE_STATE.accepting == frozenset({2, 3, 4})
        assert FIVE_STATE.successors(0, Symbol.TWO) == frozenset({0, 1})

    def test_ten_state_shape(self):
        assert TEN_STATE.states() == list(range(10))
        assert TEN_STATE.accepting == frozenset({9})
        for symbol in Symbol:
            assert TEN_STATE.successors(9, symbol) == frozenset({9})

    @pytest.mark.parametrize("table", [FIVE_STATE, TEN_STATE])
    def test_initial_state_reads_every_symbol(self, table):
        for symbol in Symbol:
            assert table.initial in table.successors(table.initial, symbol)


class TestMatrix:
    def test_ten_state_matrix(self):
        matrix = TEN_STATE.to_matrix()
        assert matrix[0] == ["δ", "0", "1", "2", "3"]
        assert matrix[1] == ["q0", "{q0, q1}", "{q0, q2}", "{q0, q3}", "{q0, q4}"]
        assert matrix[2] == ["q1", "q5", "✕", "✕", "✕"]
        assert matrix[10] == ["q9", "q9", "q9", "q9", "q9"]
        assert len(matrix) == 11


class TestGrid:
    def test_empty_grid(self):
        assert format_grid([]) == ""

    def test_cells_are_left_padded(self):
        grid = format_grid([["a", "bb"], ["ccc"]])
        assert grid.splitlines() == [
            "+---+---+",
            "|  a| bb|",
            "+---+---+",
            "|ccc|",
            "+---+---+",
        ]

    def test_print_table(self):
        stream = io.StringIO()
        print_table(FIVE_STATE, stream)
        lines = stream.getvalue().splitlines()
        assert lines[0] == "Transition table:"
        # title, top border, then a row and a border per matrix row
        assert len(lines) == 2 + 2 * len(FIVE_STATE.to_matrix())
        assert all(line == lines[1] for line in lines[1::2])
        assert "|       δ|" in lines[2]
