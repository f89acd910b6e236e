"""Transition tables and the preset automata."""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Set, Tuple

from nfasim.exceptions import UnknownPresetError
from nfasim.symbol import Symbol

logger = logging.getLogger(__name__)

# Header cell of the transition function column
DELTA_CHARACTER = "δ"
# Cell shown for a (state, symbol) pair without a transition
NOOP_CHARACTER = "✕"

Delta = Mapping[Tuple[int, Symbol], FrozenSet[int]]


def format_states(states: Iterable[int]) -> str:
    """Render states as ``q0`` or ``{q0, q1}``.

    A single state (or none) is rendered without braces.
    """
    distinct = sorted(set(states))
    body = ", ".join(f"q{state}" for state in distinct)
    if len(distinct) <= 1:
        return body
    return "{" + body + "}"


@dataclass(frozen=True)
class TransitionTable:
    """Immutable NFA transition table.

    Attributes:
        delta: Maps (state, symbol) to the set of successor states. A missing
            entry and an empty set both mean "no transition".
        accepting: Set of accepting states.
        initial: Initial state.
        name: Display name of the table.
    """

    delta: Delta
    accepting: FrozenSet[int]
    initial: int = 0
    name: str = ""
    _states: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        normalized: Dict[Tuple[int, Symbol], FrozenSet[int]] = {}
        for (state, symbol), targets in self.delta.items():
            if state < 0 or any(target < 0 for target in targets):
                raise ValueError(f"State identifiers must be non-negative: {state}")
            normalized[(state, symbol)] = frozenset(targets)
        object.__setattr__(self, "delta", MappingProxyType(normalized))
        object.__setattr__(self, "accepting", frozenset(self.accepting))

        states: Set[int] = {self.initial} | set(self.accepting)
        for (state, _), targets in normalized.items():
            states.add(state)
            states.update(targets)
        object.__setattr__(self, "_states", tuple(sorted(states)))

    def successors(self, state: int, symbol: Symbol) -> FrozenSet[int]:
        """Get successor states, empty if there is no transition."""
        return self.delta.get((state, symbol), frozenset())

    def states(self) -> List[int]:
        """Return every state named by the table, sorted."""
        return list(self._states)

    def is_accepting(self, state: int) -> bool:
        return state in self.accepting

    def reachable(self, states: Iterable[int], symbol: Symbol) -> Set[int]:
        """Compute one step of plain subset simulation."""
        result: Set[int] = set()
        for state in states:
            result.update(self.successors(state, symbol))
        return result

    def to_matrix(self) -> List[List[str]]:
        """Get the table as rows of strings, header row first."""
        header = [DELTA_CHARACTER] + [str(symbol) for symbol in Symbol]
        rows = [header]
        for state in self._states:
            row = [format_states([state])]
            for symbol in Symbol:
                targets = self.successors(state, symbol)
                row.append(format_states(targets) if targets else NOOP_CHARACTER)
            rows.append(row)
        return rows


def _build(
    name: str,
    rows: Mapping[int, Tuple[Iterable[int], ...]],
    accepting: Iterable[int],
) -> TransitionTable:
    """Build a table from one row of successor sets per state.

    Each row lists successors in symbol order (0, 1, 2, 3).
    """
    delta: Dict[Tuple[int, Symbol], FrozenSet[int]] = {}
    for state, cells in rows.items():
        for symbol, targets in zip(Symbol, cells):
            delta[(state, symbol)] = frozenset(targets)
    return TransitionTable(delta=delta, accepting=frozenset(accepting), name=name)


# Accepts tokens holding two consecutive symbols from {2, 3}. State 4 marks
# a pair that was later followed by the other high symbol.
FIVE_STATE = _build(
    "five-state",
    {
        0: ({0}, {0}, {0, 1}, {0, 1}),
        1: ((), (), {2}, {3}),
        2: ({2}, {2}, {2}, {2, 4}),
        3: ({3}, {3}, {3, 4}, {3}),
        4: ({4}, {4}, {4}, {4}),
    },
    accepting={2, 3, 4},
)

# Accepts tokens in which some symbol occurs three times in a row.
TEN_STATE = _build(
    "ten-state",
    {
        0: ({0, 1}, {0, 2}, {0, 3}, {0, 4}),
        1: ({5}, (), (), ()),
        2: ((), {6}, (), ()),
        3: ((), (), {7}, ()),
        4: ((), (), (), {8}),
        5: ({9}, (), (), ()),
        6: ((), {9}, (), ()),
        7: ((), (), {9}, ()),
        8: ((), (), (), {9}),
        9: ({9}, {9}, {9}, {9}),
    },
    accepting={9},
)

PRESETS: Mapping[str, TransitionTable] = MappingProxyType(
    {FIVE_STATE.name: FIVE_STATE, TEN_STATE.name: TEN_STATE}
)


def get_preset(name: str) -> TransitionTable:
    """Look up a preset table by name.

    Raises:
        UnknownPresetError: If no preset has that name.
    """
    try:
        table = PRESETS[name]
    except KeyError:
        raise UnknownPresetError(name) from None
    logger.debug("Using preset %s with %d states", name, len(table.states()))
    return table
