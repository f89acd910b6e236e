"""Helpers shared by the nfasim test modules."""

from typing import Dict, FrozenSet, Iterable, List, Tuple

from nfasim.symbol import Symbol
from nfasim.table import TransitionTable


def symbols(text: str) -> List[Symbol]:
    """Convert a string of alphabet characters to symbols."""
    return [Symbol.of(character) for character in text]


def make_table(
    transitions: Dict[Tuple[int, str], Iterable[int]], accepting: Iterable[int]
) -> TransitionTable:
    """Build a table from ``(state, character) -> successors`` entries."""
    delta: Dict[Tuple[int, Symbol], FrozenSet[int]] = {
        (state, Symbol.of(character)): frozenset(targets)
        for (state, character), targets in transitions.items()
    }
    return TransitionTable(delta=delta, accepting=frozenset(accepting), name="test")
