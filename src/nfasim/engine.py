"""Multi-path NFA simulation engine.

The engine keeps every live computation path instead of only the set of
current states, so that the history of the run leading to the final state
can be reported once the input is exhausted.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from nfasim.exceptions import EngineClosedError
from nfasim.report import Reporter
from nfasim.symbol import Symbol
from nfasim.table import TransitionTable

logger = logging.getLogger(__name__)

Path = Tuple[int, ...]

# Consecutive occurrences of a symbol needed to count as a triplet
TRIPLET_LENGTH = 3

# Separator between states of a reported path
PATH_ARROW = "→"


@dataclass(frozen=True)
class Verdict:
    """Outcome of a finalized engine.

    Attributes:
        state: Highest state among the last states of all live paths.
        accepting: Whether that state is accepting.
        path: The live path reported as the state change history.
    """

    state: int
    accepting: bool
    path: Path

    @property
    def label(self) -> str:
        return "accepting" if self.accepting else "rejecting"

    def format_path(self) -> str:
        return PATH_ARROW.join(f"q{state}" for state in self.path)


class NFAEngine:
    """Simulate one token over a transition table, tracking every path.

    The engine is Active until a symbol kills every live path at once. It is
    then held: the paths are frozen and further symbols are ignored.

    Use it as a context manager so that :meth:`finalize` runs exactly once,
    however the block is left::

        with NFAEngine(TEN_STATE) as engine:
            for symbol in symbols:
                engine.consume(symbol)
        verdict = engine.verdict
    """

    def __init__(self, table: TransitionTable, reporter: Optional[Reporter] = None):
        self.table = table
        self.reporter = reporter or Reporter()
        self._paths: List[Path] = [(table.initial,)]
        self._on_hold = False
        self._streaks: Dict[Symbol, int] = {}
        self._triplets: Dict[Symbol, int] = {}
        self._consumed = 0
        self._verdict: Optional[Verdict] = None
        self.reporter.current_states(self.current_states)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def paths(self) -> List[Path]:
        return list(self._paths)

    @property
    def current_states(self) -> List[int]:
        """Sorted distinct last states of all live paths."""
        return sorted({path[-1] for path in self._paths})

    @property
    def on_hold(self) -> bool:
        return self._on_hold

    @property
    def is_accepting(self) -> bool:
        return any(self.table.is_accepting(path[-1]) for path in self._paths)

    @property
    def streaks(self) -> Dict[Symbol, int]:
        return dict(self._streaks)

    @property
    def triplets(self) -> Dict[Symbol, int]:
        return dict(self._triplets)

    @property
    def symbols_consumed(self) -> int:
        """Number of symbols that produced a transition."""
        return self._consumed

    @property
    def closed(self) -> bool:
        return self._verdict is not None

    @property
    def verdict(self) -> Optional[Verdict]:
        """The verdict, or None until the engine is finalized."""
        return self._verdict

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def consume(self, symbol: Symbol) -> bool:
        """Read one symbol and move every live path forward.

        Returns:
            True if this symbol made the configuration accepting when it was
            not accepting before.

        Raises:
            EngineClosedError: If the engine has been finalized.
        """
        if self.closed:
            raise EngineClosedError("Cannot consume symbols after finalize()")

        self.reporter.reading_symbol(symbol)
        if self._on_hold:
            return False

        was_accepting = self.is_accepting
        candidates = [
            path + (state,)
            for path in self._paths
            for state in sorted(self.table.successors(path[-1], symbol))
        ]

        if not candidates:
            self._on_hold = True
            logger.debug(
                "Symbol %s left no live path from %s, engine on hold",
                symbol,
                self.current_states,
            )
            self.reporter.current_states(self.current_states)
            return False

        self._paths = candidates
        self._consumed += 1
        self._count_occurrence(symbol)
        logger.debug(
            "Symbol %s: %d live paths ending in %s",
            symbol,
            len(candidates),
            self.current_states,
        )
        self.reporter.current_states(self.current_states)

        newly_accepting = self.is_accepting and not was_accepting
        if newly_accepting:
            self.reporter.triplets(self.triplets)
        return newly_accepting

    def _count_occurrence(self, symbol: Symbol) -> None:
        """Extend the streak of this symbol and drop the others."""
        streak = self._streaks.get(symbol, 0) + 1
        self._streaks = {symbol: streak}
        if streak >= TRIPLET_LENGTH:
            self._triplets[symbol] = self._triplets.get(symbol, 0) + 1

    # ------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------

    def final_path(self) -> Path:
        """Choose the path reported as the state change history.

        The highest last state wins. Among paths sharing it, the one with the
        highest sum of visited states wins, then the earliest one.
        """
        return max(self._paths, key=lambda path: (path[-1], sum(path)))

    def finalize(self) -> Verdict:
        """Report the final state and its path.

        Raises:
            EngineClosedError: If the engine was already finalized.
        """
        if self.closed:
            raise EngineClosedError("Engine has already been finalized")

        path = self.final_path()
        state = path[-1]
        self._verdict = Verdict(
            state=state,
            accepting=self.table.is_accepting(state),
            path=path,
        )
        logger.debug("Finalized in q%d (%s)", state, self._verdict.label)
        self.reporter.final_state(self._verdict)
        self.reporter.final_path(self._verdict)
        return self._verdict

    def close(self) -> None:
        """Finalize the engine unless that already happened."""
        if not self.closed:
            self.finalize()

    def __enter__(self) -> "NFAEngine":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "held" if self._on_hold else "active"
        return f"NFAEngine({self.table.name or 'table'}, {state}, states={self.current_states})"
