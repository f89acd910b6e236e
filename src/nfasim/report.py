"""Reporters for the side effects of a simulation run.

The engine and runner never print directly. They call the hooks of a
:class:`Reporter`, which decides where the information goes.
"""

import sys
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Sequence, TextIO, Tuple

from nfasim.table import format_states

if TYPE_CHECKING:
    from nfasim.engine import Verdict
    from nfasim.exceptions import UnacceptedSymbolError
    from nfasim.symbol import Symbol


class Reporter:
    """Base reporter. Every hook is a no-op."""

    def reading_token(self, token: str) -> None:
        pass

    def reading_symbol(self, symbol: "Symbol") -> None:
        pass

    def current_states(self, states: Sequence[int]) -> None:
        pass

    def triplets(self, counts: Mapping["Symbol", int]) -> None:
        pass

    def rejected_symbol(self, error: "UnacceptedSymbolError") -> None:
        pass

    def final_state(self, verdict: "Verdict") -> None:
        pass

    def final_path(self, verdict: "Verdict") -> None:
        pass


class StreamReporter(Reporter):
    """Write human-readable report lines to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so that redirected stdout is honored
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")

    def reading_token(self, token: str) -> None:
        self._write("")
        self._write(f"Reading token: {token}")

    def reading_symbol(self, symbol: "Symbol") -> None:
        self._write(f"Reading symbol: {symbol}")

    def current_states(self, states: Sequence[int]) -> None:
        self._write(f"Current automaton states: {format_states(states)}")

    def triplets(self, counts: Mapping["Symbol", int]) -> None:
        for symbol, occurrences in counts.items():
            self._write(f"Symbol {symbol} was tripled {occurrences} times already")

    def rejected_symbol(self, error: "UnacceptedSymbolError") -> None:
        self._write(str(error))

    def final_state(self, verdict: "Verdict") -> None:
        self._write(f"Final automaton state: q{verdict.state} ({verdict.label})")

    def final_path(self, verdict: "Verdict") -> None:
        self._write(f"State change path: {verdict.format_path()}")


class RecordingReporter(Reporter):
    """Record every report as an ``(event, payload)`` tuple.

    Args:
        forward: Optional reporter that receives every event as well.
    """

    def __init__(self, forward: Optional[Reporter] = None):
        self.events: List[Tuple[str, Any]] = []
        self.forward = forward

    def _record(self, event: str, payload: Any) -> None:
        self.events.append((event, payload))
        if self.forward is not None:
            getattr(self.forward, event)(payload)

    def of(self, event: str) -> List[Any]:
        """Get the payloads of every recorded event with the given name."""
        return [payload for name, payload in self.events if name == event]

    def reading_token(self, token: str) -> None:
        self._record("reading_token", token)

    def reading_symbol(self, symbol: "Symbol") -> None:
        self._record("reading_symbol", symbol)

    def current_states(self, states: Sequence[int]) -> None:
        self._record("current_states", list(states))

    def triplets(self, counts: Mapping["Symbol", int]) -> None:
        self._record("triplets", dict(counts))

    def rejected_symbol(self, error: "UnacceptedSymbolError") -> None:
        self._record("rejected_symbol", error)

    def final_state(self, verdict: "Verdict") -> None:
        self._record("final_state", verdict)

    def final_path(self, verdict: "Verdict") -> None:
        self._record("final_path", verdict)
