"""
nfasim - a multi-path non-deterministic finite automaton simulator.

Every live computation path is tracked in parallel while the input is read,
so the run can report current states, acceptance, repeated symbols and the
path that led to the final state.

Example usage:
    >>> from nfasim import NFAEngine, Symbol, TEN_STATE
    >>> with NFAEngine(TEN_STATE) as engine:
    ...     for character in "000":
    ...         accepted = engine.consume(Symbol.of(character))
    >>> engine.verdict.accepting
    True

For whole tokens or files:
    >>> from nfasim import run_text, Config
    >>> results = run_text("000#12x3", config=Config(preset="ten-state"))
"""

__version__ = "0.1.0"

from nfasim.symbol import Symbol
from nfasim.table import (
    FIVE_STATE,
    PRESETS,
    TEN_STATE,
    TransitionTable,
    format_states,
    get_preset,
)
from nfasim.engine import NFAEngine, Verdict
from nfasim.report import RecordingReporter, Reporter, StreamReporter
from nfasim.runner import TokenResult, run_file, run_text, run_token, split_tokens
from nfasim.config import Config
from nfasim.exceptions import (
    ConfigError,
    EngineClosedError,
    InputFileError,
    NfasimError,
    UnacceptedSymbolError,
    UnknownPresetError,
)

__all__ = [
    # Core
    "Symbol",
    "NFAEngine",
    "Verdict",
    # Tables
    "TransitionTable",
    "FIVE_STATE",
    "TEN_STATE",
    "PRESETS",
    "get_preset",
    "format_states",
    # Running
    "run_token",
    "run_text",
    "run_file",
    "split_tokens",
    "TokenResult",
    "Config",
    # Reporting
    "Reporter",
    "StreamReporter",
    "RecordingReporter",
    # Exceptions
    "NfasimError",
    "UnacceptedSymbolError",
    "EngineClosedError",
    "UnknownPresetError",
    "ConfigError",
    "InputFileError",
    # Version
    "__version__",
]
