"""Drive engines over the tokens of a text or file."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from nfasim.config import DEFAULT_SEPARATOR, Config
from nfasim.engine import NFAEngine, Verdict
from nfasim.exceptions import InputFileError, UnacceptedSymbolError
from nfasim.report import Reporter
from nfasim.symbol import Symbol
from nfasim.table import TransitionTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenResult:
    """Result of running one token.

    Attributes:
        token: The token as read from the input.
        verdict: Verdict of the token's engine.
        consumed: Number of symbols read before the token ended or aborted.
        error: The error that aborted the token, if any.
        accepted_at: 1-based positions of the symbols that made the
            configuration newly accepting.
    """

    token: str
    verdict: Verdict
    consumed: int
    error: Optional[UnacceptedSymbolError] = None
    accepted_at: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def accepting(self) -> bool:
        return self.verdict.accepting

    @property
    def aborted(self) -> bool:
        return self.error is not None


def split_tokens(text: str, separator: str = DEFAULT_SEPARATOR) -> List[str]:
    """Split text by the separator, dropping blank tokens."""
    return [token.strip() for token in text.split(separator) if token.strip()]


def run_token(
    token: str, table: TransitionTable, reporter: Optional[Reporter] = None
) -> TokenResult:
    """Run a fresh engine over every character of a token.

    An unaccepted character stops the token there; the engine is finalized
    with the symbols read so far.
    """
    reporter = reporter or Reporter()
    reporter.reading_token(token)
    logger.debug("Running token %r on %s", token, table.name)

    consumed = 0
    accepted_at: List[int] = []
    error: Optional[UnacceptedSymbolError] = None

    with NFAEngine(table, reporter) as engine:
        try:
            for character in token:
                symbol = Symbol.of(character)
                consumed += 1
                if engine.consume(symbol):
                    accepted_at.append(consumed)
        except UnacceptedSymbolError as e:
            error = e
            logger.info("Token %r aborted at position %d: %s", token, consumed + 1, e)
            reporter.rejected_symbol(e)

    return TokenResult(
        token=token,
        verdict=engine.verdict,
        consumed=consumed,
        error=error,
        accepted_at=tuple(accepted_at),
    )


def run_text(
    text: str, config: Optional[Config] = None, reporter: Optional[Reporter] = None
) -> List[TokenResult]:
    """Run every token of a text."""
    config = config or Config.default()
    table = config.table()
    return [
        run_token(token, table, reporter)
        for token in split_tokens(text, config.separator)
    ]


def run_file(
    path: str, config: Optional[Config] = None, reporter: Optional[Reporter] = None
) -> List[TokenResult]:
    """Run every token of a UTF-8 text file.

    Raises:
        InputFileError: If the file is missing, unreadable or has no tokens.
    """
    config = config or Config.default()
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(path, str(e)) from e

    if not split_tokens(text, config.separator):
        raise InputFileError(path, "no tokens found")
    logger.info("Read %s", path)
    return run_text(text, config, reporter)
