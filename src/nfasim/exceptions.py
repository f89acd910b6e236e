"""Custom exceptions for nfasim."""


class NfasimError(Exception):
    """Base exception for all nfasim errors."""

    pass


class UnacceptedSymbolError(NfasimError):
    """Raised when a character is not part of the automaton's alphabet."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"Automaton doesn't accept symbol: {character}")


class EngineClosedError(NfasimError):
    """Raised when an engine is used after it has been finalized."""

    pass


class UnknownPresetError(NfasimError):
    """Raised when a transition table preset name is not known."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown transition table preset: {name!r}")


class ConfigError(NfasimError):
    """Raised when a configuration value is invalid."""

    pass


class InputFileError(NfasimError):
    """Raised when an input file cannot be read or holds no tokens."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
