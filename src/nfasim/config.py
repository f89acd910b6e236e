"""Configuration for simulation runs."""

import logging
from dataclasses import dataclass

from nfasim.exceptions import ConfigError, UnknownPresetError
from nfasim.table import PRESETS, TransitionTable, get_preset

DEFAULT_PRESET = "ten-state"
DEFAULT_SEPARATOR = "#"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Configuration for a simulation run.

    Attributes:
        preset: Name of the transition table preset to simulate.
        separator: Separator between tokens of an input file.
        show_table: Print the transition table before running tokens.
        log_level: Name of the logging level used by the command line.
    """

    preset: str = DEFAULT_PRESET
    separator: str = DEFAULT_SEPARATOR
    show_table: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if not self.separator or self.separator.isspace():
            raise ConfigError("Token separator must not be blank")
        if self.preset not in PRESETS:
            raise ConfigError(
                f"Unknown preset {self.preset!r}, expected one of: "
                + ", ".join(sorted(PRESETS))
            )
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level {self.log_level!r}")

    @classmethod
    def default(cls) -> "Config":
        """Create the default configuration."""
        return cls()

    def table(self) -> TransitionTable:
        """Resolve the configured preset."""
        try:
            return get_preset(self.preset)
        except UnknownPresetError as e:
            raise ConfigError(str(e)) from e

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)
