"""Input alphabet of the automaton."""

from enum import Enum

from nfasim.exceptions import UnacceptedSymbolError


class Symbol(Enum):
    """One of the four symbols the automaton reads.

    Each member corresponds to exactly one input character, so reading a
    character through :meth:`of` is the only way in.
    """

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"

    @classmethod
    def of(cls, character: str) -> "Symbol":
        """Get the symbol for a single input character.

        Raises:
            UnacceptedSymbolError: If the character is outside the alphabet.
        """
        try:
            return cls(character)
        except (ValueError, TypeError):
            raise UnacceptedSymbolError(character) from None

    def __str__(self) -> str:
        return self.value
