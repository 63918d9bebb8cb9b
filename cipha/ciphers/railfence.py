"""
Rail Fence Cipher - zigzag transposition

The message is written diagonally down and up across ``rails`` rows and read
off row by row. Every character takes part, including spaces and
punctuation. With one rail, or at least as many rails as characters, the
zigzag never turns and the text is returned unchanged.
"""
from typing import List, Optional

from ..engine import CipherStrategy, register_cipher
from ..errors import InvalidParameter, MissingParameter


@register_cipher
class RailFenceCipher(CipherStrategy):
    """Zigzag transposition over a configurable number of rails."""

    name = "railfence"
    description = "Zigzag transposition across N rails (--rails, required)."
    parameters = ("rails",)

    def __init__(self, rails: int):
        if isinstance(rails, bool) or not isinstance(rails, int):
            raise InvalidParameter(f"Rail count must be an integer, got {rails!r}")
        if rails < 1:
            raise InvalidParameter(f"Rail count must be at least 1, got {rails}")
        self._rails = rails

    @classmethod
    def from_options(cls, shift: Optional[int] = None, key: Optional[str] = None,
                     rails: Optional[int] = None) -> "RailFenceCipher":
        if rails is None:
            raise MissingParameter("Rail fence cipher requires --rails")
        return cls(rails)

    @property
    def rails(self) -> int:
        return self._rails

    def _read_order(self, length: int) -> List[int]:
        """Plaintext positions in the order they are read off the rails."""
        if self._rails == 1:
            return list(range(length))
        cycle = 2 * (self._rails - 1)

        def rail_of(i: int) -> int:
            p = i % cycle
            return p if p < self._rails else cycle - p

        # sorted() is stable, so positions stay left-to-right within a rail
        return sorted(range(length), key=rail_of)

    def encode(self, text: str) -> str:
        return "".join(text[i] for i in self._read_order(len(text)))

    def decode(self, text: str) -> str:
        result = [""] * len(text)
        for char, pos in zip(text, self._read_order(len(text))):
            result[pos] = char
        return "".join(result)

    def __repr__(self) -> str:
        return f"RailFenceCipher(rails={self._rails})"


def rail_fence_encode(text: str, rails: int) -> str:
    return RailFenceCipher(rails).encode(text)


def rail_fence_decode(text: str, rails: int) -> str:
    return RailFenceCipher(rails).decode(text)
