"""
Caesar Cipher - fixed alphabetic shift

Every letter is moved ``shift`` places along its own alphabet (upper or
lower case), wrapping from Z back to A. Any integer shift is accepted and
normalized modulo 26, so a shift of 29 behaves exactly like a shift of 3.
"""
from typing import Optional

from ..engine import (ALPHABET_SIZE, DEFAULT_SHIFT, CipherStrategy,
                      register_cipher, shift_letter)
from ..errors import InvalidParameter


@register_cipher
class CaesarCipher(CipherStrategy):
    """Caesar shift cipher; decode shifts in the opposite direction."""

    name = "caesar"
    description = f"Shifts each letter by a fixed amount (--shift, default {DEFAULT_SHIFT})."
    parameters = ("shift",)

    def __init__(self, shift: int = DEFAULT_SHIFT):
        if isinstance(shift, bool) or not isinstance(shift, int):
            raise InvalidParameter(f"Caesar shift must be an integer, got {shift!r}")
        self._shift = shift % ALPHABET_SIZE

    @classmethod
    def from_options(cls, shift: Optional[int] = None, key: Optional[str] = None,
                     rails: Optional[int] = None) -> "CaesarCipher":
        return cls(DEFAULT_SHIFT if shift is None else shift)

    @property
    def shift(self) -> int:
        """The normalized shift, always in 0..25."""
        return self._shift

    def _apply(self, text: str, shift: int) -> str:
        return "".join(shift_letter(char, shift) for char in text)

    def encode(self, text: str) -> str:
        return self._apply(text, self._shift)

    def decode(self, text: str) -> str:
        return self._apply(text, -self._shift)

    def __repr__(self) -> str:
        return f"CaesarCipher(shift={self._shift})"


def caesar_encode(text: str, shift: int = DEFAULT_SHIFT) -> str:
    return CaesarCipher(shift).encode(text)


def caesar_decode(text: str, shift: int = DEFAULT_SHIFT) -> str:
    return CaesarCipher(shift).decode(text)
