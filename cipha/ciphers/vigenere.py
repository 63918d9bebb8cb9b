"""
Vigenère Cipher - polyalphabetic shift driven by a repeating key

Each key letter contributes a shift of 0-25 (its alphabet position, case
ignored). The key index only advances on letters of the message, so spaces,
digits and punctuation are copied through without consuming key material.
"""
import string
from typing import List, Optional

from ..engine import CipherStrategy, is_ascii_letter, register_cipher, shift_letter
from ..errors import InvalidParameter, MissingParameter


@register_cipher
class VigenereCipher(CipherStrategy):
    """Vigenère cipher over the 26-letter Latin alphabet."""

    name = "vigenere"
    description = "Polyalphabetic shift cipher keyed by a word (--key, required)."
    parameters = ("key",)

    def __init__(self, key: str):
        if not key:
            raise MissingParameter("Vigenère cipher requires a non-empty key")
        if any(c not in string.ascii_letters for c in key):
            raise InvalidParameter(f"Vigenère key must contain only letters A-Z, got {key!r}")
        self._key = key.upper()
        self._shifts: List[int] = [ord(c) - ord('A') for c in self._key]

    @classmethod
    def from_options(cls, shift: Optional[int] = None, key: Optional[str] = None,
                     rails: Optional[int] = None) -> "VigenereCipher":
        if key is None:
            raise MissingParameter("Vigenère cipher requires --key")
        return cls(key)

    @property
    def key(self) -> str:
        return self._key

    def _apply(self, text: str, direction: int) -> str:
        out = []
        key_idx = 0
        for ch in text:
            if is_ascii_letter(ch):
                shift = self._shifts[key_idx % len(self._shifts)]
                out.append(shift_letter(ch, direction * shift))
                key_idx += 1  # Only advance the key index when we use it
            else:
                out.append(ch)
        return "".join(out)

    def encode(self, text: str) -> str:
        return self._apply(text, 1)

    def decode(self, text: str) -> str:
        return self._apply(text, -1)

    def __repr__(self) -> str:
        return f"VigenereCipher(key={self._key!r})"


def vigenere_encode(text: str, key: str) -> str:
    return VigenereCipher(key).encode(text)


def vigenere_decode(text: str, key: str) -> str:
    return VigenereCipher(key).decode(text)
