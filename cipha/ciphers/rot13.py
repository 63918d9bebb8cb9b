"""
ROT13 Cipher - rotates every letter halfway round the alphabet

Because 13 is half of 26, applying ROT13 twice returns the original text,
so encode and decode are the same operation.
"""
import string

from ..engine import CipherStrategy, ROT13_SHIFT, register_cipher

_ROT13_TABLE = str.maketrans(
    string.ascii_uppercase + string.ascii_lowercase,
    string.ascii_uppercase[ROT13_SHIFT:] + string.ascii_uppercase[:ROT13_SHIFT]
    + string.ascii_lowercase[ROT13_SHIFT:] + string.ascii_lowercase[:ROT13_SHIFT],
)


@register_cipher
class Rot13Cipher(CipherStrategy):
    """
    ROT13 substitution cipher.

    A simple letter substitution that replaces each letter with
    the letter 13 positions after it in the alphabet.
    Case is preserved; digits, punctuation and whitespace pass through.
    """

    name = "rot13"
    description = "Simple ROT13 letter substitution (self-inverse)."

    def encode(self, text: str) -> str:
        """Encode text using ROT13."""
        return text.translate(_ROT13_TABLE)

    def decode(self, text: str) -> str:
        """Decode ROT13 text (same as encode since ROT13 is symmetric)."""
        return text.translate(_ROT13_TABLE)


def rot13(text: str) -> str:
    return Rot13Cipher().encode(text)
