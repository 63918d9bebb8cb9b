"""
Atbash Cipher - mirror substitution

A maps to Z, B to Y and so on, separately for each case. The mapping is its
own inverse.
"""
import string

from ..engine import CipherStrategy, register_cipher

_ATBASH_TABLE = str.maketrans(
    string.ascii_uppercase + string.ascii_lowercase,
    string.ascii_uppercase[::-1] + string.ascii_lowercase[::-1],
)


@register_cipher
class AtbashCipher(CipherStrategy):
    name = "atbash"
    description = "Mirrors the alphabet (A<->Z, B<->Y); self-inverse."

    def encode(self, text: str) -> str:
        return text.translate(_ATBASH_TABLE)

    def decode(self, text: str) -> str:
        return text.translate(_ATBASH_TABLE)


def atbash(text: str) -> str:
    return AtbashCipher().encode(text)
