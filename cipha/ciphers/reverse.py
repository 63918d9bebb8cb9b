from ..engine import CipherStrategy, register_cipher


@register_cipher
class ReverseCipher(CipherStrategy):
    """Reverses the full character sequence, spaces and punctuation included."""

    name = "reverse"
    description = "Writes the message backwards; self-inverse."

    def encode(self, text: str) -> str:
        return text[::-1]

    def decode(self, text: str) -> str:
        return text[::-1]


def reverse(text: str) -> str:
    return ReverseCipher().encode(text)
