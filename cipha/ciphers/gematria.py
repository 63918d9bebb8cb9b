"""
Gematria Converter - letters to alphabet positions and back

Encoding turns the message into a stream of tokens, one per character:

- an ASCII letter becomes its 1-based alphabet position (A/a=1 ... Z/z=26)
- any other character is its own token

Tokens are joined by exactly one space and nothing is trimmed, so a space in
the message shows up as three consecutive spaces (separator, token,
separator)::

    "Hello, World!" -> "8 5 12 12 15 ,   23 15 18 12 4 !"

Decoding reads the stream back: a run of digits is a number token, any other
character is a literal token, and a single space separates tokens. Numbers
come back as uppercase letters, so case is not recovered. Digits in the
original message also come back as letters, since they are indistinguishable
from position numbers.

The decoder only accepts what the encoder produces: a number with a leading
zero, a number outside 1-26, a missing separator or a separator at the very
end of the stream raises MalformedDecodeInput.
"""
import logging
import string

from ..engine import ALPHABET_SIZE, CipherStrategy, is_ascii_letter, register_cipher
from ..errors import MalformedDecodeInput

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR = " "


@register_cipher
class GematriaCipher(CipherStrategy):
    name = "gematria"
    description = "Replaces letters with their alphabet position (A=1 ... Z=26)."
    trim_decode_input = True

    def encode(self, text: str) -> str:
        if any(c in string.digits for c in text):
            logger.warning("Message contains digits; they will decode as letters.")
        tokens = [str(ord(c.upper()) - ord('A') + 1) if is_ascii_letter(c) else c
                  for c in text]
        return TOKEN_SEPARATOR.join(tokens)

    def decode(self, text: str) -> str:
        out = []
        i = 0
        length = len(text)
        while i < length:
            if text[i] in string.digits:
                start = i
                while i < length and text[i] in string.digits:
                    i += 1
                digits = text[start:i]
                if digits.startswith("0") and len(digits) > 1:
                    raise MalformedDecodeInput(
                        f"Gematria value {digits!r} at position {start} has a leading zero")
                number = int(digits)
                if not 1 <= number <= ALPHABET_SIZE:
                    raise MalformedDecodeInput(
                        f"Gematria value {number} at position {start} is outside 1-{ALPHABET_SIZE}")
                out.append(chr(ord('A') + number - 1))
            else:
                out.append(text[i])
                i += 1

            if i < length:
                if text[i] != TOKEN_SEPARATOR:
                    raise MalformedDecodeInput(
                        f"Expected a single space between tokens at position {i}, got {text[i]!r}")
                i += 1
                if i == length:
                    raise MalformedDecodeInput(
                        f"Separator at position {i - 1} is not followed by a token")
        return "".join(out)


def alpha2num(text: str) -> str:
    return GematriaCipher().encode(text)


def num2alpha(text: str) -> str:
    return GematriaCipher().decode(text)
