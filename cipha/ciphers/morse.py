"""
Morse Code - International Morse for letters, digits and common punctuation

Symbols are separated by a single space and every whitespace character of the
message becomes the word token ``/``::

    "SOS HELP" -> "... --- ... / .... . .-.. .--."

Encoding is case-insensitive. Characters that have no Morse symbol are
dropped with a logged warning. Decoding is strict: a token that is neither
``/`` nor a known symbol raises MalformedDecodeInput.
"""
import logging
from types import MappingProxyType
from typing import List

from ..engine import CipherStrategy, register_cipher
from ..errors import MalformedDecodeInput

logger = logging.getLogger(__name__)

SYMBOL_SEPARATOR = " "
WORD_SEPARATOR = "/"

MORSE_CODE = MappingProxyType({
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..",
    "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
    "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",
    ".": ".-.-.-", ",": "--..--", "?": "..--..", ";": "-.-.-.", ":": "---...",
    "-": "-....-", "/": "-..-.", "'": ".----.", '"': ".-..-.", "=": "-...-",
    "_": "..--.-", "+": ".-.-.", "(": "-.--.", ")": "-.--.-", "!": "-.-.--",
})

MORSE_REVERSE = MappingProxyType({code: char for char, code in MORSE_CODE.items()})


@register_cipher
class MorseCipher(CipherStrategy):
    name = "morse"
    description = "International Morse code; words separated by '/'."

    def encode(self, text: str) -> str:
        symbols: List[str] = []
        skipped = set()
        for char in text:
            if char.isspace():
                symbols.append(WORD_SEPARATOR)
                continue
            code = MORSE_CODE.get(char.upper())
            if code is None:
                skipped.add(char)
            else:
                symbols.append(code)
        if skipped:
            logger.warning("No Morse symbol for %s; dropped from output.",
                           ", ".join(repr(c) for c in sorted(skipped)))
        return SYMBOL_SEPARATOR.join(symbols)

    def decode(self, text: str) -> str:
        out = []
        for token in text.split():
            if token == WORD_SEPARATOR:
                out.append(" ")
                continue
            char = MORSE_REVERSE.get(token)
            if char is None:
                raise MalformedDecodeInput(f"Unknown Morse symbol {token!r}")
            out.append(char)
        return "".join(out)


def morse_encode(text: str) -> str:
    return MorseCipher().encode(text)


def morse_decode(code: str) -> str:
    return MorseCipher().decode(code)
