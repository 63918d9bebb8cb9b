from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Optional, Tuple, Type

# Shared alphabet constants
ALPHABET_SIZE = 26
DEFAULT_SHIFT = 3
ROT13_SHIFT = 13

# ==========================================
#  FRAMEWORK: Abstract Base Class & Registry
# ==========================================

class CipherKind(str, Enum):
    """The closed set of ciphers the suite knows about."""

    ROT13 = "rot13"
    CAESAR = "caesar"
    REVERSE = "reverse"
    GEMATRIA = "gematria"
    VIGENERE = "vigenere"
    MORSE = "morse"
    ATBASH = "atbash"
    RAILFENCE = "railfence"


class CipherStrategy(ABC):
    """Abstract base class that all ciphers must implement."""

    # Option names (shift, key, rails) this cipher consumes.
    parameters: Tuple[str, ...] = ()

    # Strip trailing line terminators from decode input read by the CLI.
    trim_decode_input = False

    @property
    @abstractmethod
    def name(self) -> str:
        """The command-line name for this cipher."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description for help text."""
        pass

    @classmethod
    def from_options(cls, shift: Optional[int] = None, key: Optional[str] = None,
                     rails: Optional[int] = None) -> "CipherStrategy":
        """Build an instance from CLI-style options. Parameterless by default."""
        return cls()

    @abstractmethod
    def encode(self, text: str) -> str:
        pass

    @abstractmethod
    def decode(self, text: str) -> str:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


CIPHER_REGISTRY: Dict[CipherKind, Type[CipherStrategy]] = {}

def register_cipher(cls):
    """Decorator to register a cipher class under its CipherKind."""
    try:
        kind = CipherKind(cls.name)
    except ValueError:
        raise TypeError(f"{cls.__name__} has unknown cipher name {cls.name!r}") from None
    CIPHER_REGISTRY[kind] = cls
    return cls


def shift_letter(char: str, shift: int) -> str:
    """Rotate an ASCII letter within its own case; other characters pass through."""
    if 'a' <= char <= 'z':
        return chr((ord(char) - ord('a') + shift) % ALPHABET_SIZE + ord('a'))
    if 'A' <= char <= 'Z':
        return chr((ord(char) - ord('A') + shift) % ALPHABET_SIZE + ord('A'))
    return char


def is_ascii_letter(char: str) -> bool:
    return 'a' <= char <= 'z' or 'A' <= char <= 'Z'
