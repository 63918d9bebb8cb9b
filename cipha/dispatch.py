"""
Name-based access to the registered ciphers.

Both the function API and the command line go through :func:`get_cipher`,
which turns a cipher identifier plus the optional ``shift``, ``key`` and
``rails`` options into a ready-to-use cipher instance.
"""
import logging
from typing import List, Optional, Union

from . import ciphers  # noqa: F401  (registers the built-in ciphers)
from .engine import CIPHER_REGISTRY, CipherKind, CipherStrategy
from .errors import InvalidCipherName

logger = logging.getLogger(__name__)


def cipher_names() -> List[str]:
    """Identifiers of every registered cipher, in declaration order."""
    return [kind.value for kind in CipherKind if kind in CIPHER_REGISTRY]


def get_cipher(name: Union[str, CipherKind], shift: Optional[int] = None,
               key: Optional[str] = None, rails: Optional[int] = None) -> CipherStrategy:
    """
    Resolve a cipher identifier and its options into a cipher instance.

    Options the selected cipher does not use are ignored with a warning.

    Raises:
        InvalidCipherName: ``name`` is not a known cipher.
        MissingParameter: a required option (key, rails) was not supplied.
        InvalidParameter: an option is outside the cipher's domain.
    """
    try:
        kind = CipherKind(name)
        cls = CIPHER_REGISTRY[kind]
    except (ValueError, KeyError):
        raise InvalidCipherName(
            f"Unknown cipher {name!r}. Choose from: {', '.join(cipher_names())}") from None

    supplied = {"shift": shift, "key": key, "rails": rails}
    for option, value in supplied.items():
        if value is not None and option not in cls.parameters:
            logger.warning("Cipher '%s' does not use --%s. Ignoring it.", kind.value, option)

    cipher = cls.from_options(shift=shift, key=key, rails=rails)
    logger.info("Selected %r", cipher)
    return cipher


def encode(name: Union[str, CipherKind], text: str, **options) -> str:
    """Encode ``text`` with the named cipher."""
    return get_cipher(name, **options).encode(text)


def decode(name: Union[str, CipherKind], text: str, **options) -> str:
    """Decode ``text`` with the named cipher."""
    return get_cipher(name, **options).decode(text)
