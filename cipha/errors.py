"""Exceptions raised by the cipher suite."""


class CipherError(Exception):
    """Base class for every error raised by cipha."""


class InvalidCipherName(CipherError, ValueError):
    """The requested cipher identifier is not one of the known ciphers."""


class MissingParameter(CipherError, ValueError):
    """A parameter required by the selected cipher was not supplied."""


class InvalidParameter(CipherError, ValueError):
    """A parameter was supplied but lies outside the cipher's domain."""


class InputUnavailable(CipherError):
    """No message source was given, or the source could not be read."""


class MalformedDecodeInput(CipherError, ValueError):
    """Input to a decode operation does not belong to the cipher's alphabet."""
