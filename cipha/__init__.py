"""
cipha - classical ciphers and encodings

ROT13, Caesar, Vigenère, Atbash, Morse code, Rail Fence, reverse and a
letter/number (gematria) converter, available as plain functions, as cipher
objects sharing one encode/decode contract, and through the ``cipha``
command line tool.

None of these ciphers offer any real confidentiality.
"""

__version__ = '0.1.0'

from .ciphers import (AtbashCipher, CaesarCipher, GematriaCipher, MorseCipher,
                      RailFenceCipher, ReverseCipher, Rot13Cipher, VigenereCipher,
                      alpha2num, atbash, caesar_decode, caesar_encode, morse_decode,
                      morse_encode, num2alpha, rail_fence_decode, rail_fence_encode,
                      reverse, rot13, vigenere_decode, vigenere_encode)
from .dispatch import cipher_names, decode, encode, get_cipher
from .engine import CipherKind, CipherStrategy
from .errors import (CipherError, InputUnavailable, InvalidCipherName,
                     InvalidParameter, MalformedDecodeInput, MissingParameter)
