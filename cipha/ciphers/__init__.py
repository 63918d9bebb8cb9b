"""
Built-in ciphers.

Importing this package registers every cipher with the engine registry.
"""
from .atbash import AtbashCipher, atbash
from .caesar import CaesarCipher, caesar_decode, caesar_encode
from .gematria import GematriaCipher, alpha2num, num2alpha
from .morse import MORSE_CODE, MorseCipher, morse_decode, morse_encode
from .railfence import RailFenceCipher, rail_fence_decode, rail_fence_encode
from .reverse import ReverseCipher, reverse
from .rot13 import Rot13Cipher, rot13
from .vigenere import VigenereCipher, vigenere_decode, vigenere_encode

__all__ = [
    'AtbashCipher', 'CaesarCipher', 'GematriaCipher', 'MorseCipher',
    'RailFenceCipher', 'ReverseCipher', 'Rot13Cipher', 'VigenereCipher',
    'MORSE_CODE',
    'alpha2num', 'atbash', 'caesar_decode', 'caesar_encode', 'morse_decode',
    'morse_encode', 'num2alpha', 'rail_fence_decode', 'rail_fence_encode',
    'reverse', 'rot13', 'vigenere_decode', 'vigenere_encode',
]
