import logging

import pytest

from cipha import (CaesarCipher, CipherKind, CipherStrategy, InvalidCipherName,
                   InvalidParameter, MissingParameter, RailFenceCipher, VigenereCipher,
                   cipher_names, decode, encode, get_cipher)
from cipha.engine import CIPHER_REGISTRY, register_cipher

ALL_NAMES = ["rot13", "caesar", "reverse", "gematria", "vigenere", "morse", "atbash", "railfence"]

OPTIONS = {
    "caesar": {"shift": 7},
    "vigenere": {"key": "LEMON"},
    "railfence": {"rails": 3},
}


def test_every_kind_is_registered():
    assert cipher_names() == ALL_NAMES
    assert set(CIPHER_REGISTRY) == set(CipherKind)


@pytest.mark.parametrize("name", ALL_NAMES)
def test_get_cipher_returns_strategy(name):
    cipher = get_cipher(name, **OPTIONS.get(name, {}))
    assert isinstance(cipher, CipherStrategy)
    assert cipher.name == name


@pytest.mark.parametrize("name", ALL_NAMES)
def test_round_trip_through_facade(name):
    message = "MEET ME AT THE OLD BRIDGE, AT NOON"
    options = OPTIONS.get(name, {})
    assert decode(name, encode(name, message, **options), **options) == message


def test_get_cipher_accepts_kind():
    assert isinstance(get_cipher(CipherKind.RAILFENCE, rails=2), RailFenceCipher)


def test_get_cipher_passes_parameters():
    assert get_cipher("caesar", shift=29).shift == 3
    assert get_cipher("caesar").shift == 3
    assert get_cipher("vigenere", key="lemon").key == "LEMON"
    assert get_cipher("railfence", rails=4).rails == 4


@pytest.mark.parametrize("name", ["enigma", "", "ROT13", 13])
def test_unknown_cipher_name(name):
    with pytest.raises(InvalidCipherName) as excinfo:
        get_cipher(name)
    assert "rot13" in str(excinfo.value)


def test_missing_required_parameters():
    with pytest.raises(MissingParameter):
        get_cipher("vigenere")
    with pytest.raises(MissingParameter):
        get_cipher("railfence")


def test_invalid_parameters():
    with pytest.raises(InvalidParameter):
        get_cipher("railfence", rails=0)
    with pytest.raises(InvalidParameter):
        get_cipher("vigenere", key="not a key")


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        get_cipher("nope")


def test_unused_option_is_ignored_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="cipha"):
        cipher = get_cipher("rot13", shift=5)
    assert cipher.encode("abc") == "nop"
    assert "does not use --shift" in caplog.text


def test_instances_are_independent():
    first = get_cipher("caesar", shift=1)
    second = get_cipher("caesar", shift=2)
    assert first.encode("a") == "b"
    assert second.encode("a") == "c"
    assert isinstance(first, CaesarCipher)
    assert repr(first) == "CaesarCipher(shift=1)"


def test_register_cipher_refuses_unknown_names():
    with pytest.raises(TypeError):
        @register_cipher
        class Playfair(CipherStrategy):
            name = "playfair"
            description = "Not part of the suite."

            def encode(self, text):
                return text

            def decode(self, text):
                return text


def test_vigenere_repr_shows_key():
    assert repr(VigenereCipher("key")) == "VigenereCipher(key='KEY')"
