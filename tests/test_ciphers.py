import pytest

from ciphersphere.core import ErrorKind, apply_cipher

SAMPLES = [
    "",
    "HELLO",
    "Hello, World!",
    "attack at dawn... 0600 hrs",
    "Ünïcödé stays, ASCII moves: xyz XYZ",
    "line one\nline two\ttabbed",
]


def _ok(outcome):
    assert outcome.success, outcome
    return outcome.text


# --- Atbash -------------------------------------------------------------------

def test_atbash_fixed_example():
    assert _ok(apply_cipher("Attack", "ATBASH")) == "Zggzxp"


def test_atbash_full_alphabet():
    assert _ok(apply_cipher("abcdefghijklmnopqrstuvwxyz", "ATBASH")) == "zyxwvutsrqponmlkjihgfedcba"


@pytest.mark.parametrize("text", SAMPLES)
def test_atbash_is_an_involution(text):
    once = _ok(apply_cipher(text, "ATBASH"))
    assert _ok(apply_cipher(once, "ATBASH")) == text


def test_atbash_ignores_direction():
    assert apply_cipher("Attack", "ATBASH", decrypt=True) == apply_cipher("Attack", "ATBASH")


def test_atbash_rejects_a_key():
    outcome = apply_cipher("Attack", "ATBASH", 3)
    assert not outcome.success
    assert outcome.kind is ErrorKind.INVALID_KEY


# --- Caesar -------------------------------------------------------------------

def test_caesar_fixed_example():
    assert _ok(apply_cipher("HELLO", "CAESAR", 3)) == "KHOOR"
    assert _ok(apply_cipher("KHOOR", "CAESAR", 3, decrypt=True)) == "HELLO"


def test_caesar_preserves_case_and_punctuation():
    assert _ok(apply_cipher("Hello, World!", "CAESAR", 1)) == "Ifmmp, Xpsme!"


def test_caesar_digits_pass_through():
    assert _ok(apply_cipher("Room 101", "CAESAR", 13)) == "Ebbz 101"


@pytest.mark.parametrize("text", SAMPLES)
def test_caesar_round_trip_every_shift(text):
    for k in range(26):
        enc = _ok(apply_cipher(text, "CAESAR", k))
        assert _ok(apply_cipher(enc, "CAESAR", k, decrypt=True)) == text


def test_caesar_zero_shift_is_identity():
    assert _ok(apply_cipher("Same text.", "CAESAR", 0)) == "Same text."


def test_caesar_decrypt_wraps_below_a():
    assert _ok(apply_cipher("abc", "CAESAR", 3, decrypt=True)) == "xyz"


@pytest.mark.parametrize("key", [-1, 26, 100, None, "3", "three", 3.0, True])
def test_caesar_invalid_keys(key):
    outcome = apply_cipher("text", "CAESAR", key)
    assert not outcome.success
    assert outcome.kind is ErrorKind.INVALID_KEY
    assert outcome.message


def test_caesar_range_message():
    outcome = apply_cipher("text", "CAESAR", 26)
    assert outcome.message == "Shift value must be between 0 and 25"


# --- Vigenere -----------------------------------------------------------------

def test_vigenere_fixed_example():
    assert _ok(apply_cipher("ATTACKATDAWN", "VIGENERE", "LEMON")) == "LXFOPVEFRNHR"
    assert _ok(apply_cipher("LXFOPVEFRNHR", "VIGENERE", "LEMON", decrypt=True)) == "ATTACKATDAWN"


def test_vigenere_cursor_skips_non_letters():
    assert _ok(apply_cipher("attack at dawn!", "VIGENERE", "LEMON")) == "lxfopv ef rnhr!"


def test_vigenere_key_case_and_noise_are_ignored():
    expected = _ok(apply_cipher("Attack at Dawn", "VIGENERE", "LEMON"))
    assert _ok(apply_cipher("Attack at Dawn", "VIGENERE", "lemon")) == expected
    assert _ok(apply_cipher("Attack at Dawn", "VIGENERE", "Le-Mon 99")) == expected
    assert expected == "Lxfopv ef Rnhr"


def test_vigenere_single_letter_key_matches_caesar():
    assert _ok(apply_cipher("Hello, World!", "VIGENERE", "d")) == _ok(
        apply_cipher("Hello, World!", "CAESAR", 3)
    )


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("key", ["LEMON", "k", "Crypto-Graphy"])
def test_vigenere_round_trip(text, key):
    enc = _ok(apply_cipher(text, "VIGENERE", key))
    assert _ok(apply_cipher(enc, "VIGENERE", key, decrypt=True)) == text


@pytest.mark.parametrize("key", ["123", "", "!! --", None, 7])
def test_vigenere_invalid_keys(key):
    outcome = apply_cipher("text", "VIGENERE", key)
    assert not outcome.success
    assert outcome.kind is ErrorKind.INVALID_KEY


# --- Shared -------------------------------------------------------------------

@pytest.mark.parametrize(
    "method, key",
    [("ATBASH", None), ("CAESAR", 5), ("VIGENERE", "KEY")],
)
@pytest.mark.parametrize("decrypt", [False, True])
def test_empty_text_is_identity(method, key, decrypt):
    outcome = apply_cipher("", method, key, decrypt=decrypt)
    assert outcome.success
    assert outcome.text == ""


@pytest.mark.parametrize(
    "key, message",
    [
        ("123", "Key must contain at least one alphabetic character"),
        ("", "Key cannot be empty"),
        (None, "Vigenère cipher requires a string key"),
    ],
)
def test_vigenere_key_messages(key, message):
    assert apply_cipher("text", "VIGENERE", key).message == message
