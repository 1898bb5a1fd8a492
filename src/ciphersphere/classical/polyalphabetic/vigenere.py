from __future__ import annotations

from ciphersphere.core.errors import InvalidKeyError
from ciphersphere.core.keys import CipherKey, WordKey
from ciphersphere.core.registry import register_plugin
from ciphersphere.core.results import CipherMethod, Direction
from ciphersphere.classical.common import (
    is_ascii_letter,
    letter_index,
    norm_key_alpha,
    shift_letter,
)


def _vigenere(text: str, shifts: list[int], sign: int) -> str:
    """
    The key cursor only advances on letters, so encrypt and decrypt consume
    the key at the same positions whatever punctuation sits in between.
    """
    out = []
    j = 0
    for ch in text:
        if is_ascii_letter(ch):
            out.append(shift_letter(ch, sign * shifts[j % len(shifts)]))
            j += 1
        else:
            out.append(ch)
    return "".join(out)


class VigenereCipher:
    name = "vigenere"
    method = CipherMethod.VIGENERE

    def validate_key(self, key: CipherKey) -> list[int]:
        if not isinstance(key, WordKey):
            raise InvalidKeyError("Vigenère cipher requires a string key")
        if not key.word:
            raise InvalidKeyError("Key cannot be empty")
        k = norm_key_alpha(key.word)
        if not k:
            raise InvalidKeyError("Key must contain at least one alphabetic character")
        return [letter_index(ch) for ch in k]

    def transform(self, text: str, prepared_key: list[int], direction: Direction) -> str:
        return _vigenere(text, prepared_key, direction.sign)


register_plugin(VigenereCipher())
