from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .errors import InvalidKeyError


@dataclass(frozen=True)
class NoKey:
    """Keyless ciphers (Atbash)."""


@dataclass(frozen=True)
class ShiftKey:
    shift: int


@dataclass(frozen=True)
class WordKey:
    word: str


CipherKey = Union[NoKey, ShiftKey, WordKey]


def coerce_key(raw: Any) -> CipherKey:
    """
    Map a raw caller value onto the CipherKey union:
      None -> NoKey, int -> ShiftKey, str -> WordKey

    Ranges and key content are left to the cipher that consumes the key.
    """
    if isinstance(raw, (NoKey, ShiftKey, WordKey)):
        return raw
    if raw is None:
        return NoKey()
    # bool is an int subclass; a flag is never a shift
    if isinstance(raw, bool):
        raise InvalidKeyError("Key must be an integer or a string, not a boolean.")
    if isinstance(raw, int):
        return ShiftKey(raw)
    if isinstance(raw, str):
        return WordKey(raw)
    raise InvalidKeyError(f"Unsupported key type: {type(raw).__name__}.")


def describe_key(key: CipherKey) -> str:
    if isinstance(key, ShiftKey):
        return "shift"
    if isinstance(key, WordKey):
        return "word"
    return "none"
