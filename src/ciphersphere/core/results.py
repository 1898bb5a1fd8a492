from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .errors import ErrorKind, UnknownMethodError
from .keys import CipherKey, NoKey


class CipherMethod(str, Enum):
    ATBASH = "ATBASH"
    CAESAR = "CAESAR"
    VIGENERE = "VIGENERE"

    @classmethod
    def parse(cls, value: Any) -> "CipherMethod":
        """Accept a member or its exact value; anything else is unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise UnknownMethodError(
            f"Unknown cipher method {value!r}. Available: {', '.join(m.value for m in cls)}"
        )


class Direction(str, Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @classmethod
    def from_flag(cls, decrypt: bool) -> "Direction":
        return cls.DECRYPT if decrypt else cls.ENCRYPT

    @property
    def sign(self) -> int:
        return -1 if self is Direction.DECRYPT else 1


@dataclass(frozen=True, kw_only=True)
class CipherRequest:
    method: CipherMethod
    direction: Direction
    key: CipherKey = NoKey()
    text: str


@dataclass(frozen=True)
class CipherSuccess:
    text: str

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"success": True, "result": self.text}


@dataclass(frozen=True)
class CipherFailure:
    kind: ErrorKind
    message: str

    @property
    def success(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "error": self.message, "kind": self.kind.value}


CipherOutcome = Union[CipherSuccess, CipherFailure]
