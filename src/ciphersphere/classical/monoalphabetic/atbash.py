from __future__ import annotations

from ciphersphere.core.errors import InvalidKeyError
from ciphersphere.core.keys import CipherKey, NoKey
from ciphersphere.core.registry import register_plugin
from ciphersphere.core.results import CipherMethod, Direction
from ciphersphere.classical.common import mirror_letter


def _apply(text: str) -> str:
    return "".join(mirror_letter(ch) for ch in text)


class AtbashCipher:
    name = "atbash"
    method = CipherMethod.ATBASH

    def validate_key(self, key: CipherKey) -> None:
        if not isinstance(key, NoKey):
            raise InvalidKeyError("Atbash cipher does not take a key")

    def transform(self, text: str, prepared_key: None, direction: Direction) -> str:
        # self-inverse: direction is irrelevant
        return _apply(text)


register_plugin(AtbashCipher())
