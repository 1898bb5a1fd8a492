from __future__ import annotations

from ciphersphere.core.errors import InvalidKeyError
from ciphersphere.core.keys import CipherKey, ShiftKey
from ciphersphere.core.registry import register_plugin
from ciphersphere.core.results import CipherMethod, Direction
from ciphersphere.classical.common import shift_text

MIN_SHIFT = 0
MAX_SHIFT = 25


class CaesarCipher:
    name = "caesar"
    method = CipherMethod.CAESAR

    def validate_key(self, key: CipherKey) -> int:
        if not isinstance(key, ShiftKey):
            raise InvalidKeyError("Caesar cipher requires a numeric shift value")
        # Out-of-range keys are rejected, not reduced mod 26.
        if not MIN_SHIFT <= key.shift <= MAX_SHIFT:
            raise InvalidKeyError(f"Shift value must be between {MIN_SHIFT} and {MAX_SHIFT}")
        return key.shift

    def transform(self, text: str, prepared_key: int, direction: Direction) -> str:
        # Decrypt means shift backwards by k
        return shift_text(text, direction.sign * prepared_key)


register_plugin(CaesarCipher())
