from .errors import CipherError, ErrorKind, InvalidKeyError, UnknownMethodError
from .keys import CipherKey, NoKey, ShiftKey, WordKey, coerce_key
from .results import (
    CipherFailure,
    CipherMethod,
    CipherOutcome,
    CipherRequest,
    CipherSuccess,
    Direction,
)
from .registry import apply_cipher, list_plugins, register_plugin, run_request

__all__ = [
    "CipherError",
    "ErrorKind",
    "InvalidKeyError",
    "UnknownMethodError",
    "CipherKey",
    "NoKey",
    "ShiftKey",
    "WordKey",
    "coerce_key",
    "CipherFailure",
    "CipherMethod",
    "CipherOutcome",
    "CipherRequest",
    "CipherSuccess",
    "Direction",
    "apply_cipher",
    "list_plugins",
    "register_plugin",
    "run_request",
]
