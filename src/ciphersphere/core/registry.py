from __future__ import annotations

import logging
from typing import Any, Protocol

from .errors import CipherError
from .keys import CipherKey, coerce_key, describe_key
from .results import (
    CipherFailure,
    CipherMethod,
    CipherOutcome,
    CipherRequest,
    CipherSuccess,
    Direction,
)

logger = logging.getLogger(__name__)


class CipherPlugin(Protocol):
    name: str
    method: CipherMethod

    def validate_key(self, key: CipherKey) -> Any:
        """Return the prepared key, or raise InvalidKeyError."""
        ...

    def transform(self, text: str, prepared_key: Any, direction: Direction) -> str:
        ...


_PLUGINS: dict[CipherMethod, CipherPlugin] = {}


def register_plugin(plugin: CipherPlugin) -> None:
    if not plugin.name.strip():
        raise ValueError("Plugin must have a non-empty name.")
    _PLUGINS[plugin.method] = plugin
    logger.debug("registered cipher plugin %s", plugin.name)


def _ensure_builtins() -> None:
    # Importing the cipher modules registers them; repeat imports are no-ops.
    from ciphersphere.classical import register_all

    register_all()


def list_plugins() -> list[str]:
    _ensure_builtins()
    return sorted(plugin.name for plugin in _PLUGINS.values())


def get_plugin(method: CipherMethod) -> CipherPlugin:
    _ensure_builtins()
    return _PLUGINS[method]


def run_request(request: CipherRequest) -> CipherOutcome:
    """
    Validate the request's method and key, then transform the text.
    Validation errors come back as CipherFailure; nothing is partially applied.
    """
    if not isinstance(request.text, str):
        raise TypeError(f"text must be str, not {type(request.text).__name__}")

    try:
        method = CipherMethod.parse(request.method)
    except CipherError as e:
        logger.debug("rejected request: %s", e.message)
        return CipherFailure(kind=e.kind, message=e.message)

    plugin = get_plugin(method)
    logger.debug(
        "dispatch method=%s direction=%s key=%s length=%d",
        method.value,
        request.direction.value,
        describe_key(request.key),
        len(request.text),
    )
    try:
        prepared = plugin.validate_key(request.key)
    except CipherError as e:
        logger.debug("rejected %s request: %s", method.value, e.message)
        return CipherFailure(kind=e.kind, message=e.message)

    return CipherSuccess(plugin.transform(request.text, prepared, request.direction))


def apply_cipher(text: str, method: Any, key: Any = None, decrypt: bool = False) -> CipherOutcome:
    """
    Single entry point for callers holding raw values:
      method: CipherMethod or "ATBASH" / "CAESAR" / "VIGENERE"
      key:    None, int (Caesar) or str (Vigenere)
    """
    try:
        request = CipherRequest(
            method=CipherMethod.parse(method),
            direction=Direction.from_flag(decrypt),
            key=coerce_key(key),
            text=text,
        )
    except CipherError as e:
        logger.debug("rejected request: %s", e.message)
        return CipherFailure(kind=e.kind, message=e.message)
    return run_request(request)
