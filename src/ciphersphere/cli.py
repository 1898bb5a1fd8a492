from __future__ import annotations

import json
import logging
import sys
from typing import Optional, Union

import typer

from ciphersphere.core.registry import apply_cipher, list_plugins
from ciphersphere.core.results import CipherMethod, CipherOutcome

app = typer.Typer(help="CipherSphere CLI: Atbash, Caesar and Vigenère encrypt/decrypt.")


@app.callback()
def _init(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="CIPHERSPHERE_LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
):
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level '{log_level}'.")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _read_text(text: str) -> str:
    if text == "-":
        return sys.stdin.read().rstrip("\n")
    return text


def _cli_key(cipher: str, key: Optional[str]) -> Union[int, str, None]:
    # Keys always arrive as strings; Caesar wants the integer when there is one
    if key is None:
        return None
    if cipher == CipherMethod.CAESAR.value:
        try:
            return int(key)
        except ValueError:
            return key
    return key


def _emit(outcome: CipherOutcome, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(outcome.to_dict(), ensure_ascii=False))
        if not outcome.success:
            raise typer.Exit(code=1)
        return
    if not outcome.success:
        raise typer.BadParameter(outcome.message)
    typer.echo(outcome.text)


def _run(text: str, cipher: str, key: Optional[str], decrypt: bool, as_json: bool) -> None:
    # -c caesar -> CAESAR
    cipher = cipher.strip().upper()
    outcome = apply_cipher(_read_text(text), cipher, _cli_key(cipher, key), decrypt=decrypt)
    _emit(outcome, as_json)


@app.command()
def methods():
    """List all registered cipher methods."""
    for name in list_plugins():
        typer.echo(name)


@app.command()
def encrypt(
    cipher: str = typer.Option(..., "--cipher", "-c", help="Cipher name (atbash, caesar, vigenere)."),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Shift (caesar) or keyword (vigenere)."),
    as_json: bool = typer.Option(False, "--json", help="Print the outcome as JSON."),
    text: str = typer.Argument(..., help="Plaintext, or '-' to read stdin."),
):
    """Encrypt text with a known cipher and key."""
    _run(text, cipher, key, False, as_json)


@app.command()
def decrypt(
    cipher: str = typer.Option(..., "--cipher", "-c", help="Cipher name (atbash, caesar, vigenere)."),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Shift (caesar) or keyword (vigenere)."),
    as_json: bool = typer.Option(False, "--json", help="Print the outcome as JSON."),
    text: str = typer.Argument(..., help="Ciphertext, or '-' to read stdin."),
):
    """Decrypt when you already know the cipher type and have the key."""
    _run(text, cipher, key, True, as_json)


def main():
    app()


if __name__ == "__main__":
    main()
