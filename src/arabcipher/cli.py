from __future__ import annotations

import logging
import sys

import typer

from arabcipher.classical import register_all
from arabcipher.core.features import analyze_text
from arabcipher.core.registry import decrypt as decrypt_text
from arabcipher.core.registry import encrypt as encrypt_text
from arabcipher.core.registry import list_ciphers
from arabcipher.core.results import CipherResult

app = typer.Typer(help="arabcipher: classical ciphers over the 36-symbol Arabic alphabet (not secure).")


@app.callback()
def _init(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each operation to stderr."),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )
    # Register ciphers exactly once per CLI run
    register_all()


def _read_text(text: str) -> str:
    if text == "-":
        return sys.stdin.read().rstrip("\n")
    return text


def _emit(result: CipherResult) -> None:
    if not result.ok:
        raise typer.BadParameter(result.message)
    typer.echo(result.text)


@app.command()
def ciphers():
    """List the available ciphers and the key each one expects."""
    for spec in list_ciphers():
        typer.echo(f"{spec.name:<22} {spec.key_hint}")


@app.command()
def encrypt(
    cipher: str = typer.Option(..., "--cipher", "-c", help="Cipher name (e.g., Shift, Vigenère, Rail-Fence)."),
    key: str = typer.Option(..., "--key", "-k", help="Key material for the cipher."),
    text: str = typer.Argument(..., help="Plaintext to encrypt ('-' reads stdin)."),
):
    """Encrypt plaintext with the selected cipher."""
    _emit(encrypt_text(cipher, _read_text(text), key))


@app.command()
def decrypt(
    cipher: str = typer.Option(..., "--cipher", "-c", help="Cipher name (e.g., Shift, Vigenère, Rail-Fence)."),
    key: str = typer.Option(..., "--key", "-k", help="Key material for the cipher."),
    text: str = typer.Argument(..., help="Ciphertext to decrypt ('-' reads stdin)."),
):
    """Decrypt ciphertext when you know the cipher and the key."""
    _emit(decrypt_text(cipher, _read_text(text), key))


@app.command()
def analyze(text: str = typer.Argument(..., help="Text to inspect ('-' reads stdin).")):
    """Show how much of the text lies in the cipher alphabet."""
    info = analyze_text(_read_text(text))
    for k, v in info.items():
        if isinstance(v, float):
            typer.echo(f"{k}: {v:.4f}")
        else:
            typer.echo(f"{k}: {v}")


def main():
    app()


if __name__ == "__main__":
    main()
