from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from .alphabet import ARABIC, Alphabet
from .errors import CipherError, UnknownCipher
from .results import CipherResult

logger = logging.getLogger(__name__)


class CipherKind(Enum):
    SHIFT = "Shift"
    MONOALPHABETIC = "Monoalphabetic"
    VIGENERE = "Vigenère"
    RAIL_FENCE = "Rail-Fence"
    ROW_TRANSPOSITION = "Row-Transposition"
    DOUBLE_TRANSPOSITION = "Double-Transposition"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "CipherKind":
        kind = _NAME_INDEX.get(_normalize_name(name))
        if kind is None:
            raise UnknownCipher(name)
        return kind


def _normalize_name(name: str) -> str:
    return (name or "").strip().lower().replace("_", "-").replace(" ", "-")


# Canonical names plus the selector values of the original web form.
_NAME_INDEX: dict[str, CipherKind] = {_normalize_name(k.value): k for k in CipherKind}
_NAME_INDEX.update(
    {
        "vigenere": CipherKind.VIGENERE,
        "shift-cipher": CipherKind.SHIFT,
        "monoalphabetic-cipher": CipherKind.MONOALPHABETIC,
    }
)


@dataclass(frozen=True)
class CipherSpec:
    """
    One registered cipher: its two transforms and the parser that turns the
    raw key string into the typed key they expect.

    encrypt/decrypt: (text, key, *, alphabet) -> str, may raise CipherError
    parse_key:       (raw_key, *, alphabet) -> key, raises CipherError
    """

    kind: CipherKind
    encrypt: Callable[..., str]
    decrypt: Callable[..., str]
    parse_key: Callable[..., Any]
    key_hint: str = ""

    @property
    def name(self) -> str:
        return self.kind.display_name


_CIPHERS: dict[CipherKind, CipherSpec] = {}


def register_cipher(spec: CipherSpec) -> None:
    _CIPHERS[spec.kind] = spec


def _ensure_registered() -> None:
    if len(_CIPHERS) < len(CipherKind):
        from arabcipher.classical import register_all

        register_all()


def list_ciphers() -> list[CipherSpec]:
    """Registered ciphers in CipherKind declaration order."""
    _ensure_registered()
    return [_CIPHERS[k] for k in CipherKind if k in _CIPHERS]


def get_spec(cipher: CipherKind | str) -> CipherSpec:
    _ensure_registered()
    kind = cipher if isinstance(cipher, CipherKind) else CipherKind.from_name(cipher)
    try:
        return _CIPHERS[kind]
    except KeyError:
        raise UnknownCipher(kind.display_name) from None


def _run(operation: str, cipher_name: CipherKind | str, text: str, raw_key: str, alphabet: Alphabet) -> CipherResult:
    label = cipher_name.display_name if isinstance(cipher_name, CipherKind) else cipher_name
    try:
        spec = get_spec(cipher_name)
    except UnknownCipher as e:
        logger.info("%s: unknown cipher %r", operation, label)
        return CipherResult(cipher_name=label, operation=operation, error=e)

    logger.debug("%s with %s (%d chars)", operation, spec.name, len(text))
    transform = spec.encrypt if operation == "encrypt" else spec.decrypt
    try:
        key = spec.parse_key(raw_key, alphabet=alphabet)
        out = transform(text, key, alphabet=alphabet)
    except CipherError as e:
        logger.info("%s with %s rejected (%s): %s", operation, spec.name, e.kind.value, e.message)
        return CipherResult(cipher_name=spec.name, operation=operation, error=e)

    return CipherResult(cipher_name=spec.name, operation=operation, text=out)


def encrypt(cipher_name: CipherKind | str, text: str, raw_key: str, *, alphabet: Alphabet = ARABIC) -> CipherResult:
    """Encrypt text with the named cipher. Failures come back inside the result, never raised."""
    return _run("encrypt", cipher_name, text, raw_key, alphabet)


def decrypt(cipher_name: CipherKind | str, text: str, raw_key: str, *, alphabet: Alphabet = ARABIC) -> CipherResult:
    """Decrypt text with the named cipher. Failures come back inside the result, never raised."""
    return _run("decrypt", cipher_name, text, raw_key, alphabet)
