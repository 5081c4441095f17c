from __future__ import annotations

from arabcipher.core.alphabet import ARABIC, Alphabet
from arabcipher.core.registry import CipherKind, CipherSpec, register_cipher
from arabcipher.classical.common import parse_key_pair
from arabcipher.classical.transposition import row_transposition


def _as_pair(keys: str | tuple[str, str]) -> tuple[str, str]:
    if isinstance(keys, str):
        return parse_key_pair(keys)
    return parse_key_pair(" ".join(keys))


def encrypt(text: str, keys: str | tuple[str, str], *, alphabet: Alphabet = ARABIC) -> str:
    """Row Transposition with the first key, then again with the second."""
    first, second = _as_pair(keys)
    once = row_transposition.encrypt(text, first, alphabet=alphabet)
    return row_transposition.encrypt(once, second, alphabet=alphabet)


def decrypt(text: str, keys: str | tuple[str, str], *, alphabet: Alphabet = ARABIC) -> str:
    first, second = _as_pair(keys)
    once = row_transposition.decrypt(text, second, alphabet=alphabet)
    return row_transposition.decrypt(once, first, alphabet=alphabet)


def parse_key(key: str, *, alphabet: Alphabet = ARABIC) -> tuple[str, str]:
    return parse_key_pair(key)


register_cipher(
    CipherSpec(
        kind=CipherKind.DOUBLE_TRANSPOSITION,
        encrypt=encrypt,
        decrypt=decrypt,
        parse_key=parse_key,
        key_hint="two symbol strings separated by a space",
    )
)
