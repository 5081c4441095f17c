from __future__ import annotations

from arabcipher.core.alphabet import ARABIC, Alphabet
from arabcipher.core.errors import InvalidParameter
from arabcipher.core.registry import CipherKind, CipherSpec, register_cipher
from arabcipher.classical.common import norm_key_symbols, shift_symbol


def _key_shifts(key: str, alphabet: Alphabet) -> list[int]:
    k = norm_key_symbols(key, alphabet)
    if not k:
        raise InvalidParameter("Vigenère key must contain at least one alphabet symbol.")
    return [alphabet.index(ch) for ch in k]


def _vigenere(text: str, key: str, direction: int, alphabet: Alphabet) -> str:
    shifts = _key_shifts(key, alphabet)
    out = []
    j = 0
    for ch in text:
        if ch in alphabet:
            out.append(shift_symbol(ch, direction * shifts[j % len(shifts)], alphabet))
            j += 1
        else:
            # foreign characters do not consume a key symbol
            out.append(ch)
    return "".join(out)


def encrypt(text: str, key: str, *, alphabet: Alphabet = ARABIC) -> str:
    return _vigenere(text, key, 1, alphabet)


def decrypt(text: str, key: str, *, alphabet: Alphabet = ARABIC) -> str:
    return _vigenere(text, key, -1, alphabet)


def parse_key(key: str, *, alphabet: Alphabet = ARABIC) -> str:
    _key_shifts(key, alphabet)
    return norm_key_symbols(key, alphabet)


register_cipher(
    CipherSpec(
        kind=CipherKind.VIGENERE,
        encrypt=encrypt,
        decrypt=decrypt,
        parse_key=parse_key,
        key_hint="symbol string, used cyclically",
    )
)
