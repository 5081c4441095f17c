from __future__ import annotations

from arabcipher.core.alphabet import ARABIC, Alphabet
from arabcipher.core.errors import InvalidKeyLength, InvalidParameter
from arabcipher.core.registry import CipherKind, CipherSpec, register_cipher


def _check_key(key: str, alphabet: Alphabet) -> None:
    if len(key) != len(alphabet):
        which = "Arabic" if alphabet == ARABIC else "cipher"
        raise InvalidKeyLength(
            f"Error: Custom alphabet must have the same length as the {which} alphabet "
            f"({len(alphabet)} symbols, got {len(key)})."
        )
    if len(set(key)) != len(key):
        raise InvalidParameter("Error: Custom alphabet must not repeat any symbol.")


def build_mapping(key: str, alphabet: Alphabet = ARABIC) -> dict[str, str]:
    """
    Map alphabet[i] -> key[i]. The key is a reordering of the cipher domain;
    it may use symbols outside the alphabet but must have exactly one per slot.
    """
    _check_key(key, alphabet)
    return {plain: cipher for plain, cipher in zip(alphabet, key)}


def _apply(text: str, mapping: dict[str, str]) -> str:
    return "".join(mapping.get(ch, ch) for ch in text)


def encrypt(text: str, key: str, *, alphabet: Alphabet = ARABIC) -> str:
    return _apply(text, build_mapping(key, alphabet))


def decrypt(text: str, key: str, *, alphabet: Alphabet = ARABIC) -> str:
    inverse = {cipher: plain for plain, cipher in build_mapping(key, alphabet).items()}
    return _apply(text, inverse)


def parse_key(key: str, *, alphabet: Alphabet = ARABIC) -> str:
    _check_key(key, alphabet)
    return key


register_cipher(
    CipherSpec(
        kind=CipherKind.MONOALPHABETIC,
        encrypt=encrypt,
        decrypt=decrypt,
        parse_key=parse_key,
        key_hint="36-symbol permutation of the alphabet",
    )
)
