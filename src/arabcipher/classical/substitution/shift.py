from __future__ import annotations

from arabcipher.core.alphabet import ARABIC, Alphabet
from arabcipher.core.registry import CipherKind, CipherSpec, register_cipher
from arabcipher.classical.common import parse_int_key, shift_symbol


def encrypt(text: str, shift: int, *, alphabet: Alphabet = ARABIC) -> str:
    """Shift every alphabet symbol forward by 'shift'; foreign characters are kept as-is."""
    # Python's % is floored, so negative shifts land in 0..len-1 already.
    return "".join(shift_symbol(ch, shift, alphabet) if ch in alphabet else ch for ch in text)


def decrypt(text: str, shift: int, *, alphabet: Alphabet = ARABIC) -> str:
    return encrypt(text, -shift, alphabet=alphabet)


def parse_key(key: str, *, alphabet: Alphabet = ARABIC) -> int:
    return parse_int_key(key, "Shift key")


register_cipher(
    CipherSpec(
        kind=CipherKind.SHIFT,
        encrypt=encrypt,
        decrypt=decrypt,
        parse_key=parse_key,
        key_hint="integer shift, e.g. 3 or -5",
    )
)
