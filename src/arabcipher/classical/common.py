from __future__ import annotations

import re

from arabcipher.core.alphabet import ARABIC, Alphabet
from arabcipher.core.errors import InvalidKeyCount, InvalidKeyFormat, InvalidParameter

_INT_RE = re.compile(r"[+-]?\d+")


def shift_symbol(ch: str, shift: int, alphabet: Alphabet = ARABIC) -> str:
    """Shift one alphabet symbol by 'shift' (can be negative or exceed the alphabet size)."""
    idx = (alphabet.index(ch) + shift) % len(alphabet)
    return alphabet.symbol_at(idx)


def norm_key_symbols(key: str, alphabet: Alphabet = ARABIC) -> str:
    """Keep only alphabet symbols."""
    return alphabet.keep(key)


def parse_int_key(key: str, what: str = "Key") -> int:
    """
    Parse a base-10 integer key such as "3", " -7 " or "+12".
    Anything else (empty, "3.5", "abc", "12abc") is rejected.
    """
    raw = (key or "").strip()
    if not _INT_RE.fullmatch(raw):
        raise InvalidKeyFormat(f"{what} must be an integer, got {key!r}.")
    return int(raw)


def parse_key_pair(key: str) -> tuple[str, str]:
    """
    Parse "K1 K2" into two non-empty keys.
    """
    parts = (key or "").split()
    if len(parts) != 2:
        raise InvalidKeyCount(
            f"Please provide exactly two keys separated by a space (got {len(parts)})."
        )
    return parts[0], parts[1]


def require_key(key: str, what: str = "Key") -> str:
    if not key:
        raise InvalidParameter(f"{what} must not be empty.")
    return key


def sorted_key_order(key: str, alphabet: Alphabet = ARABIC) -> list[int]:
    """
    Column positions of 'key' ordered by each key symbol's alphabet index.
    Python's sort is stable, so repeated symbols keep their left-to-right order.
    Foreign key symbols sort before every alphabet symbol.
    """

    def rank(pos: int) -> int:
        idx = alphabet.index(key[pos])
        return -1 if idx is None else idx

    return sorted(range(len(key)), key=rank)
