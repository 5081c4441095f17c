from __future__ import annotations

import math
from typing import Optional

from arabcipher.core.alphabet import ARABIC, Alphabet
from arabcipher.core.registry import CipherKind, CipherSpec, register_cipher
from arabcipher.core.utils import chunked, strip_whitespace
from arabcipher.classical.common import require_key, sorted_key_order


def encrypt(text: str, key: str, *, alphabet: Alphabet = ARABIC) -> str:
    """
    Write the whitespace-free text in rows of len(key) symbols, then read
    the columns in sorted-key order. The last row may be short.
    """
    require_key(key, "Row Transposition key")
    rows = list(chunked(strip_whitespace(text), len(key)))

    out = []
    for col in sorted_key_order(key, alphabet):
        for row in rows:
            if col < len(row):
                out.append(row[col])
    return "".join(out)


def decrypt(text: str, key: str, *, alphabet: Alphabet = ARABIC) -> str:
    require_key(key, "Row Transposition key")
    text = strip_whitespace(text)
    width = len(key)
    num_rows = math.ceil(len(text) / width)
    # Columns left of this index hold num_rows symbols; the rest are one short.
    full_cols = len(text) % width or width

    grid: list[list[Optional[str]]] = [[None] * width for _ in range(num_rows)]
    pos = 0
    for col in sorted_key_order(key, alphabet):
        height = num_rows if col < full_cols else num_rows - 1
        for row in range(height):
            grid[row][col] = text[pos]
            pos += 1

    return "".join(cell for row in grid for cell in row if cell is not None)


def parse_key(key: str, *, alphabet: Alphabet = ARABIC) -> str:
    return require_key((key or "").strip(), "Row Transposition key")


register_cipher(
    CipherSpec(
        kind=CipherKind.ROW_TRANSPOSITION,
        encrypt=encrypt,
        decrypt=decrypt,
        parse_key=parse_key,
        key_hint="symbol string; its sorted order gives the column order",
    )
)
