from __future__ import annotations

from typing import Optional

from arabcipher.core.alphabet import ARABIC, Alphabet
from arabcipher.core.errors import InvalidParameter
from arabcipher.core.registry import CipherKind, CipherSpec, register_cipher
from arabcipher.classical.common import parse_int_key

# Foreign characters (spaces, punctuation, Latin letters) are stripped before
# both encryption and decryption, so decrypt(encrypt(t)) == alphabet.keep(t).


def _check_rows(rows: int) -> None:
    if rows < 1:
        raise InvalidParameter(f"Rail Fence needs at least one rail, got {rows}.")


def _rail_pattern(length: int, rows: int) -> list[int]:
    """Rail index of each position when writing 'length' symbols along the zig-zag."""
    pattern: list[int] = []
    row, step = 0, 1
    for _ in range(length):
        pattern.append(row)
        if rows == 1:
            continue
        if row == 0:
            step = 1
        elif row == rows - 1:
            step = -1
        row += step
    return pattern


def _used_rails(rows: int, length: int) -> int:
    """Rails past the text length are never visited by the zig-zag."""
    return max(1, min(rows, length))


def _empty_grid(rows: int, cols: int) -> list[list[Optional[str]]]:
    return [[None] * cols for _ in range(rows)]


def encrypt(text: str, rows: int, *, alphabet: Alphabet = ARABIC) -> str:
    _check_rows(rows)
    symbols = alphabet.keep(text)
    rows = _used_rails(rows, len(symbols))
    grid = _empty_grid(rows, len(symbols))
    for col, (ch, row) in enumerate(zip(symbols, _rail_pattern(len(symbols), rows))):
        grid[row][col] = ch
    return "".join(cell for rail in grid for cell in rail if cell is not None)


def decrypt(text: str, rows: int, *, alphabet: Alphabet = ARABIC) -> str:
    _check_rows(rows)
    symbols = alphabet.keep(text)
    n = len(symbols)
    rows = _used_rails(rows, n)
    pattern = _rail_pattern(n, rows)

    # Fill the zig-zag cells rail by rail with the ciphertext, in order.
    grid = _empty_grid(rows, n)
    source = iter(symbols)
    for row in range(rows):
        for col in range(n):
            if pattern[col] == row:
                grid[row][col] = next(source)

    # Walk the zig-zag again to read plaintext order.
    return "".join(grid[row][col] for col, row in enumerate(pattern))


def parse_key(key: str, *, alphabet: Alphabet = ARABIC) -> int:
    rows = parse_int_key(key, "Rail Fence rows")
    if rows < 2:
        raise InvalidParameter(f"Rail Fence rows must be at least 2, got {rows}.")
    return rows


register_cipher(
    CipherSpec(
        kind=CipherKind.RAIL_FENCE,
        encrypt=encrypt,
        decrypt=decrypt,
        parse_key=parse_key,
        key_hint="number of rails (integer >= 2)",
    )
)
