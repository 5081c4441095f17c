from __future__ import annotations


def register_all() -> None:
    from .substitution import shift, monoalphabetic, vigenere  # noqa: F401
    from .transposition import rail_fence, row_transposition, double_transposition  # noqa: F401
