"""Classical substitution and transposition ciphers over a 36-symbol Arabic alphabet.

These ciphers are for teaching; none of them offers any real security.
"""

from .core import (
    ARABIC,
    Alphabet,
    CipherError,
    CipherKind,
    CipherResult,
    CipherSpec,
    ErrorKind,
    analyze_text,
    decrypt,
    encrypt,
    get_spec,
    list_ciphers,
)

__all__ = [
    "ARABIC",
    "Alphabet",
    "CipherError",
    "CipherKind",
    "CipherResult",
    "CipherSpec",
    "ErrorKind",
    "analyze_text",
    "decrypt",
    "encrypt",
    "get_spec",
    "list_ciphers",
]
