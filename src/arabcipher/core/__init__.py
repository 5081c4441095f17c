from .alphabet import ARABIC, Alphabet
from .errors import (
    CipherError,
    ErrorKind,
    InvalidKeyCount,
    InvalidKeyFormat,
    InvalidKeyLength,
    InvalidParameter,
    UnknownCipher,
)
from .features import analyze_text
from .registry import CipherKind, CipherSpec, decrypt, encrypt, get_spec, list_ciphers, register_cipher
from .results import CipherResult, TextFeatures

__all__ = [
    "ARABIC",
    "Alphabet",
    "CipherError",
    "ErrorKind",
    "InvalidKeyCount",
    "InvalidKeyFormat",
    "InvalidKeyLength",
    "InvalidParameter",
    "UnknownCipher",
    "analyze_text",
    "CipherKind",
    "CipherSpec",
    "encrypt",
    "decrypt",
    "get_spec",
    "list_ciphers",
    "register_cipher",
    "CipherResult",
    "TextFeatures",
]
