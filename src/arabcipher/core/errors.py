from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_KEY_LENGTH = "invalid_key_length"
    INVALID_KEY_COUNT = "invalid_key_count"
    INVALID_KEY_FORMAT = "invalid_key_format"
    UNKNOWN_CIPHER = "unknown_cipher"
    INVALID_PARAMETER = "invalid_parameter"


class CipherError(ValueError):
    """Base class for every recoverable cipher failure (bad key, bad selector)."""

    kind: ErrorKind = ErrorKind.INVALID_PARAMETER

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidKeyLength(CipherError):
    kind = ErrorKind.INVALID_KEY_LENGTH


class InvalidKeyCount(CipherError):
    kind = ErrorKind.INVALID_KEY_COUNT


class InvalidKeyFormat(CipherError):
    kind = ErrorKind.INVALID_KEY_FORMAT


class InvalidParameter(CipherError):
    kind = ErrorKind.INVALID_PARAMETER


UNKNOWN_CIPHER_MESSAGE = "Please select a valid cipher and enter a suitable key."


class UnknownCipher(CipherError):
    kind = ErrorKind.UNKNOWN_CIPHER

    def __init__(self, cipher_name: str = "") -> None:
        super().__init__(UNKNOWN_CIPHER_MESSAGE)
        self.cipher_name = cipher_name
