from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .errors import CipherError


@dataclass(frozen=True)
class CipherResult:
    cipher_name: str
    operation: str  # "encrypt" or "decrypt"
    text: Optional[str] = None
    error: Optional[CipherError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """What the caller should display: the output text, or the error message verbatim."""
        if self.error is not None:
            return self.error.message
        return self.text or ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "cipher_name": self.cipher_name,
            "operation": self.operation,
            "ok": self.ok,
            "text": self.text,
            "error": None if self.error is None else self.error.kind.value,
            "message": self.message,
        }


@dataclass(frozen=True)
class TextFeatures:
    length: int
    unique_chars: int
    alphabet_ratio: float
    whitespace_ratio: float
    foreign_count: int
    entropy: float
    ioc: float  # index of coincidence over alphabet symbols only (0 if not applicable)

    def to_dict(self) -> dict[str, Any]:
        return {
            "length": self.length,
            "unique_chars": self.unique_chars,
            "alphabet_ratio": self.alphabet_ratio,
            "whitespace_ratio": self.whitespace_ratio,
            "foreign_count": self.foreign_count,
            "entropy": self.entropy,
            "ioc": self.ioc,
        }
