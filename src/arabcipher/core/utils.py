from __future__ import annotations

import math
import re
from collections import Counter
from typing import Iterable

from .alphabet import ARABIC, Alphabet

_WHITESPACE_RE = re.compile(r"\s+")


def strip_whitespace(s: str) -> str:
    """Remove every whitespace character (spaces, tabs, newlines)."""
    return _WHITESPACE_RE.sub("", s)


def shannon_entropy(s: str) -> float:
    """Shannon entropy in bits/char."""
    if not s:
        return 0.0
    counts = Counter(s)
    n = len(s)
    ent = 0.0
    for c in counts.values():
        p = c / n
        ent -= p * math.log2(p)
    return ent


def index_of_coincidence(s: str, alphabet: Alphabet = ARABIC) -> float:
    """IoC over alphabet symbols only; returns 0.0 if too short."""
    s = alphabet.keep(s)
    n = len(s)
    if n < 2:
        return 0.0
    counts = Counter(s)
    num = sum(c * (c - 1) for c in counts.values())
    den = n * (n - 1)
    return num / den if den else 0.0


def chunked(seq: Iterable, size: int):
    buf = []
    for x in seq:
        buf.append(x)
        if len(buf) == size:
            yield buf
            buf = []
    if buf:
        yield buf
