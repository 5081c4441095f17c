from __future__ import annotations

from collections import Counter

from .alphabet import ARABIC, Alphabet
from .results import TextFeatures
from .utils import index_of_coincidence, shannon_entropy


def analyze_text(text: str, alphabet: Alphabet = ARABIC) -> dict:
    """
    Returns a dict of features describing how much of the text lies in
    the cipher domain:
      - alphabet_ratio / foreign_count: what substitution ciphers will touch
      - whitespace_ratio: what transposition ciphers will strip
      - entropy / ioc: rough plaintext-vs-ciphertext signal
    """
    n = len(text)
    if n == 0:
        feats = TextFeatures(
            length=0,
            unique_chars=0,
            alphabet_ratio=0.0,
            whitespace_ratio=0.0,
            foreign_count=0,
            entropy=0.0,
            ioc=0.0,
        )
        return feats.to_dict()

    counts = Counter(text)
    in_alpha = sum(c for ch, c in counts.items() if ch in alphabet)
    space = sum(c for ch, c in counts.items() if ch.isspace())

    feats = TextFeatures(
        length=n,
        unique_chars=len(counts),
        alphabet_ratio=in_alpha / n,
        whitespace_ratio=space / n,
        foreign_count=n - in_alpha,
        entropy=shannon_entropy(text),
        ioc=index_of_coincidence(text, alphabet),
    )
    return feats.to_dict()
