from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

ARABIC_SYMBOLS = "ابتثجحخدذرزسشصضطظعغفقكلمنهويأإآءةؤىئ"


@dataclass(frozen=True)
class Alphabet:
    """
    Ordered, duplicate-free set of symbols that defines a cipher domain.

    index() and symbol_at() form the bijection symbol <-> 0..len-1.
    symbol_at() does not reduce its argument; callers take the modulo.
    Anything not in the alphabet is a "foreign" character.
    """

    symbols: str
    _positions: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.symbols:
            raise ValueError("Alphabet must contain at least one symbol.")
        positions = {ch: i for i, ch in enumerate(self.symbols)}
        if len(positions) != len(self.symbols):
            raise ValueError("Alphabet symbols must be distinct.")
        object.__setattr__(self, "_positions", positions)

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, ch: object) -> bool:
        return ch in self._positions

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def index(self, ch: str) -> int | None:
        return self._positions.get(ch)

    def symbol_at(self, i: int) -> str:
        return self.symbols[i]

    def keep(self, text: str) -> str:
        """Drop every foreign character from text."""
        return "".join(ch for ch in text if ch in self._positions)


ARABIC = Alphabet(ARABIC_SYMBOLS)
