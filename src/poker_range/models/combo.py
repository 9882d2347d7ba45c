"""Two-card combination model."""

import operator
from dataclasses import dataclass
from typing import Tuple

from poker_range.models.card import CARD_COUNT, Card, card_index_to_str, str_to_card_index


class InvalidComboError(ValueError):
    """Raised when two card indices cannot form a combination."""


def _card_index(c) -> int:
    if isinstance(c, bool):
        raise InvalidComboError(f"Not a card index: {c!r}")
    try:
        index = operator.index(c)
    except TypeError:
        raise InvalidComboError(f"Not a card index: {c!r}") from None
    if not 0 <= index < CARD_COUNT:
        raise InvalidComboError(f"Card index out of range: {c!r}")
    return index


def _canonical(c1: int, c2: int) -> Tuple[int, int]:
    # higher rank first, higher suit breaks ties
    if (c1 >> 2, c1 & 3) < (c2 >> 2, c2 & 3):
        return c2, c1
    return c1, c2


@dataclass(frozen=True)
class Combo:
    """An unordered pair of distinct cards, stored in canonical order.

    The card with the higher rank is kept in ``first``; for pocket pairs the
    card with the higher suit is. ``Combo(2, 51)`` and ``Combo(51, 2)`` are
    therefore the same value.
    """
    first: int
    second: int

    def __post_init__(self):
        c1, c2 = _card_index(self.first), _card_index(self.second)
        if c1 == c2:
            raise InvalidComboError(
                f"A combination needs two distinct cards, got {card_index_to_str(c1)} twice"
            )
        first, second = _canonical(c1, c2)
        object.__setattr__(self, "first", first)
        object.__setattr__(self, "second", second)

    @classmethod
    def parse(cls, text: str) -> "Combo":
        """Parse a 4-character string like 'AhKd'."""
        text = text.strip()
        if len(text) != 4:
            raise ValueError(f"Cannot parse combination: {text}")
        return cls(str_to_card_index(text[:2]), str_to_card_index(text[2:]))

    @property
    def rank1(self) -> int:
        return self.first >> 2

    @property
    def rank2(self) -> int:
        return self.second >> 2

    @property
    def suit1(self) -> int:
        return self.first & 3

    @property
    def suit2(self) -> int:
        return self.second & 3

    @property
    def is_pair(self) -> bool:
        return self.rank1 == self.rank2

    @property
    def is_suited(self) -> bool:
        return self.suit1 == self.suit2

    @property
    def cards(self) -> Tuple[Card, Card]:
        return Card.from_index(self.first), Card.from_index(self.second)

    @property
    def mask(self) -> int:
        """Card mask with both cards set."""
        return (1 << self.first) | (1 << self.second)

    def sort_key(self) -> Tuple[int, int, int, int]:
        """Ranks descending, then suits ascending."""
        return (-self.rank1, -self.rank2, self.suit1, self.suit2)

    def as_tuple(self) -> Tuple[int, int]:
        return self.first, self.second

    def __str__(self) -> str:
        return card_index_to_str(self.first) + card_index_to_str(self.second)
