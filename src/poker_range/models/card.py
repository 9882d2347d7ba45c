"""Card, Rank, and Suit models plus the card-index codec.

Cards are numbered 0-51 as ``4 * rank + suit``, so ``2c`` is 0, ``2d`` is 1
and ``As`` is 51.
"""

from enum import IntEnum
from typing import Optional

CARD_COUNT = 52
RANK_COUNT = 13
SUIT_COUNT = 4

_RANK_CHARS = "23456789TJQKA"
_SUIT_CHARS = "cdhs"


def rank_to_char(rank: int) -> str:
    """Return the rank character for a rank code, or '?' when out of range."""
    if 0 <= rank < RANK_COUNT:
        return _RANK_CHARS[rank]
    return "?"


def char_to_rank(c: str) -> Optional[int]:
    """Return the rank code for a character, or None if it is not a rank.

    Letters are accepted in either case.
    """
    if len(c) != 1:
        return None
    idx = _RANK_CHARS.find(c.upper())
    return idx if idx >= 0 else None


def suit_to_char(suit: int) -> str:
    if 0 <= suit < SUIT_COUNT:
        return _SUIT_CHARS[suit]
    return "?"


def char_to_suit(c: str) -> Optional[int]:
    """Return the suit code for a lowercase suit character, or None."""
    if len(c) != 1:
        return None
    idx = _SUIT_CHARS.find(c)
    return idx if idx >= 0 else None


def card_index_to_str(card: int) -> str:
    """Return the 2-character string for a card index, e.g. 50 -> 'Ah'."""
    rank, suit = divmod(card, 4)
    return rank_to_char(rank) + suit_to_char(suit)


def str_to_card_index(text: str) -> int:
    """Parse a 2-character card string like 'Ah' into its card index."""
    if len(text) != 2:
        raise ValueError(f"Cannot parse card: {text}")
    rank = char_to_rank(text[0])
    suit = char_to_suit(text[1].lower())
    if rank is None or suit is None:
        raise ValueError(f"Cannot parse card: {text}")
    return 4 * rank + suit


class Suit(IntEnum):
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @classmethod
    def from_char(cls, c: str) -> "Suit":
        suit = char_to_suit(c.lower())
        if suit is None:
            raise ValueError(f"Unknown suit: {c}")
        return cls(suit)

    @property
    def char(self) -> str:
        return _SUIT_CHARS[self.value]

    @property
    def symbol(self) -> str:
        return "♣♦♥♠"[self.value]


class Rank(IntEnum):
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        rank = char_to_rank(c)
        if rank is None:
            raise ValueError(f"Unknown rank: {c}")
        return cls(rank)

    @property
    def char(self) -> str:
        return _RANK_CHARS[self.value]


class Card:
    """A single playing card."""

    def __init__(self, rank: Rank, suit: Suit):
        self.rank = Rank(rank)
        self.suit = Suit(suit)

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'Ah', 'Ts', '2c'."""
        return cls.from_index(str_to_card_index(s.strip()))

    @classmethod
    def from_index(cls, index: int) -> "Card":
        if not 0 <= index < CARD_COUNT:
            raise ValueError(f"Card index out of range: {index}")
        rank, suit = divmod(index, 4)
        return cls(Rank(rank), Suit(suit))

    @property
    def index(self) -> int:
        return 4 * self.rank + self.suit

    def __repr__(self) -> str:
        return self.to_short()

    def __str__(self) -> str:
        return f"{self.rank.char}{self.suit.symbol}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))

    def to_short(self) -> str:
        """Return short string like 'Ah'."""
        return card_index_to_str(self.index)
