"""Poker hand range expressions and card encodings."""

from poker_range.models.card import Card, Rank, Suit
from poker_range.models.combo import Combo, InvalidComboError
from poker_range.parser.range_parser import RangeSyntaxError
from poker_range.ranges.card_range import CardRange

__all__ = [
    "Card", "Rank", "Suit", "Combo", "InvalidComboError",
    "RangeSyntaxError", "CardRange",
]
