"""64-bit card set encodings.

Two layouts are in use:

- card mask: bit ``4 * rank + suit`` is set for each card present.
- hand mask: the hand evaluator's layout, bit ``(3 - suit) * 16 + rank``.
  Suits are complemented and ranks sit in 16-bit lanes, so it must be
  converted to a card mask before rendering.
"""

from typing import List

from poker_range.models.card import card_index_to_str, char_to_rank, char_to_suit
from poker_range.parser.patterns import normalize

MASK_64 = (1 << 64) - 1


def card_mask_to_indices(mask: int) -> List[int]:
    """Return the card indices set in a card mask, lowest first.

    Masks are 64-bit values; higher bits and the sign are ignored.
    """
    mask &= MASK_64
    indices = []
    i = 0
    while mask:
        if mask & 1:
            indices.append(i)
        mask >>= 1
        i += 1
    return indices


def card_mask_to_str(mask: int) -> str:
    """Render a card mask as concatenated card strings in index order.

    >>> card_mask_to_str(0b11)
    '2c2d'
    """
    return "".join(card_index_to_str(i) for i in card_mask_to_indices(mask))


def get_card_mask(text: str) -> int:
    """Return the card mask for a string of cards like '2c8hAh'.

    Scanning stops at the first pair of characters that is not a card;
    whatever was read up to that point is returned.
    """
    s = normalize(text)
    cards = 0
    for i in range(0, len(s) - 1, 2):
        rank = char_to_rank(s[i])
        suit = char_to_suit(s[i + 1])
        if rank is None or suit is None:
            break
        cards |= 1 << (4 * rank + suit)
    return cards


def hand_mask_to_card_mask(mask: int) -> int:
    """Convert an evaluator hand mask into a card mask."""
    cards = 0
    for i in card_mask_to_indices(mask):
        rank = i % 16
        # lane 0 holds spades, lane 3 clubs
        suit = ~(i // 16) & 3
        cards |= 1 << (4 * rank + suit)
    return cards


def hand_mask_to_str(mask: int) -> str:
    return card_mask_to_str(hand_mask_to_card_mask(mask))
