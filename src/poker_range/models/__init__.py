"""Card, combination, and card-set encodings."""

from poker_range.models.card import (
    Card, Rank, Suit,
    rank_to_char, char_to_rank, suit_to_char, char_to_suit,
    card_index_to_str, str_to_card_index,
)
from poker_range.models.combo import Combo, InvalidComboError
from poker_range.models.mask import (
    card_mask_to_indices, card_mask_to_str, get_card_mask,
    hand_mask_to_card_mask, hand_mask_to_str,
)
