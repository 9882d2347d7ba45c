"""Tests for card mask and hand mask encodings."""

import random

from poker_range.models.card import CARD_COUNT, card_index_to_str
from poker_range.models.mask import (
    MASK_64,
    card_mask_to_indices, card_mask_to_str, get_card_mask,
    hand_mask_to_card_mask, hand_mask_to_str,
)


class TestCardMask:
    """Tests for card mask parsing and rendering."""

    def test_get_card_mask(self):
        """Test that each card sets its own index bit."""
        # 2c = 0, 8h = 26, Ah = 50
        assert get_card_mask("2c8hAh") == (1 << 0) | (1 << 26) | (1 << 50)

    def test_get_card_mask_normalizes(self):
        """Test that case and whitespace are ignored."""
        assert get_card_mask(" 2C 3d\n") == (1 << 0) | (1 << 5)

    def test_get_card_mask_stops_at_invalid_pair(self):
        """Test that scanning stops quietly at the first non-card."""
        assert get_card_mask("2cxx3d") == 1
        assert get_card_mask("zz2c") == 0

    def test_get_card_mask_odd_length(self):
        """Test that a dangling character is ignored."""
        assert get_card_mask("2c3") == 1
        assert get_card_mask("") == 0
        assert get_card_mask("2") == 0

    def test_card_mask_to_str_index_order(self):
        """Test that cards render in index order, not input order."""
        assert card_mask_to_str(0b11) == "2c2d"
        assert card_mask_to_str(get_card_mask("Ah2c")) == "2cAh"
        assert card_mask_to_str(0) == ""

    def test_card_mask_to_indices(self):
        """Test listing the set card indices."""
        assert card_mask_to_indices(get_card_mask("As2c8h")) == [0, 26, 51]

    def test_round_trip(self):
        """Test that random card sets survive rendering and parsing."""
        rng = random.Random(42)
        for _ in range(200):
            cards = rng.sample(range(CARD_COUNT), rng.randint(0, 26))
            mask = 0
            for c in cards:
                mask |= 1 << c
            assert get_card_mask(card_mask_to_str(mask)) == mask

    def test_full_deck_round_trip(self):
        """Test the round trip with every card set."""
        mask = (1 << CARD_COUNT) - 1
        assert get_card_mask(card_mask_to_str(mask)) == mask


class TestSignedMasks:
    """Tests for masks passed as negative (signed 64-bit) integers."""

    def test_all_bits_set(self):
        """Test that -1 reads as all 64 bits."""
        assert card_mask_to_indices(~0) == list(range(64))

    def test_render_all_bits(self):
        """Test that rendering a signed mask terminates."""
        full_deck = card_mask_to_str((1 << CARD_COUNT) - 1)
        assert card_mask_to_str(-1).startswith(full_deck)

    def test_sign_bit_only(self):
        """Test a mask with only bit 63 set."""
        assert card_mask_to_indices(-(1 << 63)) == [63]

    def test_bits_above_64_ignored(self):
        """Test that bits beyond the 64-bit layout are dropped."""
        assert card_mask_to_indices((1 << 70) | 1) == [0]

    def test_signed_hand_mask(self):
        """Test converting a hand mask with the sign bit set."""
        assert hand_mask_to_card_mask(-1) == MASK_64
        # bit 63: rank 15 in lane 3, clubs
        assert hand_mask_to_card_mask(-(1 << 63)) == 1 << 60


class TestHandMask:
    """Tests for the evaluator hand mask layout."""

    def test_single_cards(self):
        """Test the corner cards of the layout."""
        # As sits at bit (3 - 3) * 16 + 12, 2c at bit 3 * 16 + 0
        assert hand_mask_to_card_mask(1 << 12) == 1 << 51
        assert hand_mask_to_card_mask(1 << 48) == 1 << 0

    def test_every_card(self):
        """Test the conversion for every card of the deck."""
        for card in range(CARD_COUNT):
            rank, suit = divmod(card, 4)
            hand_bit = (3 - suit) * 16 + rank
            assert hand_mask_to_card_mask(1 << hand_bit) == 1 << card

    def test_hand_mask_to_str(self):
        """Test rendering a hand mask as card strings."""
        assert hand_mask_to_str((1 << 12) | (1 << 48)) == "2cAs"
        assert hand_mask_to_str(0) == ""

    def test_hand_mask_renders_card_strings(self):
        """Test that a single hand mask bit renders as one card."""
        # Kh: rank 11, suit 2
        mask = 1 << ((3 - 2) * 16 + 11)
        assert hand_mask_to_str(mask) == card_index_to_str(46) == "Kh"
