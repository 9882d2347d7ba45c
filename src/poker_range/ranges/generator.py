"""Expansion of parsed range terms into concrete combinations."""

from typing import List, Tuple

from poker_range.models.card import CARD_COUNT, RANK_COUNT, SUIT_COUNT
from poker_range.models.combo import InvalidComboError


class ComboGenerator:
    """Append the combinations implied by range terms to a working list.

    Pairs are appended raw, in emission order. Ordering and de-duplication
    are left to the caller.
    """

    def __init__(self, sink: List[Tuple[int, int]]):
        self.sink = sink

    def add_combo(self, c1: int, c2: int):
        if c1 == c2:
            raise InvalidComboError(f"Cannot pair card {c1} with itself")
        self.sink.append((c1, c2))

    def add_combos(self, rank1: int, rank2: int, suited: bool, offsuited: bool):
        """Add every combination of two specific ranks.

        Suited combinations are skipped for pocket pairs, which cannot share
        a suit. Offsuited pairs give 6 combinations, other offsuited hands 12.
        """
        if suited and rank1 != rank2:
            for suit in range(SUIT_COUNT):
                self.add_combo(4 * rank1 + suit, 4 * rank2 + suit)
        if offsuited:
            for suit1 in range(SUIT_COUNT):
                for suit2 in range(suit1 + 1, SUIT_COUNT):
                    self.add_combo(4 * rank1 + suit1, 4 * rank2 + suit2)
                    if rank1 != rank2:
                        self.add_combo(4 * rank1 + suit2, 4 * rank2 + suit1)

    def add_combos_plus(self, rank1: int, rank2: int, suited: bool, offsuited: bool):
        """Add the hands selected by a '+' suffix.

        "44+" is every pair from fours to aces. "K4+" keeps the king and
        walks the kicker up to a queen.
        """
        if rank1 == rank2:
            for r in range(rank1, RANK_COUNT):
                self.add_combos(r, r, suited, offsuited)
        else:
            high, low = max(rank1, rank2), min(rank1, rank2)
            for r in range(low, high):
                self.add_combos(high, r, suited, offsuited)

    def add_all(self):
        """Add all 1326 two-card combinations of the deck."""
        for c1 in range(CARD_COUNT):
            for c2 in range(c1):
                self.add_combo(c1, c2)
