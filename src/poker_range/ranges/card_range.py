"""Sets of Texas Hold'em starting hands."""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from poker_range import config
from poker_range.models.combo import Combo
from poker_range.parser import patterns
from poker_range.parser.range_parser import RangeParser, RangeSyntaxError
from poker_range.ranges.generator import ComboGenerator

logger = logging.getLogger(__name__)


class CardRange:
    """A duplicate-free, sorted set of two-card starting hands.

    Built from an expression such as ``"K4+,Q8s,84,AhKd"``:

    - ``K4``: all suited and offsuited combos of the two ranks
    - ``K4s`` / ``K4o``: suited / offsuited combos only
    - ``Kc4d``: one specific combination
    - ``K4o+``: K4o and every better kicker up to KQo
    - ``44+``: the pair and all higher pairs
    - ``random``: every hand

    Expressions are case-insensitive and whitespace is ignored. Trailing
    text that is not a valid term is ignored unless ``strict`` is set.

    Combinations keep the higher rank first and are sorted by rank of the
    first card, rank of the second card (both descending), then the suits of
    the first and second card (ascending).
    """

    def __init__(self, text: Optional[str] = None, strict: Optional[bool] = None):
        if strict is None:
            strict = config.STRICT_PARSE
        self.fully_parsed = True
        pending: List[Tuple[int, int]] = []

        if text is not None:
            s = patterns.normalize(text)
            generator = ComboGenerator(pending)
            if s == patterns.RANDOM_KEYWORD:
                generator.add_all()
            else:
                end = RangeParser(generator).parse(s)
                self.fully_parsed = end == len(s)
                if strict and not self.fully_parsed:
                    raise RangeSyntaxError(s, end)

        self._combinations = self._canonicalize(pending)
        self._lookup = frozenset(self._combinations)

    @classmethod
    def from_combos(cls, combos: Iterable[Sequence[int]]) -> "CardRange":
        """Build a range from (card1, card2) index pairs.

        Raises:
            InvalidComboError: If a pair repeats a card or holds an index
                outside the deck.
        """
        card_range = cls()
        card_range._combinations = cls._canonicalize(combos)
        card_range._lookup = frozenset(card_range._combinations)
        return card_range

    @staticmethod
    def _canonicalize(pairs: Iterable[Sequence[int]]) -> Tuple[Combo, ...]:
        unique = {Combo(c1, c2) for c1, c2 in pairs}
        combos = tuple(sorted(unique, key=Combo.sort_key))
        logger.debug("Range holds %d combinations", len(combos))
        return combos

    @property
    def combinations(self) -> Tuple[Combo, ...]:
        return self._combinations

    def to_strings(self) -> List[str]:
        """Return combinations as strings like 'AhKd', in range order."""
        return [str(c) for c in self._combinations]

    def __len__(self) -> int:
        return len(self._combinations)

    def __iter__(self) -> Iterator[Combo]:
        return iter(self._combinations)

    def __contains__(self, item: Union[Combo, str, Sequence[int]]) -> bool:
        try:
            if isinstance(item, Combo):
                combo = item
            elif isinstance(item, str):
                combo = Combo.parse(item)
            else:
                combo = Combo(*item)
        except (TypeError, ValueError):
            return False
        return combo in self._lookup

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CardRange):
            return NotImplemented
        return self._combinations == other._combinations

    def __hash__(self) -> int:
        return hash(self._combinations)

    def __repr__(self) -> str:
        return f"CardRange(combos={len(self._combinations)})"
