"""Recursive-descent parser for range expressions like 'AKs,QQ+,KcQd'."""

import logging
from typing import Optional, Tuple

from poker_range.models.card import char_to_rank, char_to_suit
from poker_range.parser import patterns
from poker_range.ranges.generator import ComboGenerator

logger = logging.getLogger(__name__)


class RangeSyntaxError(ValueError):
    """Raised in strict mode when an expression is not fully consumed."""

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(
            f"Unparsed range text at position {position}: {text[position:]!r}"
        )


def _parse_rank(text: str, pos: int) -> Tuple[Optional[int], int]:
    if pos < len(text):
        rank = char_to_rank(text[pos])
        if rank is not None:
            return rank, pos + 1
    return None, pos


def _parse_suit(text: str, pos: int) -> Tuple[Optional[int], int]:
    if pos < len(text):
        suit = char_to_suit(text[pos])
        if suit is not None:
            return suit, pos + 1
    return None, pos


def _parse_char(text: str, pos: int, c: str) -> Tuple[bool, int]:
    if text.startswith(c, pos):
        return True, pos + 1
    return False, pos


class RangeParser:
    """Parse normalized range text and feed each term to a generator.

    Parsing is lenient: it stops quietly at the first term that does not
    parse, keeping everything read before it. ``parse`` reports where it
    stopped so callers can decide whether that is acceptable.
    """

    def __init__(self, generator: ComboGenerator):
        self.generator = generator

    def parse(self, text: str) -> int:
        """Parse comma-separated terms from normalized text.

        Returns:
            The position just past the last term that parsed.
        """
        end = 0
        ok, pos = self.parse_hand(text, 0)
        while ok:
            end = pos
            ok, pos = _parse_char(text, pos, patterns.TERM_SEPARATOR)
            if ok:
                ok, pos = self.parse_hand(text, pos)
        if end < len(text):
            logger.debug("Range parsing stopped at %d of %r", end, text)
        return end

    def parse_hand(self, text: str, pos: int) -> Tuple[bool, int]:
        """Parse a single term starting at pos.

        On failure nothing is emitted and the original position is returned.
        """
        start = pos
        rank1, pos = _parse_rank(text, pos)
        if rank1 is None:
            return False, start
        suit1, pos = _parse_suit(text, pos)
        explicit_suits = suit1 is not None
        rank2, pos = _parse_rank(text, pos)
        if rank2 is None:
            return False, start

        if explicit_suits:
            suit2, pos = _parse_suit(text, pos)
            if suit2 is None:
                return False, start
            c1, c2 = 4 * rank1 + suit1, 4 * rank2 + suit2
            if c1 == c2:
                return False, start
            self.generator.add_combo(c1, c2)
            return True, pos

        suited = offsuited = True
        found, pos = _parse_char(text, pos, patterns.OFFSUITED_SUFFIX)
        if found:
            suited = False
        else:
            found, pos = _parse_char(text, pos, patterns.SUITED_SUFFIX)
            if found:
                offsuited = False
        plus, pos = _parse_char(text, pos, patterns.PLUS_SUFFIX)
        if plus:
            self.generator.add_combos_plus(rank1, rank2, suited, offsuited)
        else:
            self.generator.add_combos(rank1, rank2, suited, offsuited)
        return True, pos
