"""Patterns and literals of the range expression language."""

import re

# Anything outside printable, non-space ASCII is ignored in expressions
NON_GRAPHIC = re.compile(r"[^\x21-\x7e]+")

TERM_SEPARATOR = ","
OFFSUITED_SUFFIX = "o"
SUITED_SUFFIX = "s"
PLUS_SUFFIX = "+"

# Whole expression selecting every two-card combination of the deck
RANDOM_KEYWORD = "random"


def normalize(text: str) -> str:
    """Lowercase text and drop whitespace and control characters."""
    return NON_GRAPHIC.sub("", text).lower()
