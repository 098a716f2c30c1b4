"""
Strength rules: the ordered decision list used by PasswordToolKit.evaluate.

Each rule pairs a predicate with the (level, quality index, suggestion
index) it yields. Rules are tried top to bottom and the first predicate
that holds decides the result; a password that passes every rule gets
PERFECT.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

MIN_LENGTH = 8

LOWERCASE_RE = re.compile(r"[a-z]")
UPPERCASE_RE = re.compile(r"[A-Z]")
NUMBER_RE = re.compile(r"\d", re.ASCII)
# Anything but an ASCII letter, digit or whitespace. Underscore belongs to
# the symbol alphabet; \s is Unicode-aware so NBSP is not a symbol.
SYMBOL_RE = re.compile(r"[^A-Za-z0-9\s]")
REPEATED_RE = re.compile(r"(.).*?\1", re.DOTALL)

COMMON_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\d{4}", re.ASCII),  # 4 consecutive digits
    re.compile(r"\d{6}", re.ASCII),  # 6 consecutive digits
    re.compile(r"[A-Za-z]{4}"),  # 4 consecutive letters
    re.compile(r"[A-Za-z]{6}"),  # 6 consecutive letters
    re.compile(r"([A-Za-z\d])\1{2,}", re.ASCII),  # 3+ identical in a row
    re.compile(r"[A-Za-z]+\d+[A-Za-z]*", re.ASCII),  # letters then digits
    re.compile(r"[A-Za-z]*\d+[A-Za-z]+", re.ASCII),  # digits then letters
    # Subsumed by the 3+ check above; kept so the list stays complete.
    re.compile(r"([A-Za-z\d])\1{3,}", re.ASCII),  # 4+ identical in a row
)


@dataclass(frozen=True)
class Rule:
    name: str
    matches: Callable[[str], bool]
    level: int
    quality: int
    suggestion: int


def is_too_short(password: str) -> bool:
    return len(password) < MIN_LENGTH


def lacks_mixed_case(password: str) -> bool:
    return not LOWERCASE_RE.search(password) or not UPPERCASE_RE.search(password)


def lacks_number(password: str) -> bool:
    return not NUMBER_RE.search(password)


def lacks_symbol(password: str) -> bool:
    return not SYMBOL_RE.search(password)


def has_repeated_character(password: str) -> bool:
    """
    True if any character occurs twice, adjacent or not.

    Newlines count as characters too (DOTALL), so a password split over two
    lines is still checked across the break.
    """
    return REPEATED_RE.search(password) is not None


def matching_pattern(password: str) -> Optional[re.Pattern]:
    """Return the first common pattern found in ``password``, if any."""
    for pattern in COMMON_PATTERNS:
        if pattern.search(password):
            return pattern
    return None


def has_common_pattern(password: str) -> bool:
    return matching_pattern(password) is not None


RULES: tuple[Rule, ...] = (
    Rule("too_short", is_too_short, level=0, quality=0, suggestion=0),
    Rule("mixed_case", lacks_mixed_case, level=1, quality=1, suggestion=1),
    Rule("numbers", lacks_number, level=2, quality=1, suggestion=2),
    Rule("symbols", lacks_symbol, level=3, quality=2, suggestion=3),
    Rule("repeated", has_repeated_character, level=4, quality=3, suggestion=4),
    Rule("common_pattern", has_common_pattern, level=4, quality=3, suggestion=5),
)

PERFECT = Rule("perfect", lambda password: True, level=5, quality=4, suggestion=6)


def classify(password: str) -> Rule:
    """
    Return the first rule ``password`` trips, or PERFECT.
    """
    for rule in RULES:
        if rule.matches(password):
            return rule
    return PERFECT
