"""
Character sets: map the generator flags onto fixed alphabets and flatten
the selected ones into a single pool.
"""

from __future__ import annotations

import string

NUMBERS = string.digits
SYMBOLS = string.punctuation  # printable ASCII punctuation, no whitespace
UPPERCASES = string.ascii_uppercase
LOWERCASES = string.ascii_lowercase

# Flag name -> alphabet, in pool order.
ALPHABETS: dict[str, str] = {
    "numbers": NUMBERS,
    "symbols": SYMBOLS,
    "uppercases": UPPERCASES,
    "lowercases": LOWERCASES,
}

FLAGS: tuple[str, ...] = tuple(ALPHABETS)


def select_alphabets(
    numbers: bool = False,
    symbols: bool = False,
    uppercases: bool = False,
    lowercases: bool = False,
) -> dict[str, str]:
    """
    Return the alphabets whose flag is set, keyed by flag name.
    """
    selected = {
        "numbers": numbers,
        "symbols": symbols,
        "uppercases": uppercases,
        "lowercases": lowercases,
    }
    return {name: ALPHABETS[name] for name in FLAGS if selected[name]}


def build_pool(selected: dict[str, str]) -> str:
    """
    Concatenate the selected alphabets into one character pool.

    Alphabets are disjoint, so every character appears once and sampling
    the pool uniformly weights each alphabet by its size.
    """
    return "".join(selected.values())
