"""
Entropy estimate:
Rough strength in bits from the character classes a password uses.
"""

from __future__ import annotations

import math

from .charsets import LOWERCASES, NUMBERS, SYMBOLS, UPPERCASES


def estimate_entropy_bits(password: str) -> float:
    """
    Rough entropy estimate in bits based on length and character set used.

    The pool size is the sum of the alphabets the password draws on, so a
    password produced by ``generate`` with the same flags scores the same
    as its ``GenerationMeta.entropy_bits`` once every class has appeared.
    """
    if not password:
        return 0.0

    pool = 0
    if any(c in LOWERCASES for c in password):
        pool += len(LOWERCASES)
    if any(c in UPPERCASES for c in password):
        pool += len(UPPERCASES)
    if any(c in NUMBERS for c in password):
        pool += len(NUMBERS)
    if any(c in SYMBOLS for c in password):
        pool += len(SYMBOLS)

    if pool == 0:
        return 0.0

    return len(password) * math.log2(pool)


def entropy_label(bits: float) -> str:
    if bits <= 0:
        return "Very weak"
    if bits < 50:
        return "Weak"
    if bits < 80:
        return "Moderate"
    if bits < 110:
        return "Strong"
    return "Very strong"
