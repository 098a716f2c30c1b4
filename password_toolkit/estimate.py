"""
Guess-based strength estimate backed by zxcvbn.

Complements the rule-based ``PasswordToolKit.evaluate``: zxcvbn matches
dictionary words, keyboard walks and dates, and reports how many guesses
an attacker would need.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import zxcvbn as zx

from .errors import PasswordTypeError

logger = logging.getLogger(__name__)

CRACK_TIME_SCENARIO = "offline_slow_hashing_1e4_per_second"


@dataclass(frozen=True)
class StrengthEstimate:
    score: int  # 0 (too guessable) .. 4 (very unguessable)
    guesses: float
    crack_time: str
    warning: str = ""
    suggestions: list[str] = field(default_factory=list)


def estimate_strength(password: str, user_inputs: list[str] | None = None) -> StrengthEstimate:
    """
    Score ``password`` with zxcvbn.

    ``user_inputs`` are extra words (user name, e-mail, site) that should
    count as guessable.
    """
    if not isinstance(password, str):
        raise PasswordTypeError()

    result = zx.zxcvbn(password, user_inputs=user_inputs or [])
    feedback = result.get("feedback") or {}

    logger.debug("zxcvbn scored password at %d", result["score"])

    return StrengthEstimate(
        score=result["score"],
        guesses=float(result["guesses"]),
        crack_time=str(result["crack_times_display"][CRACK_TIME_SCENARIO]),
        warning=feedback.get("warning") or "",
        suggestions=list(feedback.get("suggestions") or []),
    )
