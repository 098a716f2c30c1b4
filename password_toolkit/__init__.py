"""
Password toolkit package: random password generation and strength grading.
"""

import logging

from .config import (
    DEFAULT_MAXIMUM,
    DEFAULT_QUALITIES,
    DEFAULT_SETTINGS,
    DEFAULT_SUGGESTIONS,
    ToolkitSettings,
)
from .errors import (
    PasswordToolkitError,
    PasswordTypeError,
    SettingsRangeError,
    SettingsTypeError,
)
from .toolkit import (
    Evaluation,
    GenerateRequest,
    GenerationMeta,
    PasswordToolKit,
    ValidationResult,
)
from .entropy import entropy_label, estimate_entropy_bits
from .estimate import StrengthEstimate, estimate_strength

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "PasswordToolKit",
    "ToolkitSettings",
    "DEFAULT_SETTINGS",
    "DEFAULT_SUGGESTIONS",
    "DEFAULT_QUALITIES",
    "DEFAULT_MAXIMUM",
    "GenerateRequest",
    "ValidationResult",
    "Evaluation",
    "GenerationMeta",
    "PasswordToolkitError",
    "SettingsTypeError",
    "SettingsRangeError",
    "PasswordTypeError",
    "estimate_entropy_bits",
    "entropy_label",
    "StrengthEstimate",
    "estimate_strength",
]
