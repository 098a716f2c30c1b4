"""
Settings for the password toolkit.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from .errors import SettingsRangeError, SettingsTypeError

SUGGESTIONS_COUNT = 7
QUALITIES_COUNT = 5

DEFAULT_MAXIMUM = 30

# One suggestion per classifier outcome, from "too short" to "secure".
DEFAULT_SUGGESTIONS: tuple[str, ...] = (
    "The password must have at least 8 characters.",
    "Add uppercase and lowercase letters to make the password more secure.",
    "Add numbers to make the password more secure.",
    "Add symbols to make the password more secure.",
    "Avoid using repeated characters in the password.",
    "Avoid using common password patterns.",
    "Excellent! The password is secure.",
)

DEFAULT_QUALITIES: tuple[str, ...] = ("insecure", "low", "medium", "high", "perfect")


def _is_sequence(value: Any) -> bool:
    # str and bytes are sequences too, but never a list of labels.
    return isinstance(value, (list, tuple))


def _all_strings(values) -> bool:
    return all(isinstance(item, str) for item in values)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class ToolkitSettings:
    # Remediation texts, indexed by the classifier's suggestion column.
    suggestions: tuple[str, ...] = DEFAULT_SUGGESTIONS

    # Quality labels, indexed by the classifier's quality column.
    qualities: tuple[str, ...] = DEFAULT_QUALITIES

    # Longest password generate() will produce.
    maximum: int = DEFAULT_MAXIMUM

    def __post_init__(self) -> None:
        if not _is_sequence(self.suggestions):
            raise SettingsTypeError(
                'The "suggestions" value must be an array type.', field="suggestions"
            )
        if not _is_sequence(self.qualities):
            raise SettingsTypeError(
                'The "qualities" value must be an array type.', field="qualities"
            )
        if not _is_number(self.maximum):
            raise SettingsTypeError(
                'The "maximum" value must be a number type.', field="maximum"
            )
        if not _all_strings(self.suggestions):
            raise SettingsTypeError(
                'All "suggestions" values must be a string type.', field="suggestions"
            )
        if not _all_strings(self.qualities):
            raise SettingsTypeError(
                'All "qualities" values must be a string type.', field="qualities"
            )
        if len(self.suggestions) != SUGGESTIONS_COUNT:
            raise SettingsRangeError(
                f'The "suggestions" elements number must be equal to {SUGGESTIONS_COUNT}.',
                field="suggestions",
            )
        if len(self.qualities) != QUALITIES_COUNT:
            raise SettingsRangeError(
                f'The "qualities" elements number must be equal to {QUALITIES_COUNT}.',
                field="qualities",
            )
        if isinstance(self.maximum, float) and not (
            math.isfinite(self.maximum) and self.maximum.is_integer()
        ):
            raise SettingsRangeError(
                'The "maximum" value must be a whole number.', field="maximum"
            )
        if self.maximum < 1:
            raise SettingsRangeError(
                'The "maximum" value must be greater than 0.', field="maximum"
            )

        # Frozen: copy caller lists into tuples so later mutation of the
        # original list cannot leak into the settings.
        object.__setattr__(self, "suggestions", tuple(self.suggestions))
        object.__setattr__(self, "qualities", tuple(self.qualities))
        object.__setattr__(self, "maximum", int(self.maximum))

    @classmethod
    def from_mapping(cls, settings: Any) -> "ToolkitSettings":
        """
        Build settings from a plain dict such as ``{"maximum": 16}``.

        Keys that are not settings fields are ignored. Anything that is not
        a mapping (bools, strings, numbers, lists) is rejected.
        """
        if not isinstance(settings, Mapping):
            raise SettingsTypeError('The "options" must be an object.', field="options")
        known = {f.name for f in fields(cls)}
        return cls(**{key: settings[key] for key in known if key in settings})


# Default settings instance you can import elsewhere
DEFAULT_SETTINGS = ToolkitSettings()
