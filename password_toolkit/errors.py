"""
Exception hierarchy for the password toolkit.

Every error raised by the library inherits from PasswordToolkitError, and
also from the builtin it stands for, so callers can catch either:

PasswordToolkitError
├── SettingsTypeError   (TypeError)
├── SettingsRangeError  (ValueError)
└── PasswordTypeError   (TypeError)
"""


class PasswordToolkitError(Exception):
    """Base exception for all password toolkit errors."""

    def __init__(self, message: str = "", *, field: str = ""):
        super().__init__(message)
        self.message = message
        self.field = field  # settings key or argument name that failed


class SettingsTypeError(PasswordToolkitError, TypeError):
    """Raised when the settings object or one of its fields has the wrong type."""


class SettingsRangeError(PasswordToolkitError, ValueError):
    """Raised when a settings field has the right type but an invalid size."""


class PasswordTypeError(PasswordToolkitError, TypeError):
    """Raised when a password to evaluate is not a string."""

    def __init__(self, message: str = 'The "password" value must be a string type.'):
        super().__init__(message, field="password")
