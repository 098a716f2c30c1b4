"""
PasswordToolKit: option checking, random generation and rule-based
strength evaluation.
"""
from __future__ import annotations

import logging
import math
import random
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, Optional, Union

from .charsets import FLAGS, build_pool, select_alphabets
from .config import DEFAULT_SETTINGS, ToolkitSettings
from .errors import PasswordTypeError, SettingsTypeError
from .rules import classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerateRequest:
    size: Optional[int] = None
    numbers: bool = False
    symbols: bool = False
    uppercases: bool = False
    lowercases: bool = False


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class Evaluation:
    level: int
    quality: str
    suggestion: str


@dataclass
class GenerationMeta:
    """
    Full result of one password generation.
    """
    # Final password
    password: str

    # Flattened alphabet the characters were drawn from
    pool: str
    pool_size: int

    # size * log2(pool_size): the entropy of a uniform draw from the pool
    entropy_bits: float

    request: GenerateRequest


Options = Union[GenerateRequest, Mapping]

VALID = ValidationResult(ok=True, reason=None)


def _invalid(reason: str) -> ValidationResult:
    return ValidationResult(ok=False, reason=reason)


def _as_mapping(options: Any) -> Optional[Mapping]:
    if isinstance(options, GenerateRequest):
        return asdict(options)
    if isinstance(options, Mapping):
        return options
    return None


class PasswordToolKit:
    """
    Generates random passwords and grades password strength.

    Settings are fixed at construction; every call afterwards is
    independent, so one instance can be shared between callers.
    Randomness comes from a non-cryptographic ``random.Random``.
    """

    def __init__(
        self,
        settings: ToolkitSettings | Mapping | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if settings is None:
            self._settings = DEFAULT_SETTINGS
        elif isinstance(settings, ToolkitSettings):
            self._settings = settings
        else:
            # Raises SettingsTypeError for anything that is not a mapping.
            self._settings = ToolkitSettings.from_mapping(settings)

        if rng is not None and not isinstance(rng, random.Random):
            raise SettingsTypeError(
                'The "rng" value must be a random.Random instance.', field="rng"
            )
        self._random = rng or random.Random()

    # ---------- read-only settings ----------

    @property
    def settings(self) -> ToolkitSettings:
        return self._settings

    @property
    def suggestions(self) -> list[str]:
        return list(self._settings.suggestions)

    @property
    def qualities(self) -> list[str]:
        return list(self._settings.qualities)

    @property
    def maximum(self) -> int:
        return self._settings.maximum

    # ---------- generation ----------

    def check_options(self, options: Options) -> ValidationResult:
        """
        Validate a generation request without raising.

        Checks run in a fixed order and the first failure is reported, so
        the same bad request always yields the same reason.
        """
        values = _as_mapping(options)
        if values is None:
            return _invalid("Options must be an object.")

        size = values.get("size")
        if size is None:
            return _invalid('The "size" property is required.')
        if not isinstance(size, int) or isinstance(size, bool):
            return _invalid('The "size" property must be an integer.')
        if size < 1:
            return _invalid("The password length must be greater than 1.")
        if size > self.maximum:
            return _invalid("The password length must be less than specified maximum.")

        for flag in FLAGS:
            if flag in values and not isinstance(values[flag], bool):
                return _invalid(f'The "{flag}" option must be a boolean.')

        if not any(values.get(flag) for flag in FLAGS):
            return _invalid("You must select at least one option to generate the password.")

        return VALID

    def generate_with_meta(self, options: Options) -> GenerationMeta | None:
        """
        Generate a password and report the pool it came from.

        Returns None when ``check_options`` rejects the request.
        """
        check = self.check_options(options)
        if not check.ok:
            logger.debug("Rejected generation request: %s", check.reason)
            return None

        values = _as_mapping(options)
        request = GenerateRequest(
            size=values["size"],
            **{flag: values.get(flag, False) for flag in FLAGS},
        )

        pool = build_pool(
            select_alphabets(
                numbers=request.numbers,
                symbols=request.symbols,
                uppercases=request.uppercases,
                lowercases=request.lowercases,
            )
        )

        # Uniform draws with replacement; repeats are allowed and nothing
        # checks the result against evaluate().
        password = "".join(self._random.choices(pool, k=request.size))

        logger.debug(
            "Generated password of length %d from a pool of %d characters",
            request.size,
            len(pool),
        )

        return GenerationMeta(
            password=password,
            pool=pool,
            pool_size=len(pool),
            entropy_bits=request.size * math.log2(len(pool)),
            request=request,
        )

    def generate(self, options: Options) -> str | None:
        """
        Return a random password for ``options``, or None if they are invalid.
        """
        meta = self.generate_with_meta(options)
        if meta is None:
            return None
        return meta.password

    # ---------- evaluation ----------

    def evaluate(self, password: str) -> Evaluation:
        """
        Grade ``password`` with the first strength rule it trips.

        Raises PasswordTypeError if ``password`` is not a string.
        """
        if not isinstance(password, str):
            raise PasswordTypeError()

        rule = classify(password)
        logger.debug("Password classified by rule %r (level %d)", rule.name, rule.level)

        return Evaluation(
            level=rule.level,
            quality=self._settings.qualities[rule.quality],
            suggestion=self._settings.suggestions[rule.suggestion],
        )
