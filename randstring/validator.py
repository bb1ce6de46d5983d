"""
randstring.validator

Generation settings and the checks that run before any randomness is drawn.

A GenerationConfig is plain mutable state: callers may build one, generate,
flip a flag and generate again. Nothing is checked at construction time;
validate() is called by the generator on every run.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


class AlphaCase(enum.Enum):
    """Which letters to use. MIXED counts as two classes for one-of-each."""
    UPPER_ONLY = "upper"
    LOWER_ONLY = "lower"
    MIXED = "mixed"


class LengthMode(enum.Enum):
    FIXED = "fixed"
    RANGED = "ranged"


class ErrorKind(enum.Enum):
    AMBIGUOUS_LENGTH_MODE = "ambiguous_length_mode"
    INVALID_LENGTH = "invalid_length"
    NO_CHARACTER_CLASS_SELECTED = "no_character_class_selected"
    INSUFFICIENT_LENGTH_FOR_REQUIRED_CLASSES = "insufficient_length_for_required_classes"
    INVALID_ALPHABET_ENTRY = "invalid_alphabet_entry"


class ConfigurationError(ValueError):
    """Raised when a GenerationConfig cannot produce a string."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


@dataclass
class GenerationConfig:
    fixed_length: Optional[int] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    include_letters: bool = True
    letter_case: AlphaCase = AlphaCase.MIXED
    include_digits: bool = True
    include_symbols: bool = True
    require_one_of_each: bool = True
    custom_upper: Optional[Sequence[str]] = None
    custom_lower: Optional[Sequence[str]] = None
    custom_digits: Optional[Sequence[str]] = None
    custom_symbols: Optional[Sequence[str]] = None


def uses_upper(case: AlphaCase) -> bool:
    if case is AlphaCase.MIXED or case is AlphaCase.UPPER_ONLY:
        return True
    if case is AlphaCase.LOWER_ONLY:
        return False
    raise TypeError(f"unknown letter case: {case!r}")


def uses_lower(case: AlphaCase) -> bool:
    if case is AlphaCase.MIXED or case is AlphaCase.LOWER_ONLY:
        return True
    if case is AlphaCase.UPPER_ONLY:
        return False
    raise TypeError(f"unknown letter case: {case!r}")


def required_class_count(config: GenerationConfig) -> int:
    """
    Number of characters reserved when require_one_of_each is on:
    letters give 1 (2 when MIXED), digits 1, symbols 1.
    """
    count = 0
    if config.include_letters:
        count += int(uses_upper(config.letter_case)) + int(uses_lower(config.letter_case))
    if config.include_digits:
        count += 1
    if config.include_symbols:
        count += 1
    return count


def _length_mode(config: GenerationConfig) -> LengthMode:
    fixed = config.fixed_length
    lo, hi = config.min_length, config.max_length

    if fixed is not None and (lo is not None or hi is not None):
        raise ConfigurationError(
            ErrorKind.AMBIGUOUS_LENGTH_MODE,
            "Use either fixed_length or min_length and max_length, not both.",
        )
    if (lo is None) != (hi is None):
        raise ConfigurationError(
            ErrorKind.AMBIGUOUS_LENGTH_MODE,
            "min_length and max_length must be given together.",
        )

    for name, value in (("fixed_length", fixed), ("min_length", lo), ("max_length", hi)):
        # bool is an int subclass but never a length
        if value is not None and (not isinstance(value, int) or isinstance(value, bool)):
            raise ConfigurationError(
                ErrorKind.INVALID_LENGTH,
                f"{name} must be an integer, got {value!r}.",
            )

    if lo is not None and hi is not None and lo >= 1 and hi > lo:
        return LengthMode.RANGED
    if fixed is not None and fixed >= 1:
        return LengthMode.FIXED
    raise ConfigurationError(
        ErrorKind.INVALID_LENGTH,
        "Length should be at least 1. If using min and max, then min >= 1 and max > min.",
    )


def _enabled_custom_alphabets(config: GenerationConfig):
    if config.include_letters:
        if uses_upper(config.letter_case):
            yield "custom_upper", config.custom_upper
        if uses_lower(config.letter_case):
            yield "custom_lower", config.custom_lower
    if config.include_digits:
        yield "custom_digits", config.custom_digits
    if config.include_symbols:
        yield "custom_symbols", config.custom_symbols


def validate(config: GenerationConfig) -> LengthMode:
    """
    Check that config describes a feasible generation task.

    Checks run in a fixed order and the first failure is raised:
    length-mode exclusivity, length validity, class selection,
    room for the required classes, then custom alphabet entries.

    Returns:
        The active LengthMode.

    Raises:
        ConfigurationError
    """
    mode = _length_mode(config)

    if not (config.include_letters or config.include_digits or config.include_symbols):
        raise ConfigurationError(
            ErrorKind.NO_CHARACTER_CLASS_SELECTED,
            "At least one of letters, digits or symbols must be enabled.",
        )

    if config.require_one_of_each:
        needed = required_class_count(config)
        shortest = config.fixed_length if mode is LengthMode.FIXED else config.min_length
        if shortest < needed:
            raise ConfigurationError(
                ErrorKind.INSUFFICIENT_LENGTH_FOR_REQUIRED_CLASSES,
                f"{needed} character classes are required but the (minimum) "
                f"length is {shortest}, so one of each cannot fit.",
            )

    for name, alphabet in _enabled_custom_alphabets(config):
        if not alphabet:
            continue
        for entry in alphabet:
            if not isinstance(entry, str) or len(entry) != 1:
                raise ConfigurationError(
                    ErrorKind.INVALID_ALPHABET_ENTRY,
                    f"{name} entries must be single characters, got {entry!r}.",
                )

    logger.debug("config valid: mode=%s", mode.value)
    return mode


def check(config: GenerationConfig) -> Optional[ConfigurationError]:
    """Like validate() but returns the error instead of raising it."""
    try:
        validate(config)
    except ConfigurationError as e:
        return e
    return None
