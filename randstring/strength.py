"""
randstring.strength

Regex-based password strength classifier:
- EnforcingPattern: loose / medium / tight patterns
- check_strength(password, pattern): returns a PasswordStrength level,
  testing tight first, then medium, then loose
"""

import enum
import re
from dataclasses import dataclass


class PasswordStrength(enum.IntEnum):
    VERY_WEAK = 0
    WEAK = 1
    GOOD = 2
    STRONG = 3


LABELS = {
    PasswordStrength.VERY_WEAK: "Very Weak",
    PasswordStrength.WEAK: "Weak",
    PasswordStrength.GOOD: "Good",
    PasswordStrength.STRONG: "Strong",
}


@dataclass(frozen=True)
class EnforcingPattern:
    # mixed case, at least 6 chars
    loose: str = r"(?=.*[a-z])(?=.*[A-Z])(?=.{6,})"
    # mixed case + digit (6+) or mixed case + symbol (8+)
    medium: str = (
        r"((?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.{6,}))"
        r"|"
        r"((?=.*[a-z])(?=.*[A-Z])(?=.*[^A-Za-z0-9])(?=.{8,}))"
    )
    # mixed case + digit + symbol, at least 8 chars
    tight: str = r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[^A-Za-z0-9])(?=.{8,})"


DEFAULT_PATTERN = EnforcingPattern()


def check_strength(password: str, pattern: EnforcingPattern = DEFAULT_PATTERN) -> PasswordStrength:
    """
    Classify password against pattern.

    A pattern matches if it is found anywhere in the password (re.search).
    """
    if re.search(pattern.tight, password):
        return PasswordStrength.STRONG
    if re.search(pattern.medium, password):
        return PasswordStrength.GOOD
    if re.search(pattern.loose, password):
        return PasswordStrength.WEAK
    return PasswordStrength.VERY_WEAK


def describe(strength: PasswordStrength) -> str:
    return LABELS[strength]
