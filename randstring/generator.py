"""
randstring.generator
Random string / password generator using Python's secrets module.
"""

import logging
from secrets import SystemRandom
from typing import List, Optional, Sequence

from .validator import (
    AlphaCase,
    GenerationConfig,
    LengthMode,
    uses_lower,
    uses_upper,
    validate,
)

logger = logging.getLogger(__name__)

UPPERCASE = "".join(chr(c) for c in range(65, 65 + 26))
LOWERCASE = "".join(chr(c) for c in range(97, 97 + 26))
DIGITS = "".join(chr(c) for c in range(48, 48 + 10))
# printable ASCII between the alphanumeric blocks: 33-47, 58-64, 91-96, 123-126
SYMBOLS = "".join(
    chr(c)
    for c in [*range(33, 48), *range(58, 65), *range(91, 97), *range(123, 127)]
)

_sysrand = SystemRandom()


def _pick(alphabet: Sequence[str]) -> str:
    return alphabet[_sysrand.randrange(len(alphabet))]


def shuffle(chars: List[str]) -> None:
    """Fisher-Yates shuffle in place, driven by the system CSPRNG."""
    for i in range(len(chars) - 1, 0, -1):
        j = _sysrand.randrange(i + 1)
        chars[i], chars[j] = chars[j], chars[i]


def resolve_length(config: GenerationConfig, mode: LengthMode) -> int:
    if mode is LengthMode.FIXED:
        return config.fixed_length
    if mode is LengthMode.RANGED:
        span = config.max_length - config.min_length + 1
        return config.min_length + _sysrand.randrange(span)
    raise TypeError(f"unknown length mode: {mode!r}")


def _active(custom: Optional[Sequence[str]], default: str) -> Sequence[str]:
    # empty custom alphabet behaves as if none was given
    return custom if custom else default


def class_alphabets(config: GenerationConfig) -> List[Sequence[str]]:
    """
    Active alphabet of every enabled class, in the order
    upper, lower, digits, symbols. MIXED letters yield two entries.
    """
    alphabets = []
    if config.include_letters:
        if uses_upper(config.letter_case):
            alphabets.append(_active(config.custom_upper, UPPERCASE))
        if uses_lower(config.letter_case):
            alphabets.append(_active(config.custom_lower, LOWERCASE))
    if config.include_digits:
        alphabets.append(_active(config.custom_digits, DIGITS))
    if config.include_symbols:
        alphabets.append(_active(config.custom_symbols, SYMBOLS))
    return alphabets


def build_pool(alphabets: Sequence[Sequence[str]]) -> List[str]:
    """Concatenate alphabets; duplicates are kept so they weigh more."""
    pool: List[str] = []
    for alphabet in alphabets:
        pool.extend(alphabet)
    return pool


def generate(config: GenerationConfig) -> str:
    """
    Generate one random string for config.

    Raises:
        ConfigurationError: config is contradictory or infeasible. Raised
            before any random value is drawn.
    """
    mode = validate(config)
    target = resolve_length(config, mode)

    alphabets = class_alphabets(config)
    pool = build_pool(alphabets)

    chars: List[str] = []
    if config.require_one_of_each:
        for alphabet in alphabets:
            chars.append(_pick(alphabet))

    remaining = target - len(chars)
    for _ in range(remaining):
        chars.append(_pick(pool))

    shuffle(chars)
    logger.debug(
        "generated %d chars from %d classes (pool size %d)",
        len(chars), len(alphabets), len(pool),
    )
    return "".join(chars)


def generate_many(config: GenerationConfig, count: int) -> List[str]:
    if count < 0:
        raise ValueError("count must be >= 0")
    return [generate(config) for _ in range(count)]


def generate_string(
    length: Optional[int] = None,
    *,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    letters: bool = True,
    letter_case: AlphaCase = AlphaCase.MIXED,
    digits: bool = True,
    symbols: bool = True,
    force_each: bool = True,
    custom_upper: Optional[Sequence[str]] = None,
    custom_lower: Optional[Sequence[str]] = None,
    custom_digits: Optional[Sequence[str]] = None,
    custom_symbols: Optional[Sequence[str]] = None,
) -> str:
    """
    Keyword shortcut around generate().

    Without min_length/max_length the length defaults to 16. Passing a range
    together with an explicit length is rejected as ambiguous.
    """
    if length is None and min_length is None and max_length is None:
        length = 16
    config = GenerationConfig(
        fixed_length=length,
        min_length=min_length,
        max_length=max_length,
        include_letters=letters,
        letter_case=letter_case,
        include_digits=digits,
        include_symbols=symbols,
        require_one_of_each=force_each,
        custom_upper=custom_upper,
        custom_lower=custom_lower,
        custom_digits=custom_digits,
        custom_symbols=custom_symbols,
    )
    return generate(config)
