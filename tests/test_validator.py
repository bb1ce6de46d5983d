import pytest

from randstring.validator import (
    AlphaCase, ConfigurationError, ErrorKind, GenerationConfig, LengthMode,
    check, required_class_count, validate,
)

def _kind(config):
    with pytest.raises(ConfigurationError) as info:
        validate(config)
    return info.value.kind

def test_fixed_and_min_is_ambiguous():
    assert _kind(GenerationConfig(fixed_length=10, min_length=5)) == ErrorKind.AMBIGUOUS_LENGTH_MODE

def test_fixed_and_full_range_is_ambiguous():
    config = GenerationConfig(fixed_length=10, min_length=5, max_length=20)
    assert _kind(config) == ErrorKind.AMBIGUOUS_LENGTH_MODE

def test_min_without_max_is_ambiguous():
    assert _kind(GenerationConfig(min_length=5)) == ErrorKind.AMBIGUOUS_LENGTH_MODE
    assert _kind(GenerationConfig(max_length=5)) == ErrorKind.AMBIGUOUS_LENGTH_MODE

def test_no_length_is_invalid():
    assert _kind(GenerationConfig()) == ErrorKind.INVALID_LENGTH

@pytest.mark.parametrize("config", [
    GenerationConfig(fixed_length=0),
    GenerationConfig(fixed_length=-3),
    GenerationConfig(min_length=0, max_length=10),
    GenerationConfig(min_length=8, max_length=8),
    GenerationConfig(min_length=9, max_length=4),
])
def test_invalid_lengths(config):
    assert _kind(config) == ErrorKind.INVALID_LENGTH

def test_no_class_selected():
    config = GenerationConfig(
        fixed_length=10, include_letters=False, include_digits=False, include_symbols=False,
    )
    assert _kind(config) == ErrorKind.NO_CHARACTER_CLASS_SELECTED

def test_insufficient_length_for_required_classes():
    config = GenerationConfig(fixed_length=3, letter_case=AlphaCase.MIXED)
    e = check(config)
    assert e.kind == ErrorKind.INSUFFICIENT_LENGTH_FOR_REQUIRED_CLASSES
    assert "4" in str(e)

def test_range_minimum_is_checked():
    config = GenerationConfig(min_length=2, max_length=50)
    assert _kind(config) == ErrorKind.INSUFFICIENT_LENGTH_FOR_REQUIRED_CLASSES

def test_short_length_ok_without_force_each():
    config = GenerationConfig(fixed_length=1, require_one_of_each=False)
    assert validate(config) == LengthMode.FIXED

def test_length_check_comes_before_class_check():
    config = GenerationConfig(include_letters=False, include_digits=False, include_symbols=False)
    assert _kind(config) == ErrorKind.INVALID_LENGTH

def test_modes():
    assert validate(GenerationConfig(fixed_length=4)) == LengthMode.FIXED
    assert validate(GenerationConfig(min_length=4, max_length=5)) == LengthMode.RANGED

def test_required_class_count():
    assert required_class_count(GenerationConfig()) == 4
    assert required_class_count(GenerationConfig(letter_case=AlphaCase.UPPER_ONLY)) == 3
    assert required_class_count(GenerationConfig(include_letters=False, include_symbols=False)) == 1

def test_unknown_letter_case_is_not_defaulted():
    config = GenerationConfig(fixed_length=10, letter_case="MIXED")
    with pytest.raises(TypeError):
        validate(config)

def test_multi_character_entry_rejected():
    config = GenerationConfig(fixed_length=10, custom_digits=["1", "23"])
    assert _kind(config) == ErrorKind.INVALID_ALPHABET_ENTRY

def test_disabled_class_alphabet_not_checked():
    config = GenerationConfig(fixed_length=10, include_digits=False, custom_digits=["12"])
    assert validate(config) == LengthMode.FIXED

def test_validation_is_deterministic():
    good = GenerationConfig(min_length=4, max_length=12)
    bad = GenerationConfig(fixed_length=10, min_length=5)
    assert {validate(good) for _ in range(20)} == {LengthMode.RANGED}
    assert {check(bad).kind for _ in range(20)} == {ErrorKind.AMBIGUOUS_LENGTH_MODE}

def test_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)
    assert check(GenerationConfig(fixed_length=8)) is None

@pytest.mark.parametrize("config", [
    GenerationConfig(fixed_length=5.5),
    GenerationConfig(fixed_length="10"),
    GenerationConfig(fixed_length=True, require_one_of_each=False),
    GenerationConfig(min_length=4.0, max_length=12),
    GenerationConfig(min_length=4, max_length=12.5),
])
def test_non_integer_lengths_rejected(config):
    assert _kind(config) == ErrorKind.INVALID_LENGTH
