"""Test cases for validators"""

import re

import pytest

from aspects.exceptions import ValidationError
from aspects.fields.validators import (
    MaxLengthValidator,
    MaxValueValidator,
    MinLengthValidator,
    MinValueValidator,
    RegexValidator,
)

TEST_DATA = [
    # (validator, value, expected),
    (MinLengthValidator(5), "abcde", None),
    (MinLengthValidator(5), "abcd", ValidationError),
    (MinLengthValidator(None), "", None),
    (MaxLengthValidator(10), "abcdefghij", None),
    (MaxLengthValidator(10), "abcdefghijkl", ValidationError),
    (MaxLengthValidator(None), "a" * 1000, None),
    (MinValueValidator(100), 100, None),
    (MinValueValidator(0), -1, ValidationError),
    (MaxValueValidator(100), 100, None),
    (MaxValueValidator(0), 1, ValidationError),
    (RegexValidator("[0-9]+"), "1234", None),
    (RegexValidator("[0-9]+"), "xxxxxx", ValidationError),
    (RegexValidator(re.compile("x")), "y", ValidationError),
    (RegexValidator("x", inverse_match=True), "y", None),
    (RegexValidator("x", inverse_match=True), "x", ValidationError),
]


@pytest.mark.parametrize("validator, value, expected", TEST_DATA)
def test_validators(validator, value, expected):
    if expected is None:
        validator(value)
    else:
        with pytest.raises(expected):
            validator(value)


def test_error_messages_mention_limits():
    with pytest.raises(ValidationError) as exc:
        MaxLengthValidator(3)("abcd")
    assert exc.value.messages == "value has more than 3 characters"


def test_custom_error_message():
    with pytest.raises(ValidationError) as exc:
        MinValueValidator(1, message="must be positive")(0)
    assert exc.value.messages == "must be positive"


def test_regex_flags_need_a_string_pattern():
    with pytest.raises(TypeError):
        RegexValidator(re.compile("x"), flags=re.IGNORECASE)
