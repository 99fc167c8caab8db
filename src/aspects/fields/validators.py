"""Module for defining different validators used by Field Types"""

import re

from aspects.exceptions import ValidationError


class BaseValidator:
    """Callable that raises `ValidationError` when `is_invalid` holds.

    A `None` limit disables the check, so fields can attach validators
    unconditionally.
    """

    message = "invalid value"

    def __init__(self, limit, message=None):
        self.limit = limit
        if message is not None:
            self.message = message

    def is_invalid(self, value) -> bool:
        raise NotImplementedError

    def __call__(self, value):
        if self.limit is not None and self.is_invalid(value):
            raise ValidationError(self.message.format(limit=self.limit))


class MinLengthValidator(BaseValidator):
    message = "value has less than {limit} characters"

    def is_invalid(self, value):
        return len(value) < self.limit


class MaxLengthValidator(BaseValidator):
    message = "value has more than {limit} characters"

    def is_invalid(self, value):
        return len(value) > self.limit


class MinValueValidator(BaseValidator):
    message = "value is lesser than {limit}"

    def is_invalid(self, value):
        return value < self.limit


class MaxValueValidator(BaseValidator):
    message = "value is greater than {limit}"

    def is_invalid(self, value):
        return value > self.limit


class RegexValidator:
    """Validate the value against a regular expression.

    With `inverse_match`, a match is what makes the value invalid.
    """

    def __init__(self, regex, message="invalid value", inverse_match=False, flags=0):
        if flags and not isinstance(regex, str):
            raise TypeError(
                "If flags are set, regex must be a regular expression string."
            )

        self.regex = re.compile(regex, flags)
        self.message = message
        self.inverse_match = inverse_match

    def __call__(self, value):
        matched = bool(self.regex.search(str(value)))
        if matched is self.inverse_match:
            raise ValidationError(self.message)
