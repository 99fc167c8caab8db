"""Module for defining basic Field types of Entity"""

import datetime

import bleach
from dateutil.parser import parse as date_parser

from aspects.exceptions import InvalidOperationError
from aspects.fields import validators
from aspects.fields.base import Field


class String(Field):
    """Concrete field implementation for the string type.

    :param max_length: The maximum allowed length for the field.
    :param min_length: The minimum allowed length for the field.
    :param sanitize: Escape markup in values with `bleach`.
    """

    default_error_messages = {
        "invalid": '{value}" value must be a string.',
    }

    def __init__(self, max_length=255, min_length=None, sanitize=True, **kwargs):
        self.min_length = min_length
        self.max_length = max_length
        self.sanitize = sanitize
        self.default_validators = [
            validators.MinLengthValidator(self.min_length),
            validators.MaxLengthValidator(self.max_length),
        ]
        super().__init__(**kwargs)

    def _cast_to_type(self, value):
        value = value if isinstance(value, str) else str(value)

        return bleach.clean(value) if self.sanitize else value

    def as_dict(self, value):
        return value

    def __repr__(self):
        values = self._generic_param_values_for_repr()
        if self.max_length != 255:
            values.append(f"max_length={self.max_length}")
        if self.min_length:
            values.append(f"min_length={self.min_length}")
        if not self.sanitize:
            values.append("sanitize=False")

        return f"{self.__class__.__name__}(" + ", ".join(values) + ")"


class Integer(Field):
    """Concrete field implementation for the Integer type.

    :param min_value: The minimum allowed value for the field.
    :param max_value: The maximum allowed value for the field.
    """

    default_error_messages = {
        "invalid": '"{value}" value must be an integer.',
    }

    def __init__(self, min_value=None, max_value=None, **kwargs):
        self.min_value = min_value
        self.max_value = max_value
        self.default_validators = [
            validators.MinValueValidator(self.min_value),
            validators.MaxValueValidator(self.max_value),
        ]
        super().__init__(**kwargs)

    def _cast_to_type(self, value):
        if isinstance(value, str) and value.strip() == "":
            return None

        if isinstance(value, bool):
            self.fail("invalid", value=value)

        try:
            return int(value)
        except (ValueError, TypeError):
            self.fail("invalid", value=value)

    def as_dict(self, value):
        return value

    def __repr__(self):
        values = self._generic_param_values_for_repr()
        if self.min_value is not None:
            values.append(f"min_value={self.min_value}")
        if self.max_value is not None:
            values.append(f"max_value={self.max_value}")

        return f"{self.__class__.__name__}(" + ", ".join(values) + ")"


class Date(Field):
    """Concrete field implementation for the Date type.

    Accepts `datetime.date` values and date strings understood by
    `dateutil`. Strings must name the year, month and day; `dateutil` would
    otherwise fill missing parts from the current date. Values that carry a
    time of day are rejected.
    """

    default_error_messages = {
        "invalid": '"{value}" has an invalid date format.',
        "incomplete": '"{value}" must include a year, month and day.',
        "datetime": "Expected a date but got a datetime {value}.",
    }

    # Parsing twice with different defaults exposes any part that was missing
    _parse_defaults = (datetime.datetime(2000, 1, 1), datetime.datetime(2001, 2, 2))

    def _cast_to_type(self, value):
        if isinstance(value, str) and not value.strip():
            return None

        if isinstance(value, datetime.datetime):
            self.fail("datetime", value=value)

        if isinstance(value, datetime.date):
            return value

        try:
            parsed = [
                date_parser(value, default=default) for default in self._parse_defaults
            ]
        except (ValueError, TypeError, OverflowError):
            self.fail("invalid", value=value)

        if parsed[0] != parsed[1]:
            self.fail("incomplete", value=value)

        value = parsed[0]
        if value.time() != datetime.time.min:
            self.fail("datetime", value=value)

        return value.date()

    def as_dict(self, value):
        return str(value) if value else None


class Auto(Field):
    """
    Auto Field represents an automatically generated identity.

    Values are generated by `generate_identity` when the entity is
    initialized without one. An explicit value may be supplied, but once set
    the value cannot be changed.
    """

    def __init__(
        self,
        identity_strategy: str = None,
        identity_function=None,
        identity_type: str = None,
        **kwargs,
    ):
        self.identity_strategy = identity_strategy
        self.identity_function = identity_function
        self.identity_type = identity_type

        super().__init__(**kwargs)

        # Generated values never come from the caller, so they are never required
        self.required = False

    def __set__(self, instance, value):
        existing_value = getattr(instance, self.field_name)
        if existing_value is not None and value != existing_value:
            raise InvalidOperationError("Identifiers cannot be changed once set")

        value = self._load(value)
        instance.__dict__[self.field_name] = value

        if hasattr(instance, "state_"):
            instance.state_.mark_changed()

    def _cast_to_type(self, value):
        return value

    def as_dict(self, value):
        if not value:
            return None

        return value if isinstance(value, int) else str(value)

    def __repr__(self):
        values = self._generic_param_values_for_repr()
        if self.identity_strategy:
            values.append(f"identity_strategy='{self.identity_strategy}'")
        if self.identity_type:
            values.append(f"identity_type='{self.identity_type}'")

        return f"{self.__class__.__name__}(" + ", ".join(values) + ")"
