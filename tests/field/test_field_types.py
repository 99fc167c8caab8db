import datetime
import enum

import pytest

from aspects.exceptions import ValidationError
from aspects.fields import Date, Integer, String


class Color(enum.Enum):
    RED = "red"
    BLUE = "blue"


class TestString:
    def test_sanitization_is_on_by_default(self):
        assert String().sanitize is True
        assert String(sanitize=False).sanitize is False

    def test_that_string_values_are_automatically_cleaned(self):
        value = String()._load("an <script>evil()</script> example")
        assert value == "an &lt;script&gt;evil()&lt;/script&gt; example"

    def test_that_sanitization_can_be_optionally_switched_off(self):
        value = String(sanitize=False)._load("an <script>evil()</script> example")
        assert value == "an <script>evil()</script> example"

    def test_values_are_converted_to_strings(self):
        assert String()._load(42) == "42"

    def test_max_length(self):
        with pytest.raises(ValidationError) as exc:
            String(max_length=3)._load("abcd")
        assert exc.value.messages == {"unlinked": ["value has more than 3 characters"]}

    def test_required(self):
        with pytest.raises(ValidationError) as exc:
            String(required=True)._load("")
        assert exc.value.messages == {"unlinked": ["is required"]}

    def test_default(self):
        assert String(default="anonymous")._load(None) == "anonymous"
        assert String(default=lambda: "generated")._load(None) == "generated"

    def test_choices(self):
        field = String(choices=Color)
        assert field._load(Color.RED) == "red"
        assert field._load("blue") == "blue"
        with pytest.raises(ValidationError):
            field._load("green")

    def test_repr(self):
        assert repr(String(max_length=50, required=True)) == (
            "String(required=True, max_length=50)"
        )


class TestInteger:
    def test_values_are_cast(self):
        assert Integer()._load("12") == 12

    def test_invalid_values(self):
        with pytest.raises(ValidationError):
            Integer()._load("twelve")

    def test_booleans_are_rejected(self):
        with pytest.raises(ValidationError):
            Integer()._load(True)

    def test_zero_is_not_treated_as_empty(self):
        assert Integer(default=5)._load(0) == 0

    def test_limits(self):
        field = Integer(min_value=1, max_value=10)
        assert field._load(10) == 10
        with pytest.raises(ValidationError):
            field._load(11)
        with pytest.raises(ValidationError):
            field._load(0)


class TestDate:
    def test_date_values_are_kept(self):
        value = datetime.date(2000, 6, 15)
        assert Date()._load(value) is value

    def test_strings_are_parsed(self):
        assert Date()._load("2000-06-15") == datetime.date(2000, 6, 15)
        assert Date()._load("15 June 2000") == datetime.date(2000, 6, 15)

    def test_invalid_strings(self):
        with pytest.raises(ValidationError) as exc:
            Date()._load("not a date")
        assert exc.value.messages == {
            "unlinked": ['"not a date" has an invalid date format.']
        }

    def test_datetimes_are_rejected(self):
        with pytest.raises(ValidationError):
            Date()._load(datetime.datetime(2000, 6, 15, 10, 30))

    def test_strings_with_time_are_rejected(self):
        with pytest.raises(ValidationError):
            Date()._load("2000-06-15 10:30")

    @pytest.mark.parametrize("value", ["15", "June 15", "June 2000", "2000-06"])
    def test_partial_dates_are_rejected(self, value):
        with pytest.raises(ValidationError) as exc:
            Date()._load(value)
        assert exc.value.messages == {
            "unlinked": [f'"{value}" must include a year, month and day.']
        }

    def test_as_dict(self):
        assert Date().as_dict(datetime.date(2000, 6, 15)) == "2000-06-15"
        assert Date().as_dict(None) is None


class TestBlankStrings:
    def test_blank_strings_are_treated_as_missing(self):
        assert Integer()._load("  ") is None
        assert Date()._load("  ") is None

    def test_blank_strings_fail_required_fields(self):
        with pytest.raises(ValidationError) as exc:
            Date(required=True)._load("  ")
        assert exc.value.messages == {"unlinked": ["is required"]}
