import pickle

from aspects.exceptions import InvalidStateError, ValidationError


def test_validation_error_str_with_field_messages():
    error = ValidationError({"first_name": ["is required"]})
    assert str(error) == "{'first_name': ['is required']}"


def test_validation_error_str_with_plain_message():
    assert str(ValidationError("value is lesser than 0")) == "value is lesser than 0"


def test_extra_info_is_kept():
    error = InvalidStateError("not born yet", extra_info={"on": "1999-01-01"})
    assert error.extra_info == {"on": "1999-01-01"}


def test_exceptions_can_be_pickled():
    error = pickle.loads(pickle.dumps(ValidationError({"age": ["is invalid"]})))
    assert isinstance(error, ValidationError)
    assert error.messages == {"age": ["is invalid"]}


def test_exceptions_with_plain_messages_can_be_pickled():
    error = pickle.loads(pickle.dumps(InvalidStateError("Ada was not born yet")))
    assert isinstance(error, InvalidStateError)
    assert str(error) == "Ada was not born yet"
