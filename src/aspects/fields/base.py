"""Module for defining base Field class"""

import enum
from abc import ABCMeta, abstractmethod
from collections import defaultdict
from typing import Any, Callable, Iterable, List

from aspects import exceptions
from aspects.fields.mixins import FieldDescriptorMixin

MISSING_ERROR_MESSAGE = (
    "ValidationError raised by `{class_name}`, but error key `{key}` does "
    "not exist in the `error_messages` dictionary."
)


class FieldBase:
    """Marker class for all Aspects fields, used during attribute discovery."""


class Field(FieldBase, FieldDescriptorMixin, metaclass=ABCMeta):
    """
    Base class for all fields.

    Fields are descriptors assigned to entity class attributes. Values are
    validated and converted by `_load` when they are set, and stored in the
    instance's `__dict__`, NEVER on the field itself.

    Parameters:
    - `description`: A human-readable description of the field.
    - `identifier`: Marks this field as the entity's identity.
    - `default`: The default value, or a callable producing it.
    - `required`: Empty values are rejected.
    - `choices`: An Enum class (or list) of valid values.
    - `validators`: Callables that raise `ValidationError` on bad values.
    - `error_messages`: Overrides for the default error messages.
    """

    default_error_messages = {
        "invalid": "Value is not a valid type for this field.",
        "required": "is required",
        "invalid_choice": "Value `{value!r}` is not a valid choice. "
        "Must be among {choices!r}",
    }

    default_validators: List[Callable] = []

    # These values will trigger the self.required check.
    empty_values: tuple = (None, "", [], (), {})

    def __init__(
        self,
        description: str = None,
        identifier: bool = False,
        default: Any = None,
        required: bool = False,
        choices: enum.Enum = None,
        validators: Iterable = (),
        error_messages: dict = None,
    ):
        super().__init__(description=description)

        self.identifier = identifier
        self.default = default

        # Identifier fields are always required
        self.required = True if self.identifier else required

        self.choices = choices

        self._validators = validators

        # Collect default error message from self and parent classes
        messages = {}
        for cls in reversed(self.__class__.__mro__):
            messages.update(getattr(cls, "default_error_messages", {}))
        messages.update(error_messages or {})
        self.error_messages = messages

    def _generic_param_values_for_repr(self) -> list[str]:
        values = []
        if self.description:
            values.append(f"description='{self.description}'")
        if self.identifier:
            values.append("identifier=True")
        if not self.identifier and self.required:
            values.append("required=True")
        if self.default is not None:
            if callable(self.default):
                values.append(f"default={self.default.__name__}")
            elif isinstance(self.default, str):
                values.append(f"default='{self.default}'")
            else:
                values.append(f"default={self.default}")
        return values

    def __repr__(self):
        return (
            f"{self.__class__.__name__}("
            + ", ".join(self._generic_param_values_for_repr())
            + ")"
        )

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance.__dict__.get(self.field_name)

    def __set__(self, instance, value):
        value = self._load(value)

        # Invariants run only on changes to fully initialized entities
        initialized = getattr(instance, "_initialized", False)
        if initialized:
            instance._precheck()

        instance.__dict__[self.field_name] = value

        if initialized:
            instance._postcheck()

        # Mark Entity as Dirty
        if hasattr(instance, "state_"):
            instance.state_.mark_changed()

    def __delete__(self, instance):
        instance.__dict__.pop(self.field_name, None)

    def fail(self, key, **kwargs):
        """A helper method that simply raises a `ValidationError`."""
        try:
            msg = self.error_messages[key]
        except KeyError:
            class_name = self.__class__.__name__
            msg = MISSING_ERROR_MESSAGE.format(class_name=class_name, key=key)
            raise exceptions.ValidationError({key: [msg]})

        msg = msg.format(**kwargs)

        # A field used by itself (not owned by an entity) has no field name
        field_name = self.field_name or "unlinked"
        raise exceptions.ValidationError({field_name: [msg]})

    @property
    def validators(self):
        """
        Some validators can't be created at field initialization time.
        This method provides a way to handle such default validators.
        """
        return [*self.default_validators, *self._validators]

    @abstractmethod
    def _cast_to_type(self, value: Any) -> Any:
        """
        Validate and convert the value passed to native type.
        Raise a :exc:`ValidationError` if validation does not succeed.
        """

    @abstractmethod
    def as_dict(self, value: Any) -> Any:
        """Return JSON-compatible value of field"""

    def _run_validators(self, value):
        if value in self.empty_values:
            return

        errors = defaultdict(list)
        for validator in self.validators:
            try:
                validator(value)
            except exceptions.ValidationError as err:
                field_name = self.field_name or "unlinked"
                errors[field_name].append(err.messages)

        if errors:
            raise exceptions.ValidationError(errors)

    def _load(self, value: Any):
        """
        Load the value for the field, run validators and return the value.
        Subclasses can override this to provide custom load logic.
        """
        if value in self.empty_values:
            if self.default is not None:
                default = self.default
                return default() if callable(default) else default

            elif self.required:
                self.fail("required")

            # Empty, optional values are not validated. 0 and 0.0 are not
            # empty values, so they fall through to normal validation.
            elif value is None:
                return value

        if self.choices:
            if type(self.choices) not in [list, tuple] and issubclass(
                self.choices, enum.Enum
            ):
                choices = [item.value for item in self.choices]

                if isinstance(value, self.choices):
                    value = value.value
            else:
                choices = self.choices

            if value not in choices:
                self.fail("invalid_choice", value=value, choices=choices)

        value = self._cast_to_type(value)

        # Blank strings cast to `None` for non-string fields
        if value is None and self.required:
            self.fail("required")

        self._run_validators(value)

        return value
