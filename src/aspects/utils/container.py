from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any

from aspects.exceptions import (
    InvalidDataError,
    NotSupportedError,
    ValidationError,
)
from aspects.fields import Auto, Field, FieldBase
from aspects.utils import generate_identity

from .reflection import (
    _FIELDS,
    _ID_FIELD_NAME,
    data_fields,
    declared_fields,
    fields,
)

logger = logging.getLogger(__name__)


class Options(dict):
    """Metadata info for the Container.

    Common options:
    - ``abstract``: Indicates that this is an abstract element (Ignores all other meta options)
    """

    def __init__(self, opts: dict[str, Any] | type | None = None) -> None:
        super().__init__()

        if opts is None:
            opts = {}
        elif isinstance(opts, type):
            # An inner `Meta` class
            opts = {
                name: value
                for name, value in vars(opts).items()
                if not name.startswith("__")
            }
        else:
            try:
                opts = dict(opts)
            except (TypeError, ValueError):
                raise ValueError(f"Invalid options `{opts}`. Must be a dict.")

        self.update(opts)
        self["abstract"] = opts.get("abstract", None) or False

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"'Options' object has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value


class OptionsMixin:
    def __init_subclass__(cls, **kwargs) -> None:
        """Setup Options metadata on elements

        Options are read from an inner ``Meta`` class declared on the element
        itself. They are never shared with parent classes, except through the
        defaults in `_default_options()`. ``abstract`` is never inherited.
        """
        meta_cls = cls.__dict__.get("Meta")
        setattr(cls, "meta_", Options(meta_cls))

        cls._set_defaults()

        super().__init_subclass__(**kwargs)

    @classmethod
    def _set_defaults(cls):
        for key, default in cls._default_options():
            if not (hasattr(cls.meta_, key) and getattr(cls.meta_, key) is not None):
                setattr(cls.meta_, key, default)


class BaseContainer:
    """The Base class for Aspects data containers.

    Collects declared fields, and rejects assignments to anything that is not
    a field or internal state.
    """

    def __new__(cls, *args, **kwargs):
        if cls is BaseContainer:
            raise NotSupportedError("BaseContainer cannot be instantiated")
        return super().__new__(cls)

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)

        # Gather fields in the order specified, starting with base classes
        fields_dict = {}

        for base in reversed(cls.__bases__):
            if hasattr(base, _FIELDS):
                for field_name, field_obj in fields(base).items():
                    fields_dict[field_name] = field_obj

        for attr_name, attr_obj in cls.__dict__.items():
            if isinstance(attr_obj, FieldBase):
                fields_dict[attr_name] = attr_obj

        setattr(cls, _FIELDS, fields_dict)

    def __setattr__(self, name, value):
        if (
            name in fields(self)
            or name
            in [
                "errors",  # Errors in state transition
                "state_",  # Tracking dirty state of the entity
                "_initialized",  # Flag to indicate if the entity has been initialized
            ]
        ):
            super().__setattr__(name, value)
        else:
            raise InvalidDataError({name: ["is invalid"]})

    def to_dict(self):
        """Return data as a dictionary"""
        return {
            field_name: field_obj.as_dict(getattr(self, field_name, None))
            for field_name, field_obj in data_fields(self).items()
        }

    @classmethod
    def _default_options(cls):
        return []


class IdentityMixin:
    def __init_subclass__(subclass, **kwargs) -> None:
        super().__init_subclass__(**kwargs)

        if subclass.__name__ != "BaseEntity":
            subclass.__set_id_field()

    @classmethod
    def __set_id_field(new_class):
        """Lookup the id field for this entity and assign"""
        id_fields = [
            field
            for _, field in declared_fields(new_class).items()
            if isinstance(field, Field) and field.identifier
        ]

        if len(id_fields) > 1:
            raise NotSupportedError(
                {
                    "_entity": [
                        f"Multiple identifier fields found in entity {new_class.__name__}. "
                        f"Only one identifier field is allowed."
                    ]
                }
            )

        elif len(id_fields) == 1:
            setattr(new_class, _ID_FIELD_NAME, id_fields[0].field_name)

        else:
            # If no id field is declared then create one, unless the element
            #   is explicitly marked with `auto_add_id_field = False`
            if new_class.meta_.auto_add_id_field:
                new_class.__create_id_field()

    @classmethod
    def __create_id_field(new_class):
        """Create and attach a default ID field that is Auto generated"""
        id_field = Auto(identifier=True)

        setattr(new_class, "id", id_field)
        id_field.__set_name__(new_class, "id")

        setattr(new_class, _ID_FIELD_NAME, id_field.field_name)

        # Add the attribute to _FIELDS for introspection, ahead of other fields
        field_objects = {"id": id_field, **getattr(new_class, _FIELDS)}
        setattr(new_class, _FIELDS, field_objects)


def load_values(container: BaseContainer, *template, **kwargs) -> dict[str, list]:
    """Load template dicts and keyword arguments onto a container.

    Values that fail validation are not raised immediately. Their messages
    are collected and returned, keyed by field name, so that all problems
    are reported together. Identities that were not supplied are generated,
    and remaining fields are explicitly set to `None`, which fails required
    fields.
    """
    errors = defaultdict(list)
    loaded_fields = []

    template_values = {}
    for dictionary in template:
        if not isinstance(dictionary, dict):
            raise AssertionError(
                f"Positional argument '{dictionary}' passed must be a dict. "
                f"This argument serves as a template for loading common "
                f"values.",
            )
        template_values.update(dictionary)

    supplied_values = {**template_values, **kwargs}

    for field_name, val in supplied_values.items():
        # Record the field as loaded even when it fails validations, so that
        #   it does not get set to `None` below and report the wrong error
        try:
            setattr(container, field_name, val)
        except ValidationError as err:
            for error_field_name in err.messages:
                errors[error_field_name].extend(err.messages[error_field_name])
        finally:
            loaded_fields.append(field_name)

    for field_name, field_obj in declared_fields(container).items():
        if type(field_obj) is Auto and getattr(container, field_name, None) is None:
            setattr(
                container,
                field_name,
                generate_identity(
                    field_obj.identity_strategy,
                    field_obj.identity_function,
                    field_obj.identity_type,
                ),
            )
            loaded_fields.append(field_name)

    for field_name in fields(container):
        if field_name not in loaded_fields:
            try:
                setattr(container, field_name, None)
            except ValidationError as err:
                for error_field_name in err.messages:
                    errors[error_field_name].extend(err.messages[error_field_name])

    return errors
