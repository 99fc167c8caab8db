from __future__ import annotations

from typing import TYPE_CHECKING, Type

from aspects.exceptions import IncorrectUsageError

if TYPE_CHECKING:
    from aspects.fields.base import Field
    from aspects.utils.container import BaseContainer

_FIELDS = "__container_fields__"
_ID_FIELD_NAME = "__container_id_field_name__"


def fields(class_or_instance: Type[BaseContainer] | BaseContainer) -> dict[str, Field]:
    """Return a dictionary of fields in this element.

    Accepts an element or an instance of one.
    """
    try:
        fields_dict = getattr(class_or_instance, _FIELDS)
    except AttributeError:
        raise IncorrectUsageError(f"{class_or_instance} does not have fields")

    return fields_dict


def data_fields(
    class_or_instance: Type[BaseContainer] | BaseContainer,
) -> dict[str, Field]:
    """Return a dictionary of data fields in this element.

    Unlike `declared_fields`, the internal `_version` stamp is included.
    """
    return dict(fields(class_or_instance))


def declared_fields(
    class_or_instance: Type[BaseContainer] | BaseContainer,
) -> dict[str, Field]:
    """Return a dictionary of declared fields in this element.

    `_version` is an internal field owned by whoever persists the element,
    so is not returned among declared fields.
    """
    fields_dict = dict(fields(class_or_instance))
    fields_dict.pop("_version", None)

    return fields_dict


def id_field(class_or_instance: Type[BaseContainer] | BaseContainer) -> Field | None:
    """Return the identity field in this element."""
    try:
        field_name = getattr(class_or_instance, _ID_FIELD_NAME)
    except AttributeError:
        return None

    return fields(class_or_instance)[field_name]


def has_id_field(class_or_instance: Type[BaseContainer] | BaseContainer) -> bool:
    """Check if Element class/instance has an identity field."""
    return hasattr(class_or_instance, _ID_FIELD_NAME)
