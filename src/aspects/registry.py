"""Association of names with entity classes.

References declared by name (``Reference("Person")``) are resolved here, so
an entity class must be registered before such a reference is first used.
"""

import logging

from aspects.exceptions import ConfigurationError, IncorrectUsageError
from aspects.utils import fully_qualified_name

logger = logging.getLogger(__name__)

_elements: dict[str, type] = {}


def register(name: str, element_cls: type) -> type:
    from aspects.core.entity import BaseEntity

    if not (isinstance(element_cls, type) and issubclass(element_cls, BaseEntity)):
        raise IncorrectUsageError(f"`{element_cls}` is not an entity class")

    existing = _elements.get(name)
    if existing is not None and existing is not element_cls:
        logger.warning(
            f"Replacing `{fully_qualified_name(existing)}` registered as `{name}` "
            f"with `{fully_qualified_name(element_cls)}`"
        )

    _elements[name] = element_cls
    return element_cls


def fetch(name: str) -> type:
    try:
        return _elements[name]
    except KeyError:
        raise ConfigurationError(f"No entity registered as `{name}`")


def unregister(name: str) -> None:
    _elements.pop(name, None)


def registered() -> dict[str, type]:
    return dict(_elements)
