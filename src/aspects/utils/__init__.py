"""Utility module for Aspects

Definitions/declaractions in this module should be independent of other modules,
to the maximum extent possible.
"""

from __future__ import annotations

import importlib.metadata
import logging
from datetime import date
from enum import Enum
from typing import Any, Callable, Optional
from uuid import UUID, uuid4

from aspects.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class IdentityStrategy(Enum):
    UUID = "uuid"
    FUNCTION = "function"


class IdentityType(Enum):
    INTEGER = "integer"
    STRING = "string"
    UUID = "uuid"


def today() -> date:
    """Return the current calendar date.

    Derived values like a person's age are computed against this clock, so
    tests patch it rather than the `datetime` module.
    """
    return date.today()


def get_version() -> str:
    return importlib.metadata.version("aspects")


def fully_qualified_name(cls) -> str:
    """Return Fully Qualified name along with module"""
    return ".".join([cls.__module__, cls.__qualname__])


def generate_identity(
    identity_strategy: Optional[str] = None,
    identity_function: Callable[[], Any] | None = None,
    identity_type: Optional[str] = None,
) -> str | int | UUID:
    """Generate Unique Identifier, based on configured strategy and type.

    Values passed in (typically from an `Auto` field) take precedence over the
    active configuration.
    """
    from aspects.config import current_config

    config = current_config()
    id_value: Optional[str | int | UUID] = None

    id_strategy = identity_strategy or config["identity_strategy"]

    # UUID Strategy
    if id_strategy == IdentityStrategy.UUID.value:
        id_type = identity_type or config["identity_type"]

        if id_type == IdentityType.INTEGER.value:
            id_value = uuid4().int
        elif id_type == IdentityType.STRING.value:
            id_value = str(uuid4())
        elif id_type == IdentityType.UUID.value:
            id_value = uuid4()
        else:
            raise ConfigurationError(f"Unknown Identity Type '{id_type}'")

    # Function Strategy
    elif id_strategy == IdentityStrategy.FUNCTION.value:
        id_function = identity_function or config["identity_function"]

        if callable(id_function):
            id_value = id_function()
        else:
            raise ConfigurationError("Identity function is invalid")

    else:
        raise ConfigurationError(f"Unknown Identity Strategy {id_strategy}")

    if id_value is None:
        raise ConfigurationError("Failed to generate identity value")

    return id_value


__all__ = [
    "fully_qualified_name",
    "generate_identity",
    "get_version",
    "IdentityStrategy",
    "IdentityType",
    "today",
]
