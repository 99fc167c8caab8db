"""
Custom Aspects exception classes
"""

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class AspectsException(Exception):
    """Base class for all Exceptions raised within Aspects"""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args)

        self.extra_info = kwargs.get("extra_info", None)

    def __reduce__(self) -> tuple[Any, tuple[Any]]:
        return (self.__class__, (self.args[0],))


class AspectsExceptionWithMessage(AspectsException):
    def __init__(
        self,
        messages: dict[str, list[str]] | str,
        traceback: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        logger.debug(f"Exception:: {messages}")

        self.messages = messages
        self.traceback = traceback

        super().__init__(**kwargs)

    def __str__(self) -> str:
        if isinstance(self.messages, dict):
            return f"{dict(self.messages)}"
        return str(self.messages)

    def __reduce__(self) -> tuple[Any, tuple[Any]]:
        return (self.__class__, (self.messages,))


class ConfigurationError(AspectsException):
    """Improper Configuration encountered like:
    * A configuration file could not be found
    * An environment variable referenced in configuration is not set
    * Unknown identity strategy or type
    * Lookup of an entity name that was never registered
    """


class InvalidDataError(AspectsExceptionWithMessage):
    """Data (type, value) is invalid"""


class InvalidStateError(AspectsException):
    """Object is in invalid state for the given operation"""


class InvalidOperationError(AspectsException):
    """Operation being performed is not permitted"""


class NotSupportedError(AspectsException):
    """Object does not support the operation being performed"""


class IncorrectUsageError(AspectsException):
    """Usage of an element violates its contract"""


class ValidationError(AspectsExceptionWithMessage):
    """Raised when validation fails on a field. Validators and custom fields should
    raise this exception.

    :param messages: A dictionary of error messages where key is field name
        and value is a list of errors
    """
