__version__ = "0.1.0"

from .config import configure, current_config
from .core.entity import BaseEntity, invariant
from .person import Person
from .utils import get_version
from .utils.logging import configure_logging, get_logger

__all__ = [
    "BaseEntity",
    "configure",
    "configure_logging",
    "current_config",
    "get_logger",
    "get_version",
    "invariant",
    "Person",
]
