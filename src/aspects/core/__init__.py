from .entity import BaseEntity, invariant

__all__ = ["BaseEntity", "invariant"]
