from . import validators
from .base import Field, FieldBase
from .basic import Auto, Date, Integer, String
from .association import Reference

__all__ = [
    "Auto",
    "Date",
    "Field",
    "FieldBase",
    "Integer",
    "Reference",
    "String",
    "validators",
]
