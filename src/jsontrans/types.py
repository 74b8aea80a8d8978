"""Defines shared types for JsonTrans."""

from collections.abc import Callable
from enum import Enum
from typing import Union

# A JSON value as produced by json.loads().
JsonValue = Union[None, bool, int, float, str, list["JsonValue"], dict[str, "JsonValue"]]

# Applied to every string leaf (and optionally every object key) during a walk.
LeafAction = Callable[[str], str]


class JsonKind(str, Enum):
    """The variants of the JSON value model."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class Formality(str, Enum):
    """Stylistic register requested from the translation provider."""

    PREFER_MORE = "prefer_more"
    PREFER_LESS = "prefer_less"

    @classmethod
    def from_flag(cls, *, formal: bool) -> "Formality":
        """Map the boolean ``--formal`` flag to a formality option."""
        return cls.PREFER_MORE if formal else cls.PREFER_LESS
