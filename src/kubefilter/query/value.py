"""
Canonical JSON values for unstructured Kubernetes objects.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""

from collections.abc import Mapping
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any


class JsonKind(str, Enum):
    """Type tag of a JSON value."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> JsonKind:
    """Classify a canonical JSON value.

    :param value: Value produced by to_json_value or by a query
    :return: Type tag of the value
    :raises TypeError: If the value is not JSON-shaped
    """
    match value:
        case None:
            return JsonKind.NULL
        # bool must be matched before int, it is a subclass
        case bool():
            return JsonKind.BOOLEAN
        case int() | float():
            return JsonKind.NUMBER
        case str():
            return JsonKind.STRING
        case list():
            return JsonKind.ARRAY
        case dict():
            return JsonKind.OBJECT
        case _:
            raise TypeError(f"Not a JSON value: {type(value).__name__}")


def to_json_value(obj: Any) -> Any:
    """Convert an unstructured object into a canonical JSON value.

    Mappings become dicts with string keys, sequences become lists and
    timestamps become RFC 3339 strings, the way the API server serializes them.
    Every other scalar is kept as is.

    :param obj: Unstructured object, e.g. a dict returned by the dynamic client
    :return: Tree of dict, list, str, int, float, bool and None
    :raises TypeError: If obj contains a value with no JSON representation
    """
    match obj:
        case None | bool() | int() | float() | str():
            return obj
        case datetime():
            if obj.tzinfo is not None:
                obj = obj.astimezone(timezone.utc)
            return obj.replace(tzinfo=None).isoformat() + "Z"
        case date():
            return obj.isoformat()
        case Mapping():
            converted = {}
            for key, value in obj.items():
                if not isinstance(key, str):
                    raise TypeError(f"Object key {key!r} is not a string")
                converted[key] = to_json_value(value)
            return converted
        case list() | tuple():
            return [to_json_value(item) for item in obj]
        case _:
            # ResourceInstance and ResourceField from the dynamic client
            to_dict = getattr(obj, "to_dict", None)
            if callable(to_dict):
                return to_json_value(to_dict())
            raise TypeError(f"Cannot convert {type(obj).__name__} to a JSON value")
