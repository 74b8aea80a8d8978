"""Recursive traversal of JSON value trees."""

import logging
from collections.abc import Callable

from .types import JsonKind, JsonValue, LeafAction

logger = logging.getLogger(__name__)


def kind_of(value: JsonValue) -> JsonKind:
    """
    Classify a decoded JSON value.

    Raises:
        TypeError: If the value is not part of the JSON data model.

    """
    if value is None:
        return JsonKind.NULL
    # bool is a subclass of int and must be checked first.
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    msg = f"Unsupported JSON value of type '{type(value).__name__}'"
    raise TypeError(msg)


def _walk_scalar(value: JsonValue, _action: LeafAction, *, translate_keys: bool) -> JsonValue:
    _ = translate_keys
    return value


def _walk_string(value: JsonValue, action: LeafAction, *, translate_keys: bool) -> JsonValue:
    _ = translate_keys
    return action(value)  # type: ignore[arg-type]


def _walk_array(value: JsonValue, action: LeafAction, *, translate_keys: bool) -> JsonValue:
    return [walk(item, action, translate_keys=translate_keys) for item in value]  # type: ignore[union-attr]


def _walk_object(value: JsonValue, action: LeafAction, *, translate_keys: bool) -> JsonValue:
    rebuilt: dict[str, JsonValue] = {}
    for key, item in value.items():  # type: ignore[union-attr]
        new_key = action(key) if translate_keys else key
        if new_key in rebuilt:
            logger.debug("Object key '%s' collides after translation; the later value wins.", new_key)
        rebuilt[new_key] = walk(item, action, translate_keys=translate_keys)
    return rebuilt


_HANDLERS: dict[JsonKind, Callable[..., JsonValue]] = {
    JsonKind.NULL: _walk_scalar,
    JsonKind.BOOLEAN: _walk_scalar,
    JsonKind.NUMBER: _walk_scalar,
    JsonKind.STRING: _walk_string,
    JsonKind.ARRAY: _walk_array,
    JsonKind.OBJECT: _walk_object,
}


def walk(value: JsonValue, action: LeafAction, *, translate_keys: bool = False) -> JsonValue:
    """
    Rebuild ``value`` with ``action`` applied to every string leaf.

    Arrays keep their order and objects keep their key insertion order. Numbers,
    booleans and null are returned unchanged. The input tree is not modified.

    Args:
        value: The JSON value to traverse.
        action: Called with each string leaf; its result replaces the leaf.
        translate_keys: If True, object keys are passed through ``action`` as well.
            When two keys map to the same result the later entry wins.

    Returns:
        A structurally identical tree holding the results of ``action``.

    """
    handler = _HANDLERS[kind_of(value)]
    return handler(value, action, translate_keys=translate_keys)
