from __future__ import annotations

import logging
import math
from typing import Any, Dict, Set

from .schema import ANY, BOOLEAN, NULL, STRING, Array, Object, Primitive, Schema, is_any, number

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZE = 50
DEFAULT_MAX_DEPTH = 64


def json_kind(value: Any) -> str:
    """Classify a parsed JSON value.

    Booleans are checked before numbers because ``bool`` subclasses ``int``.
    Non-finite floats (``NaN``/``Infinity``) have no JSON representation and
    are reported as ``any``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "number"
    if isinstance(value, float):
        return "number" if math.isfinite(value) else "any"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return "any"


def merge_schemas(a: Schema, b: Schema) -> Schema:
    """Merge two inferred schemas into one describing both instances.

    Incompatible shapes collapse to ``any``. For objects, a key survives as
    required only when both sides require it.
    """
    if is_any(a):
        return b
    if is_any(b):
        return a

    if isinstance(a, Array) and isinstance(b, Array):
        return Array(merge_schemas(a.items, b.items))

    if isinstance(a, Object) and isinstance(b, Object):
        props: Dict[str, Schema] = {}
        required: Set[str] = set()
        keys = list(a.properties) + [k for k in b.properties if k not in a.properties]
        for key in keys:
            if key in a.properties and key in b.properties:
                props[key] = merge_schemas(a.properties[key], b.properties[key])
                if key in a.required and key in b.required:
                    required.add(key)
            elif key in a.properties:
                props[key] = a.properties[key]
            else:
                props[key] = b.properties[key]
        return Object(props, required)

    if isinstance(a, Primitive) and isinstance(b, Primitive) and a.kind == b.kind:
        return a

    return ANY


def infer_schema(
    value: Any,
    *,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    max_depth: int = DEFAULT_MAX_DEPTH,
    _depth: int = 0,
) -> Schema:
    if _depth > max_depth:
        logger.debug("Nesting deeper than %d levels, falling back to any", max_depth)
        return ANY

    t = json_kind(value)

    if t == "object":
        props: Dict[str, Schema] = {}
        for k, v in value.items():
            props[k] = infer_schema(v, sample_size=sample_size, max_depth=max_depth, _depth=_depth + 1)
        return Object(props, set(props))

    if t == "array":
        if not value:
            # Nothing to sample: element shape is unknown.
            return Array(ANY)

        sample = value[:sample_size]
        if len(value) > len(sample):
            logger.debug("Sampling %d of %d array elements", len(sample), len(value))

        items = infer_schema(sample[0], sample_size=sample_size, max_depth=max_depth, _depth=_depth + 1)
        for item in sample[1:]:
            items = merge_schemas(
                items,
                infer_schema(item, sample_size=sample_size, max_depth=max_depth, _depth=_depth + 1),
            )
        return Array(items)

    if t == "null":
        return NULL
    if t == "string":
        return STRING
    if t == "boolean":
        return BOOLEAN
    if t == "number":
        return number(integer=isinstance(value, int) or float(value).is_integer())
    return ANY
