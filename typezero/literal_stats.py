"""Per-path statistics of observed literal values.

Used by the typed-interface and validator dialects to render enum-like
fields as literal unions. Paths are root-relative dot paths in which arrays
are transparent: ``items[0].status`` and ``items[1].status`` both land on
``items.status``.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional, Tuple, Union

from .paths import join_path
from .schema import Array, Object, Schema
from .signatures import signature_of

logger = logging.getLogger(__name__)

Literal = Union[str, int, float]
LiteralStats = Dict[str, Dict[Literal, None]]

DEFAULT_ARRAY_SAMPLE_SIZE = 25
DEFAULT_BUDGET = 10000
DEFAULT_MAX_DEPTH = 64
ENUM_MIN_VALUES = 2
ENUM_MAX_VALUES = 8


def _is_literal(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, str) or isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def collect_literal_stats(
    data: Any,
    array_sample_size: int = DEFAULT_ARRAY_SAMPLE_SIZE,
    budget: int = DEFAULT_BUDGET,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> LiteralStats:
    """Walk the raw JSON value and record distinct string/number leaves per path.

    Only leaves held directly by an object key count; elements of a list of
    scalars (e.g. ``"tags": ["a", "b"]``) are open vocabularies, not enums.
    Values are kept in first-seen order (dict keys used as an ordered set).
    Once ``budget`` visits are spent, or past ``max_depth`` levels, the walk
    stops descending; the statistics are simply truncated.
    """
    stats: LiteralStats = {}
    remaining = [max(0, int(budget))]

    def walk(value: Any, path: str, depth: int, keyed: bool) -> None:
        if remaining[0] <= 0 or depth > max_depth:
            return
        remaining[0] -= 1

        if isinstance(value, dict):
            for k, v in value.items():
                walk(v, join_path(path, k), depth + 1, True)
        elif isinstance(value, list):
            for item in value[:array_sample_size]:
                walk(item, path, depth + 1, False)
        elif keyed and _is_literal(value):
            stats.setdefault(path, {})[value] = None

    walk(data, '', 0, False)
    if remaining[0] <= 0:
        logger.debug("Literal statistics budget of %d visits exhausted", budget)
    return stats


def _matches_kind(value: Literal, kind: str) -> bool:
    if kind == "string":
        return isinstance(value, str)
    if kind == "number":
        return not isinstance(value, str)
    return False


def enum_values(
    stats: Optional[LiteralStats],
    path: str,
    kind: str,
    min_count: int = ENUM_MIN_VALUES,
    max_count: int = ENUM_MAX_VALUES,
) -> Optional[List[Literal]]:
    """Literal values for an enum-like field, or None when it does not qualify.

    A single distinct value is treated as a constant, not an enum.
    """
    if not stats or path not in stats:
        return None
    values = [v for v in stats[path] if _matches_kind(v, kind)]
    if min_count <= len(values) <= max_count:
        return values
    return None


def _object_sites(node: Schema, path: str, sites: Dict[str, Tuple[Object, List[str]]]) -> None:
    if isinstance(node, Array):
        _object_sites(node.items, path, sites)
    elif isinstance(node, Object):
        sites.setdefault(signature_of(node), (node, []))[1].append(path)
        for key, value in node.properties.items():
            _object_sites(value, join_path(path, key), sites)


def share_literals_by_shape(schema: Schema, stats: Optional[LiteralStats]) -> Optional[LiteralStats]:
    """Pool the literals of every path where one object shape occurs.

    A deduplicated shape is rendered once, at the first path it is met, so
    its enum has to admit the values seen at each of its other paths too.
    """
    if not stats:
        return stats
    sites: Dict[str, Tuple[Object, List[str]]] = {}
    _object_sites(schema, "", sites)

    shared = dict(stats)
    for node, paths in sites.values():
        if len(paths) < 2:
            continue
        for key in node.properties:
            field_paths = [join_path(path, key) for path in paths]
            pooled: Dict[Literal, None] = {}
            for field_path in field_paths:
                pooled.update(stats.get(field_path, {}))
            if pooled:
                for field_path in field_paths:
                    shared[field_path] = pooled
    return shared
