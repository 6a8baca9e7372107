from __future__ import annotations

import re
from typing import Optional

from .config import GenerationOptions
from .literal_stats import LiteralStats
from .schema import Array, Object, Schema

INVALID_JSON = "-- Invalid JSON"
UNSUPPORTED_ROOT = "-- SQL requires an object or array of objects"

PRIMARY_KEY_COLUMN = "id"

COLUMN_TYPES = {
    "string": "TEXT",
    "number": "DOUBLE PRECISION",
    "boolean": "BOOLEAN",
    "object": "JSONB",
    "array": "JSONB",
}


def column_type(schema: Schema) -> str:
    # null/any have no better mapping than free text
    return COLUMN_TYPES.get(schema.kind, "TEXT")


def quote_identifier(name: str) -> str:
    return '"{}"'.format(name.replace('"', '""'))


def table_name_for(root_name: str) -> str:
    """'Root' -> 'root', 'OrderLine' -> 'order_line'."""
    snake = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", root_name).lower()
    snake = re.sub(r"[^a-z0-9_]+", "_", snake).strip("_")
    return snake or "export"


def render_sql(
    schema: Schema,
    stats: Optional[LiteralStats] = None,
    root_name: str = "Root",
    options: Optional[GenerationOptions] = None,
) -> str:
    """Render a single CREATE TABLE for the top-level object.

    Nested objects and arrays are not normalized into tables; they become
    JSONB columns. ``stats`` is accepted for a uniform signature and ignored.
    """
    options = options or GenerationOptions()

    target = schema.items if isinstance(schema, Array) else schema
    if not isinstance(target, Object):
        return UNSUPPORTED_ROOT

    pk = PRIMARY_KEY_COLUMN
    while pk in target.properties:
        pk = "_" + pk

    lines = [f"  {quote_identifier(pk)} BIGSERIAL PRIMARY KEY"]
    for key, value in target.properties.items():
        not_null = " NOT NULL" if target.is_required(key) else ""
        lines.append(f"  {quote_identifier(key)} {column_type(value)}{not_null}")

    table = quote_identifier(options.table_name or table_name_for(root_name))
    columns = ",\n".join(lines)
    return f"CREATE TABLE {table} (\n{columns}\n);"
