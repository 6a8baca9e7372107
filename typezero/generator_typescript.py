from __future__ import annotations

import json
import re
from typing import Optional

from .config import GenerationOptions
from .literal_stats import LiteralStats, enum_values, share_literals_by_shape
from .paths import join_path
from .schema import Array, Object, Schema
from .signatures import RenderContext, singularize

INVALID_JSON = "// Invalid JSON"

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def safe_key(key: str) -> str:
    return key if _IDENTIFIER_RE.match(key) else json.dumps(key, ensure_ascii=False)


def _array_of(element: str, readonly: bool) -> str:
    if readonly:
        return f"ReadonlyArray<{element}>"
    return f"{element}[]"


def _render(
    node: Schema,
    name: str,
    path: str,
    ctx: RenderContext,
    stats: Optional[LiteralStats],
    options: GenerationOptions,
) -> str:
    if isinstance(node, Array):
        element = _render(node.items, singularize(name), path, ctx, stats, options)
        return _array_of(element, options.readonly_arrays)

    if isinstance(node, Object):
        existing = ctx.lookup(node)
        if existing is not None:
            return existing

        interface_name = ctx.claim(node, name)
        lines = []
        for key, value in node.properties.items():
            optional = "" if node.is_required(key) else "?"
            prop_type = _render(value, key, join_path(path, key), ctx, stats, options)
            lines.append(f"  {safe_key(key)}{optional}: {prop_type};")
        body = "\n".join(lines)
        block = f"export interface {interface_name} {{\n{body}\n}}" if body else f"export interface {interface_name} {{}}"
        ctx.add_definition(block)
        return interface_name

    if node.kind in ("string", "number"):
        literals = enum_values(stats, path, node.kind, options.enum_min_values, options.enum_max_values)
        if literals:
            return " | ".join(json.dumps(v, ensure_ascii=False) for v in literals)
    return node.kind


def render_typescript(
    schema: Schema,
    stats: Optional[LiteralStats] = None,
    root_name: str = "Root",
    options: Optional[GenerationOptions] = None,
) -> str:
    """Render TypeScript interfaces, nested interfaces before the ones using them."""
    options = options or GenerationOptions()
    stats = share_literals_by_shape(schema, stats)
    ctx = RenderContext()
    if not isinstance(schema, Object):
        ctx.reserve(root_name)

    root_type = _render(schema, root_name, "", ctx, stats, options)

    blocks = list(ctx.definitions)
    if not isinstance(schema, Object):
        blocks.append(f"export type {root_name} = {root_type};")
    return "\n\n".join(blocks)
