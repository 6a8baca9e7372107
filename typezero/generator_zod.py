from __future__ import annotations

import json
from typing import Optional

from .config import GenerationOptions
from .generator_typescript import safe_key
from .literal_stats import LiteralStats, enum_values, share_literals_by_shape
from .paths import join_path
from .schema import Array, Object, Schema
from .signatures import RenderContext, singularize

INVALID_JSON = "// Invalid JSON"
IMPORT_LINE = 'import { z } from "zod";'

PRIMITIVE_VALIDATORS = {
    "string": "z.string()",
    "number": "z.number()",
    "boolean": "z.boolean()",
    "null": "z.null()",
    "any": "z.any()",
}


def const_name(type_name: str) -> str:
    return f"{type_name}Schema"


def _literal_validator(values) -> str:
    if all(isinstance(v, str) for v in values):
        return "z.enum([{}])".format(", ".join(json.dumps(v, ensure_ascii=False) for v in values))
    return "z.union([{}])".format(", ".join(f"z.literal({json.dumps(v)})" for v in values))


def _render(
    node: Schema,
    name: str,
    path: str,
    ctx: RenderContext,
    stats: Optional[LiteralStats],
    options: GenerationOptions,
) -> str:
    if isinstance(node, Array):
        return f"z.array({_render(node.items, singularize(name), path, ctx, stats, options)})"

    if isinstance(node, Object):
        existing = ctx.lookup(node)
        if existing is not None:
            return const_name(existing)

        type_name = ctx.claim(node, name)
        fields = []
        for key, value in node.properties.items():
            validator = _render(value, key, join_path(path, key), ctx, stats, options)
            if not node.is_required(key):
                validator += ".optional()"
            fields.append(f"  {safe_key(key)}: {validator},")
        body = "\n".join(fields)
        obj = f"z.object({{\n{body}\n}})" if body else "z.object({})"
        ctx.add_definition(f"export const {const_name(type_name)} = {obj};")
        return const_name(type_name)

    if node.kind in ("string", "number"):
        literals = enum_values(stats, path, node.kind, options.enum_min_values, options.enum_max_values)
        if literals:
            return _literal_validator(literals)
    return PRIMITIVE_VALIDATORS[node.kind]


def render_zod(
    schema: Schema,
    stats: Optional[LiteralStats] = None,
    root_name: str = "Root",
    options: Optional[GenerationOptions] = None,
) -> str:
    """Render Zod validators as named constants, dependencies first."""
    options = options or GenerationOptions()
    stats = share_literals_by_shape(schema, stats)
    ctx = RenderContext()
    if not isinstance(schema, Object):
        ctx.reserve(root_name)

    root_validator = _render(schema, root_name, "", ctx, stats, options)

    blocks = [IMPORT_LINE] + ctx.definitions
    if not isinstance(schema, Object):
        blocks.append(f"export const {const_name(root_name)} = {root_validator};")
    return "\n\n".join(blocks)
