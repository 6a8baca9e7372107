from __future__ import annotations

import json
import keyword
import re
from typing import Optional, Set

from .config import GenerationOptions
from .literal_stats import LiteralStats
from .schema import Array, Object, Schema
from .signatures import RenderContext, singularize

INVALID_JSON = "# Invalid JSON"

PRIMITIVE_TYPES = {
    "string": "str",
    "boolean": "bool",
    "null": "None",
    "any": "Any",
}

_NON_WORD_RE = re.compile(r"\W+")

# Names the generated module imports, plus keywords such as None and True;
# classes must not take them.
RESERVED_NAMES = ("Any", "List", "Optional", "BaseModel", "Field") + tuple(keyword.kwlist)


def field_name(key: str) -> str:
    """Python attribute name for a JSON key; equal to the key when already valid."""
    name = _NON_WORD_RE.sub("_", key).strip("_")
    if not name or name[0].isdigit():
        name = "field_" + name
    if keyword.iskeyword(name):
        name += "_"
    return name


class _PydanticRenderer:
    def __init__(self, options: GenerationOptions):
        self.options = options
        self.ctx = RenderContext(distinguish_integers=True)
        for taken in RESERVED_NAMES:
            self.ctx.reserve(taken)
        self.uses_field = False
        self.uses_optional = False

    def render(self, node: Schema, name: str) -> str:
        if isinstance(node, Array):
            return f"List[{self.render(node.items, singularize(name))}]"

        if isinstance(node, Object):
            existing = self.ctx.lookup(node)
            if existing is not None:
                return existing
            class_name = self.ctx.claim(node, name)
            # Children are rendered (and emitted) before this class is added.
            used: Set[str] = set()
            lines = [self._field_line(node, key, value, used) for key, value in node.properties.items()]
            body = "\n".join(lines) if lines else "    pass"
            self.ctx.add_definition(f"class {class_name}(BaseModel):\n{body}")
            return class_name

        if node.kind == "number":
            return "int" if node.integer else "float"
        return PRIMITIVE_TYPES[node.kind]

    def _field_line(self, node: Object, key: str, value: Schema, used: Set[str]) -> str:
        annotation = self.render(value, key)
        default: Optional[str] = None

        if self.options.pydantic_optional_fields and not node.is_required(key):
            annotation = f"Optional[{annotation}]"
            self.uses_optional = True
            default = "None"

        attr = field_name(key)
        while attr in used:
            attr += "_"
        used.add(attr)

        if attr != key:
            self.uses_field = True
            default_arg = f"default={default}, " if default else ""
            return f"    {attr}: {annotation} = Field({default_arg}alias={json.dumps(key, ensure_ascii=False)})"
        if default:
            return f"    {attr}: {annotation} = {default}"
        return f"    {attr}: {annotation}"

    def imports(self) -> str:
        typing_names = ["Any", "List"]
        if self.uses_optional:
            typing_names.append("Optional")
        pydantic_names = ["BaseModel", "Field"] if self.uses_field else ["BaseModel"]
        return "from typing import {}\n\nfrom pydantic import {}".format(
            ", ".join(typing_names), ", ".join(pydantic_names)
        )


def render_pydantic(
    schema: Schema,
    stats: Optional[LiteralStats] = None,
    root_name: str = "Root",
    options: Optional[GenerationOptions] = None,
) -> str:
    """Render Pydantic models, one class per distinct object shape.

    Classes are ordered so that every class is defined before it is
    referenced. ``stats`` is accepted for a uniform signature and ignored.
    """
    renderer = _PydanticRenderer(options or GenerationOptions())
    if not isinstance(schema, Object):
        while root_name in renderer.ctx.taken:
            root_name += "_"
        renderer.ctx.reserve(root_name)

    root_type = renderer.render(schema, root_name)

    blocks = list(renderer.ctx.definitions)
    if not isinstance(schema, Object):
        blocks.append(f"{root_name} = {root_type}")
    return renderer.imports() + "\n\n\n" + "\n\n\n".join(blocks)
