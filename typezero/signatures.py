from __future__ import annotations

import json
import re
from typing import Dict, List, Optional, Set

from .schema import Array, Object, Schema

_NAME_CHARS_RE = re.compile(r"[^0-9A-Za-z_]+")


def signature_of(schema: Schema, distinguish_integers: bool = False) -> str:
    """Canonical key for a schema's structure.

    Objects serialize as their fields sorted by name, so two objects with the
    same fields and nested shapes share a signature regardless of key order.
    Requiredness is not part of the signature.
    """
    if isinstance(schema, Object):
        pairs = [
            [key, signature_of(schema.properties[key], distinguish_integers)]
            for key in sorted(schema.properties)
        ]
        return json.dumps(pairs, separators=(",", ":"), ensure_ascii=False)
    if isinstance(schema, Array):
        return f"[{signature_of(schema.items, distinguish_integers)}]"
    if distinguish_integers and schema.kind == "number" and schema.integer:
        return "integer"
    return schema.kind


def capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def singularize(name: str) -> str:
    """Logical singular of an array's name: 'users' -> 'user', 'data' -> 'dataItem'."""
    if len(name) > 1 and name.endswith("s"):
        return name[:-1]
    return name + "Item"


def type_name(hint: str) -> str:
    """Turn a traversal hint (usually a property name) into a type identifier.

    'meta' -> 'Meta', 'shipping-address' -> 'ShippingAddress', '2fa' -> 'T2fa'.
    """
    parts = [p for p in _NAME_CHARS_RE.split(hint) if p]
    if not parts:
        return "Item"
    name = parts[0] + "".join(capitalize(p) for p in parts[1:])
    name = capitalize(name)
    if name[0].isdigit():
        name = "T" + name
    return name


class RenderContext:
    """Per-call registry shared by the recursive renderers of one generator.

    Maps object signatures to the definition name chosen at first encounter
    and accumulates definitions in emission order (children first).
    """

    def __init__(self, distinguish_integers: bool = False):
        self.distinguish_integers = distinguish_integers
        self.names: Dict[str, str] = {}
        self.taken: Set[str] = set()
        self.definitions: List[str] = []

    def signature(self, schema: Schema) -> str:
        return signature_of(schema, self.distinguish_integers)

    def lookup(self, schema: Object) -> Optional[str]:
        return self.names.get(self.signature(schema))

    def claim(self, schema: Object, hint: str) -> str:
        base = type_name(hint)
        name = base
        n = 2
        while name in self.taken:
            name = f"{base}{n}"
            n += 1
        self.taken.add(name)
        self.names[self.signature(schema)] = name
        return name

    def reserve(self, name: str) -> None:
        self.taken.add(name)

    def add_definition(self, text: str) -> None:
        self.definitions.append(text)
