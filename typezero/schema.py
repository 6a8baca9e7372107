"""In-memory model of an inferred JSON shape.

A schema is one of three variants:

- ``Primitive``: a leaf (string, number, boolean, null or the ``any`` marker
  used for conflicting/unresolved shapes)
- ``Array``: the merged shape of the sampled elements
- ``Object``: named properties plus the set of keys seen on every instance
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Set, Union

PRIMITIVE_KINDS = ("string", "number", "boolean", "null", "any")


@dataclass(frozen=True)
class Primitive:
    kind: str
    # Whether the first sampled number at this position was integral.
    integer: bool = False

    def __post_init__(self):
        if self.kind not in PRIMITIVE_KINDS:
            raise ValueError(f"Unknown primitive kind: {self.kind!r}")


@dataclass(frozen=True)
class Array:
    items: "Schema"

    @property
    def kind(self) -> str:
        return "array"


@dataclass(frozen=True)
class Object:
    properties: Dict[str, "Schema"] = field(default_factory=dict)
    required: Set[str] = field(default_factory=set)

    def __post_init__(self):
        stray = set(self.required) - set(self.properties)
        if stray:
            raise ValueError(f"Required keys missing from properties: {sorted(stray)}")

    @property
    def kind(self) -> str:
        return "object"

    def is_required(self, key: str) -> bool:
        return key in self.required


Schema = Union[Primitive, Array, Object]

ANY = Primitive("any")
NULL = Primitive("null")
STRING = Primitive("string")
BOOLEAN = Primitive("boolean")


def number(integer: bool = False) -> Primitive:
    return Primitive("number", integer=integer)


def is_any(schema: Schema) -> bool:
    return isinstance(schema, Primitive) and schema.kind == "any"
