"""Public entry points: JSON text in, generated source text out."""
from __future__ import annotations

import enum
import logging
from typing import Any, Callable, Dict, Optional, Union

from . import generator_pydantic, generator_sql, generator_typescript, generator_zod
from .config import GenerationOptions
from .errors import InvalidJsonError, UnknownDialectError
from .inference import infer_schema
from .io_utils import parse_json_text
from .literal_stats import collect_literal_stats
from .signatures import type_name

logger = logging.getLogger(__name__)


class Dialect(str, enum.Enum):
    TYPED_INTERFACE = "typed-interface"
    VALIDATOR = "validator"
    RELATIONAL_DDL = "relational-ddl"
    DATA_CLASS = "data-class"


DIALECT_ALIASES: Dict[str, Dialect] = {
    "typescript": Dialect.TYPED_INTERFACE,
    "ts": Dialect.TYPED_INTERFACE,
    "zod": Dialect.VALIDATOR,
    "sql": Dialect.RELATIONAL_DDL,
    "ddl": Dialect.RELATIONAL_DDL,
    "pydantic": Dialect.DATA_CLASS,
    "python": Dialect.DATA_CLASS,
}

RENDERERS: Dict[Dialect, Callable[..., str]] = {
    Dialect.TYPED_INTERFACE: generator_typescript.render_typescript,
    Dialect.VALIDATOR: generator_zod.render_zod,
    Dialect.RELATIONAL_DDL: generator_sql.render_sql,
    Dialect.DATA_CLASS: generator_pydantic.render_pydantic,
}

# Only these dialects can render literal unions, so only they pay for stats.
ENUM_DIALECTS = {Dialect.TYPED_INTERFACE, Dialect.VALIDATOR}

INVALID_JSON_SENTINELS: Dict[Dialect, str] = {
    Dialect.TYPED_INTERFACE: generator_typescript.INVALID_JSON,
    Dialect.VALIDATOR: generator_zod.INVALID_JSON,
    Dialect.RELATIONAL_DDL: generator_sql.INVALID_JSON,
    Dialect.DATA_CLASS: generator_pydantic.INVALID_JSON,
}

COMMENT_PREFIXES: Dict[Dialect, str] = {
    Dialect.TYPED_INTERFACE: "//",
    Dialect.VALIDATOR: "//",
    Dialect.RELATIONAL_DDL: "--",
    Dialect.DATA_CLASS: "#",
}

UNKNOWN_DIALECT = "// Unknown dialect"


def resolve_dialect(name: Union[str, Dialect]) -> Dialect:
    if isinstance(name, Dialect):
        return name
    key = str(name).strip().lower()
    try:
        return Dialect(key)
    except ValueError:
        pass
    if key in DIALECT_ALIASES:
        return DIALECT_ALIASES[key]
    raise UnknownDialectError(f"Unknown dialect: {name!r}")


def generate_from_value(
    data: Any,
    dialect: Union[str, Dialect],
    root_name: Optional[str] = None,
    options: Optional[GenerationOptions] = None,
) -> str:
    """Render an already-parsed JSON value."""
    dialect = resolve_dialect(dialect)
    options = (options or GenerationOptions()).validate()
    root = type_name(root_name or options.root_name)

    schema = infer_schema(data, sample_size=options.sample_size, max_depth=options.max_depth)
    stats = None
    if dialect in ENUM_DIALECTS:
        stats = collect_literal_stats(
            data,
            array_sample_size=options.stats_array_sample_size,
            budget=options.stats_budget,
            max_depth=options.max_depth,
        )
    return RENDERERS[dialect](schema, stats, root, options)


def generate_strict(
    text: Any,
    dialect: Union[str, Dialect],
    root_name: Optional[str] = None,
    options: Optional[GenerationOptions] = None,
) -> str:
    """Like ``generate`` but raises InvalidJsonError instead of returning a sentinel."""
    dialect = resolve_dialect(dialect)
    data = parse_json_text(text)
    return generate_from_value(data, dialect, root_name, options)


def generate(
    text: Any,
    dialect: Union[str, Dialect],
    root_name: Optional[str] = None,
    options: Optional[GenerationOptions] = None,
) -> str:
    """Generate source text for ``dialect``; never raises on bad input.

    Malformed JSON yields the dialect's one-line ``Invalid JSON`` comment and an
    unrecognised dialect name yields ``UNKNOWN_DIALECT``; ``generate_strict``
    raises for both.
    """
    try:
        dialect = resolve_dialect(dialect)
    except UnknownDialectError as exc:
        logger.warning("%s", exc)
        return UNKNOWN_DIALECT
    try:
        return generate_strict(text, dialect, root_name, options)
    except InvalidJsonError as exc:
        logger.debug("Invalid JSON input for %s: %s", dialect.value, exc)
        return INVALID_JSON_SENTINELS[dialect]
    except Exception:
        logger.exception("Code generation failed for dialect %s", dialect.value)
        return f"{COMMENT_PREFIXES[dialect]} Could not generate code"


def is_sentinel(output: str) -> bool:
    """True when ``output`` is one of the invalid-input comments rather than code."""
    return output in INVALID_JSON_SENTINELS.values()
