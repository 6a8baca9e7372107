"""Core logic for TypeZero, the JSON-to-code generator.

The Gradio console lives in `app.py`. This package contains pure functions that:
- parse JSON text
- infer a structural schema (with array-element merging and optional fields)
- collect literal statistics for enum-like fields
- render TypeScript, Zod, SQL DDL or Pydantic source
"""
from .config import GenerationOptions
from .engine import Dialect, generate, generate_strict, resolve_dialect
from .errors import ConfigError, InvalidJsonError, TypeZeroError, UnknownDialectError

__all__ = [
    "ConfigError",
    "Dialect",
    "GenerationOptions",
    "InvalidJsonError",
    "TypeZeroError",
    "UnknownDialectError",
    "generate",
    "generate_strict",
    "resolve_dialect",
]
