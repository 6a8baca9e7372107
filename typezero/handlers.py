from __future__ import annotations

import gradio as gr

from .engine import Dialect, generate, is_sentinel, resolve_dialect
from .errors import UnknownDialectError
from .io_utils import parse_json_text, read_json_text

DIALECT_LABELS = {
    "TypeScript": Dialect.TYPED_INTERFACE,
    "Zod": Dialect.VALIDATOR,
    "SQL": Dialect.RELATIONAL_DDL,
    "Pydantic": Dialect.DATA_CLASS,
}

# Languages understood by gr.Code for highlighting.
CODE_LANGUAGES = {
    Dialect.TYPED_INTERFACE: "typescript",
    Dialect.VALIDATOR: "typescript",
    Dialect.RELATIONAL_DDL: "sql",
    Dialect.DATA_CLASS: "python",
}


def dialect_from_label(label: str) -> Dialect:
    if label in DIALECT_LABELS:
        return DIALECT_LABELS[label]
    return resolve_dialect(label)


def load_json_file_handler(file_obj):
    if file_obj is None:
        return gr.update(), "No file uploaded."

    try:
        text = read_json_text(file_obj)
    except Exception as e:
        return gr.update(), f"Error reading file: {str(e)}"

    try:
        parse_json_text(text)
    except ValueError as e:
        return text, f"Error parsing JSON: {str(e)}"
    return text, "Successfully loaded."


def generate_code_handler(json_text, dialect_label, root_name=None):
    if not json_text or not json_text.strip():
        return "", "Paste JSON or upload a file."

    try:
        dialect = dialect_from_label(dialect_label)
    except UnknownDialectError as e:
        return "", str(e)

    code = generate(json_text, dialect, root_name=(root_name or "").strip() or None)
    if is_sentinel(code):
        return code, "Invalid JSON."
    return code, f"Generated {dialect_label}."


def change_dialect_handler(json_text, dialect_label, root_name=None):
    """Switch the output language and regenerate for the new dialect."""
    code, status = generate_code_handler(json_text, dialect_label, root_name)
    try:
        language = CODE_LANGUAGES[dialect_from_label(dialect_label)]
    except UnknownDialectError:
        language = None
    return gr.update(value=code, language=language), status
