from __future__ import annotations

import json
from typing import Any

from .errors import InvalidJsonError


def read_json_text(file_obj) -> str:
    """Read raw JSON text from an uploaded file or file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return content

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def parse_json_text(text: Any) -> Any:
    """Parse JSON text, raising InvalidJsonError for anything unparseable."""
    if isinstance(text, bytes):
        try:
            text = text.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise InvalidJsonError(f"Input is not UTF-8: {exc.reason}") from exc
    if not isinstance(text, str):
        raise InvalidJsonError(f"Expected JSON text, got {type(text).__name__}")

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidJsonError(exc.msg, exc.lineno, exc.colno) from exc
    except RecursionError as exc:
        raise InvalidJsonError("JSON nesting is too deep") from exc
