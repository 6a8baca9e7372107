from __future__ import annotations

from typing import Optional


class TypeZeroError(Exception):
    """Base class for every error raised by the generation engine."""


class InvalidJsonError(TypeZeroError, ValueError):
    """The input text could not be parsed as JSON."""

    def __init__(self, msg: str, lineno: Optional[int] = None, colno: Optional[int] = None):
        self.msg = msg
        self.lineno = lineno
        self.colno = colno
        if lineno is not None and colno is not None:
            super().__init__(f"{msg} (line {lineno}, column {colno})")
        else:
            super().__init__(msg)


class UnknownDialectError(TypeZeroError, ValueError):
    pass


class ConfigError(TypeZeroError, ValueError):
    pass
