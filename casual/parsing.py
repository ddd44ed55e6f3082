# casual/parsing.py

"""
Turns a stripped input line into a value of the requested type.

Anything pydantic can validate from a string (int, float, Decimal, bool, date,
Enum, Literal[...], str, ...) is handled by a TypeAdapter. Plain functions and
types pydantic has no schema for are called directly with the text and are
expected to raise ValueError, TypeError or LookupError (e.g. `Color[text]`)
on bad input.
"""

import functools
import inspect
from typing import Any, Callable

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError

from casual.errors import ParseError


def _is_plain_callable(target) -> bool:
    return (
        inspect.isfunction(target)
        or inspect.ismethod(target)
        or inspect.isbuiltin(target)
        or isinstance(target, functools.partial)
    )


def build_parser(target: Any = str) -> Callable[[str], Any]:
    """
    Returns a `str -> value` callable for target. Schema generation happens
    once here, not on every attempt.
    """
    if _is_plain_callable(target):
        return target
    try:
        adapter = TypeAdapter(target)
    except PydanticSchemaGenerationError:
        if not callable(target):
            raise
        # e.g. a class whose constructor takes the raw text
        return target
    return adapter.validate_strings


def describe_error(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        errors = exc.errors()
        if errors:
            return errors[0]["msg"]
    message = str(exc)
    return message or exc.__class__.__name__


def parse_value(parser: Callable[[str], Any], text: str):
    """
    Raises ParseError with a human readable description if text can't be parsed.
    """
    try:
        return parser(text)
    except (ValidationError, ValueError, TypeError, LookupError) as e:
        raise ParseError(describe_error(e)) from e
