"""Exception types raised while parsing logging configuration.

Every schema or grammar violation surfaces as :class:`LogConfigParseError`.
The message is stable and greppable; the same information is also available
as attributes so callers can inspect failures without matching text.

Malformed JSON is reported separately via :class:`JsonSyntaxError`, because
it is detected by the JSON reader before any schema checks run.
"""

from __future__ import annotations

import typing as typ

Subject = typ.Literal["category", "handler"]


class LogConfigParseError(ValueError):
    """Raised when a configuration string violates the grammar or schema.

    Attributes
    ----------
    subject : {"category", "handler"} or None
        The kind of entry the error refers to, when there is one.
    name : str or None
        The category or handler name as written in the input.
    fragment : str or None
        The offending piece of input, such as an unparsable level.
    actual : str or None
        The JSON type encountered, for type mismatches.
    expected : str or None
        The JSON type(s) accepted at that position.

    """

    def __init__(
        self,
        message: str,
        *,
        subject: Subject | None = None,
        name: str | None = None,
        fragment: str | None = None,
        actual: str | None = None,
        expected: str | None = None,
    ) -> None:
        super().__init__(message)
        self.subject = subject
        self.name = name
        self.fragment = fragment
        self.actual = actual
        self.expected = expected


class LogConfigTypeError(LogConfigParseError, TypeError):
    """A JSON value had the wrong type for its position in the schema."""


class CategoryConflictError(LogConfigParseError):
    """Two spellings of one category name appeared in the same input."""

    def __init__(self, canonical_name: str, first: str, second: str) -> None:
        msg = (
            f'category "{canonical_name}" listed multiple times under different '
            f'names: "{first}" and "{second}"'
        )
        super().__init__(msg, subject="category", name=second)
        self.canonical_name = canonical_name
        self.spellings = (first, second)


class JsonSyntaxError(ValueError):
    """The JSON reader rejected the input text."""


__all__ = [
    "CategoryConflictError",
    "JsonSyntaxError",
    "LogConfigParseError",
    "LogConfigTypeError",
]
