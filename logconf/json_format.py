"""Parser for the JSON configuration format.

The document is read with :mod:`json5`, so ``//`` comments and trailing commas
are accepted. The resulting value is then walked with explicit type checks at
every position the schema inspects::

    {
      "categories": {
        "": "ERR",
        "folly.io": {"level": "DBG2", "inherit": false, "handlers": ["h1"]},
      },
      "handlers": {
        "h1": {"type": "file", "options": {"path": "/tmp/x.log"}},
      },
    }

Names are taken verbatim, so unlike the basic format they may contain any
character. Unknown top-level keys are ignored.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

import json5

from .errors import JsonSyntaxError, LogConfigParseError, LogConfigTypeError
from .levels import LogLevel, is_valid_level, parse_log_level
from .model import CategoryConfig, HandlerConfig, LogConfig, LogConfigBuilder

Mapping = cabc.Mapping
cast = typ.cast

_DEFAULT_LEVEL: typ.Final[int] = LogLevel.WARN


def json_type_name(value: object) -> str:
    """Return the JSON type name describing ``value``."""
    # ``bool`` subclasses ``int`` so it must be checked first.
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "double"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list):
        return "array"
    if value is None:
        return "null"
    return type(value).__name__


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _type_error(
    what: str,
    value: object,
    expected: str,
    **fields: typ.Any,  # noqa: ANN401
) -> LogConfigTypeError:
    actual = json_type_name(value)
    msg = f"unexpected data type for {what}: got {actual}, expected {expected}"
    return LogConfigTypeError(msg, actual=actual, expected=expected, **fields)


def load_json(text: str) -> object:
    """Decode ``text`` into plain Python values.

    Raises
    ------
    JsonSyntaxError
        If ``text`` is not well-formed.

    """
    try:
        return json5.loads(text)
    # The reader recurses per nesting level.
    except (ValueError, RecursionError) as exc:
        msg = f"json parse error: {exc}"
        raise JsonSyntaxError(msg) from exc


def parse_json_config(text: str) -> LogConfig:
    """Parse ``text`` as a JSON configuration document.

    Raises
    ------
    JsonSyntaxError
        If ``text`` is not well-formed JSON.
    LogConfigParseError
        If the document does not follow the configuration schema.

    """
    return config_from_json_value(load_json(text))


def config_from_json_value(value: object) -> LogConfig:
    """Build a :class:`LogConfig` from an already decoded JSON ``value``."""
    if not isinstance(value, Mapping):
        msg = "JSON config input must be an object"
        raise LogConfigTypeError(
            msg, actual=json_type_name(value), expected="an object"
        )
    document = cast("Mapping[str, object]", value)
    builder = LogConfigBuilder()

    if "categories" in document:
        categories = document["categories"]
        if not isinstance(categories, Mapping):
            raise _type_error("log categories config", categories, "an object")
        for name, entry in cast("Mapping[str, object]", categories).items():
            builder.with_category(name, _parse_category(name, entry))

    if "handlers" in document:
        handlers = document["handlers"]
        if not isinstance(handlers, Mapping):
            raise _type_error("log handlers config", handlers, "an object")
        for name, entry in cast("Mapping[str, object]", handlers).items():
            builder.with_handler(name, _parse_handler(name, entry))

    return builder.build()


def _parse_level(name: str, value: object) -> int:
    if isinstance(value, str):
        try:
            return parse_log_level(value)
        except ValueError as exc:
            msg = f'invalid log level "{value}" for category "{name}"'
            raise LogConfigParseError(
                msg, subject="category", name=name, fragment=value
            ) from exc
    value = cast("int", value)
    if not is_valid_level(value):
        msg = f'invalid log level {value} for category "{name}"'
        raise LogConfigParseError(
            msg, subject="category", name=name, fragment=str(value)
        )
    return value


def _parse_category(name: str, value: object) -> CategoryConfig:
    if isinstance(value, str) or _is_integer(value):
        return CategoryConfig(_parse_level(name, value))
    if not isinstance(value, Mapping):
        raise _type_error(
            f'configuration of category "{name}"',
            value,
            "an object, string, or integer",
            subject="category",
            name=name,
        )
    entry = cast("Mapping[str, object]", value)

    level = _DEFAULT_LEVEL
    if "level" in entry:
        raw_level = entry["level"]
        if not (isinstance(raw_level, str) or _is_integer(raw_level)):
            raise _type_error(
                f'level field of category "{name}"',
                raw_level,
                "a string or integer",
                subject="category",
                name=name,
            )
        level = _parse_level(name, raw_level)

    inherit = True
    if "inherit" in entry:
        raw_inherit = entry["inherit"]
        if not isinstance(raw_inherit, bool):
            raise _type_error(
                f'inherit field of category "{name}"',
                raw_inherit,
                "a boolean",
                subject="category",
                name=name,
            )
        inherit = raw_inherit

    handlers = None
    if "handlers" in entry:
        handlers = _parse_category_handlers(name, entry["handlers"])
    return CategoryConfig(level, inherit, handlers)


def _parse_category_handlers(name: str, value: object) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise _type_error(
            f'handlers field of category "{name}"',
            value,
            "an array",
            subject="category",
            name=name,
        )
    for item in cast("list[object]", value):
        if not isinstance(item, str):
            raise _type_error(
                f'handler name in category "{name}"',
                item,
                "a string",
                subject="category",
                name=name,
            )
    return tuple(cast("list[str]", value))


def _parse_handler(name: str, value: object) -> HandlerConfig:
    if not isinstance(value, Mapping):
        raise _type_error(
            f'configuration of handler "{name}"',
            value,
            "an object",
            subject="handler",
            name=name,
        )
    entry = cast("Mapping[str, object]", value)
    if "type" not in entry:
        msg = f'no handler type specified for log handler "{name}"'
        raise LogConfigParseError(msg, subject="handler", name=name)
    handler_type = entry["type"]
    if not isinstance(handler_type, str):
        raise _type_error(
            f'"type" field of handler "{name}"',
            handler_type,
            "a string",
            subject="handler",
            name=name,
        )

    options: dict[str, str] = {}
    if "options" in entry:
        raw_options = entry["options"]
        if not isinstance(raw_options, Mapping):
            raise _type_error(
                f'"options" field of handler "{name}"',
                raw_options,
                "an object",
                subject="handler",
                name=name,
            )
        for key, option in cast("Mapping[str, object]", raw_options).items():
            if not isinstance(option, str):
                raise _type_error(
                    f'option "{key}" of handler "{name}"',
                    option,
                    "a string",
                    subject="handler",
                    name=name,
                    fragment=key,
                )
            options[key] = option
    return HandlerConfig(handler_type, options)


__all__ = [
    "config_from_json_value",
    "json_type_name",
    "load_json",
    "parse_json_config",
]
