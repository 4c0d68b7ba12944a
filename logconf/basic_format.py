"""Parser for the compact, delimiter-based configuration format.

The input is a ``;``-separated list of sections. The first section holds
comma-separated category settings; each following section defines a handler::

    ERR:stderr, folly.io:=WARN; stderr=stream,stream=stderr

A category setting is ``NAME=LEVEL`` (inherit the parent level) or
``NAME:=LEVEL`` (do not inherit). The level may be followed by a
``:``-separated list of handler names; a trailing ``:`` with no names detaches
every handler. A bare ``LEVEL`` applies to the root category.

A handler section is ``NAME=TYPE`` followed by comma-separated ``KEY=VALUE``
options. Values are split on the first ``=`` only, so they may contain ``=``.
"""

from __future__ import annotations

import typing as typ

from .errors import LogConfigParseError
from .levels import parse_log_level
from .model import CategoryConfig, HandlerConfig, LogConfig, LogConfigBuilder

# Reported in level errors for clauses that carry no category name.
_ROOT_DISPLAY_NAME: typ.Final = "."


def parse_basic_config(text: str) -> LogConfig:
    """Parse ``text`` written in the basic format.

    Raises
    ------
    LogConfigParseError
        If any category or handler section is invalid.

    Examples
    --------
    >>> config = parse_basic_config("ERR, folly:=DBG2")
    >>> str(config.category_configs["folly"])
    'DBG2!'

    """
    builder = LogConfigBuilder()
    category_section, *handler_sections = text.split(";")
    if category_section.strip():
        for clause in category_section.split(","):
            name, config = _parse_category_clause(clause)
            builder.with_category(name, config)
    for section in handler_sections:
        name, handler = _parse_handler_section(section)
        builder.with_handler(name, handler)
    return builder.build()


def _parse_category_clause(clause: str) -> tuple[str, CategoryConfig]:
    clause = clause.strip()
    inherit = True
    name, sep, settings = clause.partition("=")
    if not sep:
        name, settings, display_name = "", clause, _ROOT_DISPLAY_NAME
    else:
        if name.endswith(":"):
            inherit = False
            name = name[:-1]
        name = name.strip()
        display_name = name

    level_text, *handler_pieces = settings.split(":")
    level_text = level_text.strip()
    try:
        level = parse_log_level(level_text)
    except ValueError as exc:
        msg = f'invalid log level "{level_text}" for category "{display_name}"'
        raise LogConfigParseError(
            msg, subject="category", name=display_name, fragment=level_text
        ) from exc

    handlers: tuple[str, ...] | None = None
    if handler_pieces:
        handlers = tuple(piece.strip() for piece in handler_pieces if piece.strip())
    return name, CategoryConfig(level, inherit, handlers)


def _parse_handler_section(section: str) -> tuple[str, HandlerConfig]:
    section = section.strip()
    name, sep, rest = section.partition("=")
    if not sep:
        msg = (
            f'error parsing log handler configuration "{section}": '
            "expected data in the form NAME=TYPE"
        )
        raise LogConfigParseError(msg, subject="handler", fragment=section)
    name = name.strip()
    if not name:
        msg = "error parsing log handler configuration: empty log handler name"
        raise LogConfigParseError(msg, subject="handler", name=name, fragment=section)

    handler_type, *option_pieces = rest.split(",")
    handler_type = handler_type.strip()
    if not handler_type:
        msg = (
            f'error parsing configuration for log handler "{name}": '
            "empty log handler type"
        )
        raise LogConfigParseError(msg, subject="handler", name=name, fragment=rest)
    options = _parse_handler_options(name, option_pieces)
    return name, HandlerConfig(handler_type, options)


def _parse_handler_options(name: str, pieces: list[str]) -> dict[str, str]:
    options: dict[str, str] = {}
    for piece in pieces:
        key, sep, value = piece.partition("=")
        if not sep:
            msg = (
                f'error parsing configuration for log handler "{name}": '
                f'options must be of the form NAME=VALUE, got "{piece.strip()}"'
            )
            raise LogConfigParseError(
                msg, subject="handler", name=name, fragment=piece.strip()
            )
        key = key.strip()
        if not key:
            msg = (
                f'error parsing configuration for log handler "{name}": '
                "empty option name"
            )
            raise LogConfigParseError(
                msg, subject="handler", name=name, fragment=piece.strip()
            )
        # Last occurrence wins; the key keeps its first position.
        options[key] = value.strip()
    return options


__all__ = ["parse_basic_config"]
