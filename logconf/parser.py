"""Entry points that turn configuration text into :class:`LogConfig` objects."""

from __future__ import annotations

import logging

from .basic_format import parse_basic_config
from .json_format import parse_json_config
from .model import LogConfig

_logger = logging.getLogger(__name__)


def parse_log_config(text: str) -> LogConfig:
    """Parse ``text`` in either the basic or the JSON format.

    Input whose first non-whitespace character is ``{`` is treated as JSON;
    anything else is parsed with the basic grammar. Whitespace-only input
    produces an empty configuration.

    Raises
    ------
    LogConfigParseError
        If the input violates the grammar or schema of its format.
    JsonSyntaxError
        If JSON input is not well-formed.

    Examples
    --------
    >>> config = parse_log_config(".=ERROR,folly=DBG2")
    >>> sorted(config.category_configs)
    ['', 'folly']

    """
    stripped = text.strip()
    if stripped.startswith("{"):
        _logger.debug("parsing log config as JSON")
        return parse_json_config(stripped)
    _logger.debug("parsing log config in basic format")
    return parse_basic_config(stripped)


def parse_log_config_json(text: str) -> LogConfig:
    """Parse ``text`` as a JSON configuration document.

    Unlike :func:`parse_log_config` no format detection happens, so a JSON
    value other than an object is reported as a schema error.
    """
    return parse_json_config(text)


__all__ = ["parse_log_config", "parse_log_config_json"]
