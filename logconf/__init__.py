"""logconf package.

Parse logging configuration strings into :class:`LogConfig` objects and
serialize them back to JSON.

Examples
--------
>>> config = parse_log_config("ERR:stderr; stderr=file,stream=stderr")
>>> str(config.category_configs[""])
'ERR:stderr'
>>> str(config.handler_configs["stderr"])
'file:stream=stderr'

"""

from __future__ import annotations

from .errors import (
    CategoryConflictError,
    JsonSyntaxError,
    LogConfigParseError,
    LogConfigTypeError,
)
from .levels import LogLevel, log_level_to_string, parse_log_level
from .model import CategoryConfig, HandlerConfig, LogConfig, LogConfigBuilder
from .names import canonicalize_category_name
from .parser import parse_log_config, parse_log_config_json
from .serialize import log_config_to_dict, log_config_to_json

__all__ = [
    "CategoryConfig",
    "CategoryConflictError",
    "HandlerConfig",
    "JsonSyntaxError",
    "LogConfig",
    "LogConfigBuilder",
    "LogConfigParseError",
    "LogConfigTypeError",
    "LogLevel",
    "canonicalize_category_name",
    "log_config_to_dict",
    "log_config_to_json",
    "log_level_to_string",
    "parse_log_config",
    "parse_log_config_json",
    "parse_log_level",
]
