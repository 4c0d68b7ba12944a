"""Shared helpers for the test suite."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from logconf import LogConfig


def render_categories(config: LogConfig) -> dict[str, str]:
    """Return each category rendered as ``LEVEL[!][:handlers]``.

    Examples
    --------
    >>> from logconf import parse_log_config
    >>> render_categories(parse_log_config("ERR, folly:=DBG2:"))
    {'': 'ERR', 'folly': 'DBG2!:'}

    """
    return {name: str(cfg) for name, cfg in config.category_configs.items()}


def render_handlers(config: LogConfig) -> dict[str, str]:
    """Return each handler rendered as ``TYPE[:key=value,...]``."""
    return {name: str(cfg) for name, cfg in config.handler_configs.items()}
