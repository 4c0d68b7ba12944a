"""Convert :class:`~logconf.model.LogConfig` objects back to the JSON form.

The JSON form is lossless: parsing the output of :func:`log_config_to_json`
yields a configuration equal to the one serialized.
"""

from __future__ import annotations

import json
import typing as typ

from .levels import log_level_name

if typ.TYPE_CHECKING:
    from .model import CategoryConfig, HandlerConfig, LogConfig


def _level_to_json(level: int) -> str | int:
    name = log_level_name(level)
    return int(level) if name is None else name


def category_config_to_dict(config: CategoryConfig) -> dict[str, typ.Any]:
    """Return the JSON object describing a single category."""
    data: dict[str, typ.Any] = {
        "level": _level_to_json(config.level),
        "inherit": config.inherit_parent_level,
    }
    if config.handlers is not None:
        data["handlers"] = list(config.handlers)
    return data


def handler_config_to_dict(config: HandlerConfig) -> dict[str, typ.Any]:
    """Return the JSON object describing a single handler."""
    return {"type": config.type, "options": dict(config.options)}


def log_config_to_dict(config: LogConfig) -> dict[str, typ.Any]:
    """Return the JSON document for ``config`` as plain Python values.

    Both ``categories`` and ``handlers`` are always present. A category's
    ``handlers`` key is only emitted when its handler list is set, so an
    inherited list and an explicitly empty list stay distinguishable.

    Examples
    --------
    >>> from logconf import parse_log_config
    >>> log_config_to_dict(parse_log_config("ERR:"))["categories"]
    {'': {'level': 'ERR', 'inherit': True, 'handlers': []}}

    """
    return {
        "categories": {
            name: category_config_to_dict(category)
            for name, category in config.category_configs.items()
        },
        "handlers": {
            name: handler_config_to_dict(handler)
            for name, handler in config.handler_configs.items()
        },
    }


def log_config_to_json(config: LogConfig, *, indent: int | None = 2) -> str:
    """Render ``config`` as JSON text.

    Parameters
    ----------
    config : LogConfig
        The configuration to serialize.
    indent : int or None, optional
        Passed to :func:`json.dumps`; ``None`` produces a single line.

    """
    return json.dumps(log_config_to_dict(config), indent=indent, ensure_ascii=False)


__all__ = [
    "category_config_to_dict",
    "handler_config_to_dict",
    "log_config_to_dict",
    "log_config_to_json",
]
