"""Configuration objects produced by the parsers.

``LogConfig`` is the value handed to callers. Both input grammars assemble it
through :class:`LogConfigBuilder`, which owns category-name canonicalization
and duplicate detection so the rules are identical for every front end.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses
import logging
import types
import typing as typ

from .errors import CategoryConflictError, LogConfigParseError
from .levels import log_level_to_string
from .names import canonicalize_category_name

Mapping = cabc.Mapping

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class CategoryConfig:
    """Settings for a single log category.

    ``handlers`` is ``None`` when the category keeps its parent's handlers,
    an empty tuple to detach every handler, and otherwise the ordered list of
    handler names to use instead.
    """

    level: int
    inherit_parent_level: bool = True
    handlers: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.handlers is not None and not isinstance(self.handlers, tuple):
            object.__setattr__(self, "handlers", tuple(self.handlers))

    def __str__(self) -> str:
        text = log_level_to_string(self.level)
        if not self.inherit_parent_level:
            text += "!"
        if self.handlers is not None:
            text += ":" + ",".join(self.handlers)
        return text


@dataclasses.dataclass(frozen=True, slots=True)
class HandlerConfig:
    """A named handler definition: its type and string options."""

    type: str
    options: Mapping[str, str] = dataclasses.field(
        default_factory=lambda: types.MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if not isinstance(self.options, types.MappingProxyType):
            object.__setattr__(
                self, "options", types.MappingProxyType(dict(self.options))
            )

    def __hash__(self) -> int:
        return hash((self.type, tuple(self.options.items())))

    def __str__(self) -> str:
        if not self.options:
            return self.type
        opts = ",".join(f"{key}={value}" for key, value in self.options.items())
        return f"{self.type}:{opts}"


@dataclasses.dataclass(frozen=True, slots=True)
class LogConfig:
    """Category and handler settings parsed from one configuration string."""

    category_configs: Mapping[str, CategoryConfig] = dataclasses.field(
        default_factory=lambda: types.MappingProxyType({})
    )
    handler_configs: Mapping[str, HandlerConfig] = dataclasses.field(
        default_factory=lambda: types.MappingProxyType({})
    )

    def __post_init__(self) -> None:
        for field in ("category_configs", "handler_configs"):
            value = getattr(self, field)
            if not isinstance(value, types.MappingProxyType):
                object.__setattr__(self, field, types.MappingProxyType(dict(value)))

    def __hash__(self) -> int:
        return hash(
            (
                frozenset(self.category_configs.items()),
                frozenset(self.handler_configs.items()),
            )
        )

    def get_category_configs(self) -> Mapping[str, CategoryConfig]:
        """Return settings keyed by canonical category name."""
        return self.category_configs

    def get_handler_configs(self) -> Mapping[str, HandlerConfig]:
        """Return handler definitions keyed by handler name."""
        return self.handler_configs


class LogConfigBuilder:
    """Accumulate categories and handlers, rejecting duplicates."""

    def __init__(self) -> None:
        self._categories: dict[str, CategoryConfig] = {}
        self._spellings: dict[str, str] = {}
        self._handlers: dict[str, HandlerConfig] = {}

    def with_category(self, name: str, config: CategoryConfig) -> typ.Self:
        """Add ``config`` under the canonical form of ``name``."""
        canonical = canonicalize_category_name(name)
        if canonical in self._categories:
            raise CategoryConflictError(canonical, self._spellings[canonical], name)
        self._categories[canonical] = config
        self._spellings[canonical] = name
        return self

    def with_handler(self, name: str, config: HandlerConfig) -> typ.Self:
        """Add the handler definition ``config`` called ``name``."""
        if name in self._handlers:
            msg = f'configuration for log handler "{name}" specified multiple times'
            raise LogConfigParseError(msg, subject="handler", name=name)
        self._handlers[name] = config
        return self

    def build(self) -> LogConfig:
        """Return the immutable :class:`LogConfig`."""
        _logger.debug(
            "built log config with %d categories and %d handlers",
            len(self._categories),
            len(self._handlers),
        )
        return LogConfig(dict(self._categories), dict(self._handlers))


__all__ = ["CategoryConfig", "HandlerConfig", "LogConfig", "LogConfigBuilder"]
