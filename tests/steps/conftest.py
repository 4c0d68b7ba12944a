"""Shared BDD steps reused across feature modules."""

from __future__ import annotations

import pytest
from pytest_bdd import parsers, then, when

from logconf import (
    CategoryConflictError,
    LogConfig,
    LogConfigParseError,
    canonicalize_category_name,
    parse_log_config,
)
from tests.helpers import render_categories, render_handlers


def _table_to_dict(datatable: list[list[str]]) -> dict[str, str]:
    """Map the first column to the second, skipping the header row."""
    return {row[0]: row[1].strip() for row in datatable[1:]}


@when(parsers.parse('I parse the config "{text}"'), target_fixture="log_config")
def parse_config(text: str) -> LogConfig:
    """Parse ``text`` with format auto-detection."""
    return parse_log_config(text)


@when(
    parsers.parse('I try to parse the config "{text}"'),
    target_fixture="parse_error",
)
def try_parse_config(text: str) -> LogConfigParseError:
    """Parse ``text`` and capture the expected failure."""
    with pytest.raises(LogConfigParseError) as excinfo:
        parse_log_config(text)
    return excinfo.value


@then("the categories are:")
def categories_are(log_config: LogConfig, datatable: list[list[str]]) -> None:
    """Compare categories against a name/setting table; ``.`` is the root."""
    expected = {
        canonicalize_category_name(name): setting
        for name, setting in _table_to_dict(datatable).items()
    }
    assert render_categories(log_config) == expected


@then("the handlers are:")
def handlers_are(log_config: LogConfig, datatable: list[list[str]]) -> None:
    """Compare handlers against a name/setting table."""
    assert render_handlers(log_config) == _table_to_dict(datatable)


@then("no categories are configured")
def no_categories(log_config: LogConfig) -> None:
    """Assert that the config defines no categories."""
    assert dict(log_config.category_configs) == {}


@then("no handlers are configured")
def no_handlers(log_config: LogConfig) -> None:
    """Assert that the config defines no handlers."""
    assert dict(log_config.handler_configs) == {}


@then(parsers.parse('parsing fails with a conflict on "{name}"'))
def fails_with_conflict(parse_error: LogConfigParseError, name: str) -> None:
    """Check the failure is a conflict on canonical category ``name``."""
    assert isinstance(parse_error, CategoryConflictError)
    assert parse_error.canonical_name == name


@then(
    parsers.parse('parsing fails with invalid level "{fragment}" for category "{name}"')
)
def fails_with_invalid_level(
    parse_error: LogConfigParseError, fragment: str, name: str
) -> None:
    """Check the failure names the rejected level and its category."""
    assert parse_error.subject == "category"
    assert parse_error.fragment == fragment
    assert parse_error.name == name


@then(parsers.parse("parsing fails with type {actual} where {expected} was expected"))
def fails_with_type(
    parse_error: LogConfigParseError, actual: str, expected: str
) -> None:
    """Check the failure reports the actual and expected JSON types."""
    assert parse_error.actual == actual
    assert parse_error.expected == expected
