from __future__ import annotations

import logging

import pytest

# Mirrors the mixed example used throughout the basic-format docs: a root
# category with two handlers, an inheriting category, a non-inheriting
# category with its own handler, and three handler sections.
FULL_BASIC_CONFIG = (
    "ERR:myfile:custom, folly=DBG2, folly.io:=WARN:other;"
    "myfile=file,path=/tmp/x.log; "
    "custom=custom,foo=bar,hello=world,a = b = c; "
    "other=custom2"
)


@pytest.fixture
def full_basic_config() -> str:
    """Return a basic-format string exercising categories and handlers."""
    return FULL_BASIC_CONFIG


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture ``DEBUG`` records emitted by the ``logconf`` loggers."""
    caplog.set_level(logging.DEBUG, logger="logconf")
    return caplog
