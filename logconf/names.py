"""Canonical forms of hierarchical category names."""

from __future__ import annotations

import re

_DOT_RUN = re.compile(r"\.{2,}")


def canonicalize_category_name(name: str) -> str:
    """Return the canonical spelling of category ``name``.

    Leading and trailing dots are dropped and each internal run of dots is
    collapsed into one separator. All other characters, whitespace included,
    are preserved. A name made only of dots is the root category ``""``.

    Examples
    --------
    >>> canonicalize_category_name("foo...bar.")
    'foo.bar'
    >>> canonicalize_category_name(".")
    ''

    """
    return _DOT_RUN.sub(".", name.strip("."))


__all__ = ["canonicalize_category_name"]
