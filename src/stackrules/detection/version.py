"""Major-version extraction from free-form semver specifiers."""

from __future__ import annotations

import re

_NON_VERSION_CHARS = re.compile(r"[^0-9.]")


def parse_major(version: str | None) -> int:
    """Return the leading numeric component of ``version``.

    Everything except digits and dots is stripped first, so ``"^3.2.1"``,
    ``"~3.2"`` and ``">=3"`` all give ``3``.  An absent, empty or
    non-numeric specifier (``"latest"``, ``"workspace:*"``) gives ``0``;
    callers cannot tell that apart from a genuine ``0.x`` release.
    """
    if not version:
        return 0
    head = _NON_VERSION_CHARS.sub("", version).split(".")[0]
    if not head:
        return 0
    return int(head)
