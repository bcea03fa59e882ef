"""routa exception hierarchy.

Registration and config loading raise these; dispatch never does.
"""

from __future__ import annotations


class RouterError(Exception):
    """Base for all routa-specific errors."""


class InvalidRouteSegment(RouterError):  # noqa: N818
    """A dynamic segment does not have the shape ``:<name>(int|string)``."""

    def __init__(self, pattern: str, segment: str, reason: str = "") -> None:
        self.pattern = pattern
        self.segment = segment
        self.reason = reason or "expected ':<name>(int)' or ':<name>(string)'"
        super().__init__(
            f"invalid route segment {segment!r} in pattern {pattern!r}: {self.reason}"
        )


class RouteTableFrozenError(RouterError):
    """A route was registered after the table was frozen."""

    def __init__(self, method: str, pattern: str) -> None:
        self.method = method
        self.pattern = pattern
        super().__init__(f"cannot register {method} {pattern!r}: route table is frozen")
