"""Concrete segment matchers implementing the SegmentMatcher protocol.

Each matcher is a frozen dataclass, immutable after construction.

Parameter constraints use ``google-re2`` for guaranteed linear-time
matching. Both constraint classes are pure ASCII, so non-ASCII text is
rejected before it reaches the engine; RE2 works on UTF-8 and cannot
encode lone surrogates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

import re2

type ParamKind = Literal["int", "string"]

# kind -> constraint source; RE2 \d is ASCII-only
PARAM_CONSTRAINTS: dict[str, str] = {
    "int": r"\d+",
    "string": r"[a-zA-Z0-9_-]+",
}

_COMPILED_CONSTRAINTS = {kind: re2.compile(src) for kind, src in PARAM_CONSTRAINTS.items()}

_REGEX_METACHARS = frozenset(".*+?^${}()|[]\\")


def escape_literal(text: str) -> str:
    """Backslash-escape regex metacharacters so *text* matches itself."""
    return "".join("\\" + ch if ch in _REGEX_METACHARS else ch for ch in text)


@dataclass(frozen=True, slots=True)
class LiteralSegment:
    """Static segment: exact, case-sensitive text equality."""

    text: str

    def matches(self, value: str, /) -> bool:
        return value == self.text

    def expression(self) -> str:
        return escape_literal(self.text)


@dataclass(frozen=True, slots=True)
class ParamSegment:
    """Dynamic segment: a named capture constrained by its kind.

    The constraint is compiled once per kind at import time and shared.
    """

    name: str
    kind: ParamKind
    _compiled: re2.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", _COMPILED_CONSTRAINTS[self.kind])

    def matches(self, value: str, /) -> bool:
        if not value.isascii():
            return False
        return self._compiled.fullmatch(value) is not None

    def expression(self) -> str:
        return f"({PARAM_CONSTRAINTS[self.kind]})"
