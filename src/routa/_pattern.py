"""Pattern compiler: path pattern string -> CompiledPattern.

A pattern is ``/``-delimited. Each segment is either literal text or a
typed parameter ``:<name>(<kind>)`` where kind is ``int`` or ``string``:

    "/user/:id(int)"                      -> user / (\\d+)
    "/category/:name(string)/:page(int)"  -> category / ([a-zA-Z0-9_-]+) / (\\d+)
    "/" or ""                             -> root, matches only "/"

Compilation is all-or-nothing: the first malformed parameter segment
raises InvalidRouteSegment and nothing is produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, cast

import re2

from routa._errors import InvalidRouteSegment
from routa._segments import PARAM_CONSTRAINTS, LiteralSegment, ParamSegment

if TYPE_CHECKING:
    from routa._segments import ParamKind
    from routa._types import Params, SegmentMatcher

# Full shape of a parameter segment. RE2 \w is ASCII-only.
_PARAM_SEGMENT = re2.compile(r":(\w+)\((int|string)\)")
# Well-formed apart from the kind keyword; used to word the error.
_PARAM_ANY_KIND = re2.compile(r":(\w+)\((\w*)\)")


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """An immutable, reusable matcher for one path pattern.

    INV: len(param_names) == number of ParamSegments == capture groups
    in ``expression``.
    """

    pattern: str
    segments: tuple[SegmentMatcher, ...]
    param_names: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        names = tuple(s.name for s in self.segments if isinstance(s, ParamSegment))
        object.__setattr__(self, "param_names", names)

    @property
    def expression(self) -> str:
        """Anchored whole-path regex source equivalent to this matcher."""
        return "^/" + "/".join(s.expression() for s in self.segments) + "$"

    def match(self, path: str) -> Params | None:
        """Match *path* segment by segment.

        Returns the captured parameters, or None. The path must start with
        ``/`` and have exactly as many segments as the pattern.
        """
        if not path.startswith("/"):
            return None
        parts = path[1:].split("/")
        if len(parts) != len(self.segments):
            return None

        params: Params = {}
        for segment, part in zip(self.segments, parts, strict=True):
            if not segment.matches(part):
                return None
            if isinstance(segment, ParamSegment):
                params[segment.name] = part
        return params


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile a route pattern.

    Leading and trailing slashes are stripped; an empty remainder is a
    single empty literal segment (the root path).

    Raises:
        InvalidRouteSegment: If a segment starting with ``:`` is not
            exactly ``:<name>(int)`` or ``:<name>(string)``.
    """
    return CompiledPattern(
        pattern=pattern,
        segments=tuple(_compile_segment(pattern, s) for s in pattern.strip("/").split("/")),
    )


def _compile_segment(pattern: str, segment: str) -> SegmentMatcher:
    if not segment.startswith(":"):
        return LiteralSegment(segment)

    if not segment.isascii():
        raise InvalidRouteSegment(pattern, segment, "parameter segments must be ASCII")

    m = _PARAM_SEGMENT.fullmatch(segment)
    if m is None:
        raise InvalidRouteSegment(pattern, segment, _describe_failure(segment))
    return ParamSegment(name=m.group(1), kind=cast("ParamKind", m.group(2)))


def _describe_failure(segment: str) -> str:
    m = _PARAM_ANY_KIND.fullmatch(segment)
    if m is not None:
        allowed = ", ".join(sorted(PARAM_CONSTRAINTS))
        return f"unsupported parameter type {m.group(2)!r} (supported: {allowed})"
    return ""
