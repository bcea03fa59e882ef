"""Core protocols, type aliases, and the not-found sentinel for routa.

- Params is the mapping handed to every handler (name -> captured text)
- Handler is any callable accepting Params
- SegmentMatcher is the per-segment matching port
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import Protocol, runtime_checkable

type Params = dict[str, str]

type Handler[R] = Callable[[Params], R]


class NotFound(enum.Enum):
    """Single-member enum holding the not-found sentinel. Compare with ``is``."""

    NOT_FOUND = "404 Not Found"

    def __str__(self) -> str:
        return self.value


NOT_FOUND = NotFound.NOT_FOUND


@runtime_checkable
class SegmentMatcher(Protocol):
    """Match one ``/``-delimited path segment.

    Implementations are stateless once constructed, and must return False
    (never raise) for any input text.
    """

    def matches(self, value: str, /) -> bool: ...

    def expression(self) -> str:
        """Regex source equivalent to this matcher (for introspection)."""
        ...
