"""Route table with first-match-wins dispatch.

Routes are scanned in registration order:
- Entries for a different method are skipped before any path work
- The first structural match wins; later overlapping routes are unreachable
- No match (or an empty table) yields NOT_FOUND, never an exception

INV: The table is append-only. Nothing removes or reorders entries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from routa._errors import RouteTableFrozenError
from routa._pattern import CompiledPattern, compile_pattern
from routa._types import NOT_FOUND, NotFound

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from routa._types import Handler, Params

logger = logging.getLogger("routa.table")


@dataclass(frozen=True, slots=True)
class CompiledRoute[R]:
    """A registered route: method + compiled pattern + handler.

    Created once by RouteTable.register() and never mutated.
    """

    method: str
    pattern: CompiledPattern
    handler: Handler[R]

    @property
    def path(self) -> str:
        """The source pattern this route was registered with."""
        return self.pattern.pattern

    @property
    def param_names(self) -> tuple[str, ...]:
        return self.pattern.param_names


@dataclass(frozen=True, slots=True)
class RouteMatch[R]:
    """Result of a successful match."""

    route: CompiledRoute[R]
    params: Params


class RouteTable[R]:
    """An ordered, append-only collection of routes.

    Usage::

        table = RouteTable()
        table.register("GET", "/user/:id(int)", lambda p: f"User {p['id']}")
        table.dispatch("GET", "/user/42")   # -> "User 42"
        table.dispatch("GET", "/user/abc")  # -> NOT_FOUND

    Register every route before the first dispatch. The table does no
    locking; freeze() it and share it read-only across threads.
    """

    __slots__ = ("_frozen", "_routes")

    def __init__(self) -> None:
        self._routes: list[CompiledRoute[R]] = []
        self._frozen = False

    def register(self, method: str, pattern: str, handler: Handler[R]) -> None:
        """Compile *pattern* and append a route for *method*.

        Raises:
            InvalidRouteSegment: Malformed parameter segment. The table is
                left unchanged.
            RouteTableFrozenError: The table has been frozen.
        """
        if self._frozen:
            raise RouteTableFrozenError(method, pattern)

        compiled = compile_pattern(pattern)
        self._routes.append(CompiledRoute(method=method, pattern=compiled, handler=handler))
        logger.debug(
            "registered %s %s (params: %s)",
            method,
            pattern,
            ", ".join(compiled.param_names) or "-",
        )

    def route(self, method: str, pattern: str) -> Callable[[Handler[R]], Handler[R]]:
        """Decorator form of register(). Returns the handler unchanged."""

        def decorator(handler: Handler[R]) -> Handler[R]:
            self.register(method, pattern, handler)
            return handler

        return decorator

    def freeze(self) -> None:
        """Make the table read-only. Idempotent."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def routes(self) -> tuple[CompiledRoute[R], ...]:
        """All routes in registration (= priority) order."""
        return tuple(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[CompiledRoute[R]]:
        return iter(self.routes)

    def match(self, method: Any, path: Any) -> RouteMatch[R] | None:
        """Find the first route matching *method* and *path*.

        Non-string input never matches.
        """
        if not isinstance(method, str) or not isinstance(path, str):
            return None

        for route in self._routes:
            if route.method != method:
                continue
            params = route.pattern.match(path)
            if params is not None:
                return RouteMatch(route=route, params=params)
        return None

    def dispatch(self, method: Any, path: Any) -> R | NotFound:
        """Resolve a request and invoke the matching handler.

        Returns the handler's result, or NOT_FOUND when no route matches.
        Exceptions raised by the handler itself propagate unchanged.
        """
        found = self.match(method, path)
        if found is None:
            logger.debug("no route for %s %r", method, path)
            return NOT_FOUND
        return found.route.handler(found.params)
