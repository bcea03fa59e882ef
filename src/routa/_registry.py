"""Handler registry for config-driven route table construction.

- HandlerRegistryBuilder[R] -> .build() -> HandlerRegistry[R] (immutable)
- Factories are plain callables: (config: dict) -> Handler[R]
- load_table() walks a RouteTableConfig and registers every route in order

Example::

    builder = HandlerRegistryBuilder()
    builder.handler("app.v1.User", lambda cfg: show_user)
    registry = builder.build()

    config = parse_route_table_config(yaml_data)
    table = registry.load_table(config)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from routa._errors import RouterError
from routa._table import RouteTable

if TYPE_CHECKING:
    from collections.abc import Callable

    from routa._config import RouteConfig, RouteTableConfig
    from routa._types import Handler

logger = logging.getLogger("routa.registry")

# ═══════════════════════════════════════════════════════════════════════════════
# Limits
# ═══════════════════════════════════════════════════════════════════════════════

MAX_ROUTES = 1024
MAX_PATTERN_LENGTH = 2048

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class UnknownTypeUrlError(RouterError):
    """A handler type_url was not found in the registry."""

    def __init__(self, type_url: str, available: list[str]) -> None:
        self.type_url = type_url
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = f"unknown handler type_url: {type_url!r} (registered: {registered})"
        else:
            msg = f"unknown handler type_url: {type_url!r} (no handler types are registered)"
        super().__init__(msg)


class InvalidConfigError(RouterError):
    """A handler config payload was rejected by its factory."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"invalid config: {source}")


class TooManyRoutesError(RouterError):
    """Config has more routes than MAX_ROUTES."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(f"too many routes: {count} exceeds maximum {max_}")


class PatternTooLongError(RouterError):
    """A route pattern exceeds MAX_PATTERN_LENGTH."""

    def __init__(self, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(f"pattern length {length} exceeds maximum {max_}")


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════

type HandlerFactory[R] = Callable[[dict[str, Any]], Handler[R]]


class HandlerRegistryBuilder[R]:
    """Builder for constructing a HandlerRegistry.

    Register handler factories with type URLs, then call build() to
    produce an immutable HandlerRegistry.
    """

    def __init__(self) -> None:
        self._handler_factories: dict[str, HandlerFactory[R]] = {}

    def handler(self, type_url: str, factory: HandlerFactory[R]) -> HandlerRegistryBuilder[R]:
        """Register a handler factory with a type URL."""
        self._handler_factories[type_url] = factory
        return self

    def build(self) -> HandlerRegistry[R]:
        """Freeze the registry. No further registration is possible."""
        return HandlerRegistry(
            _handler_factories=MappingProxyType(dict(self._handler_factories)),
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HandlerRegistry[R]:
    """Immutable registry of handler factories.

    Constructed via HandlerRegistryBuilder. Use load_table() to turn a
    RouteTableConfig into a frozen RouteTable.
    """

    _handler_factories: MappingProxyType[str, HandlerFactory[R]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def load_table(self, config: RouteTableConfig) -> RouteTable[R]:
        """Load a frozen RouteTable from configuration.

        Routes are registered in config order, so config order is match
        priority.

        Raises:
            TooManyRoutesError: more than MAX_ROUTES routes
            PatternTooLongError: a pattern exceeds MAX_PATTERN_LENGTH
            UnknownTypeUrlError: handler type_url not registered
            InvalidConfigError: a handler factory rejected its config
            InvalidRouteSegment: a pattern failed to compile
        """
        if len(config.routes) > MAX_ROUTES:
            raise TooManyRoutesError(len(config.routes), MAX_ROUTES)

        table: RouteTable[R] = RouteTable()
        for route in config.routes:
            self._load_route(table, route)
        table.freeze()

        logger.info("loaded route table with %d route(s)", len(table))
        return table

    @property
    def handler_count(self) -> int:
        """Number of registered handler types."""
        return len(self._handler_factories)

    def contains_handler(self, type_url: str) -> bool:
        """Check if a handler type URL is registered."""
        return type_url in self._handler_factories

    def handler_type_urls(self) -> list[str]:
        """Return all registered handler type URLs (sorted)."""
        return sorted(self._handler_factories.keys())

    def _load_route(self, table: RouteTable[R], config: RouteConfig) -> None:
        if len(config.path) > MAX_PATTERN_LENGTH:
            raise PatternTooLongError(len(config.path), MAX_PATTERN_LENGTH)

        factory = self._handler_factories.get(config.handler.type_url)
        if factory is None:
            raise UnknownTypeUrlError(
                config.handler.type_url,
                list(self._handler_factories.keys()),
            )

        try:
            handler = factory(config.handler.config)
        except Exception as e:
            raise InvalidConfigError(str(e)) from e

        table.register(config.method, config.path, handler)
