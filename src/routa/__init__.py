"""routa: minimal method + path request router.

Patterns compile into segment matchers; a route table resolves requests
first-match-wins and returns NOT_FOUND when nothing matches.

All public types are exported from this module for flat imports:

    from routa import RouteTable, NOT_FOUND, InvalidRouteSegment
"""

__version__ = "0.1.0"

# Config types, see routa._config for details
from routa._config import (
    ConfigParseError,
    RouteConfig,
    RouteTableConfig,
    TypedConfig,
    parse_route_table_config,
    read_route_table_config,
)

# Errors
from routa._errors import InvalidRouteSegment, RouterError, RouteTableFrozenError

# Pattern compiler
from routa._pattern import CompiledPattern, compile_pattern

# Registry, see routa._registry for details
from routa._registry import (
    MAX_PATTERN_LENGTH,
    MAX_ROUTES,
    HandlerRegistry,
    HandlerRegistryBuilder,
    InvalidConfigError,
    PatternTooLongError,
    TooManyRoutesError,
    UnknownTypeUrlError,
)

# Segment matchers
from routa._segments import PARAM_CONSTRAINTS, LiteralSegment, ParamSegment, escape_literal

# Route table
from routa._table import CompiledRoute, RouteMatch, RouteTable
from routa._types import NOT_FOUND, Handler, NotFound, Params, SegmentMatcher

__all__ = [
    # Protocols and aliases
    "Handler",
    "Params",
    "SegmentMatcher",
    # Sentinel
    "NOT_FOUND",
    "NotFound",
    # Errors
    "RouterError",
    "InvalidRouteSegment",
    "RouteTableFrozenError",
    # Segment matchers
    "LiteralSegment",
    "ParamSegment",
    "PARAM_CONSTRAINTS",
    "escape_literal",
    # Pattern compiler
    "CompiledPattern",
    "compile_pattern",
    # Route table
    "CompiledRoute",
    "RouteMatch",
    "RouteTable",
    # Config types
    "TypedConfig",
    "RouteConfig",
    "RouteTableConfig",
    "ConfigParseError",
    "parse_route_table_config",
    "read_route_table_config",
    # Registry
    "HandlerRegistryBuilder",
    "HandlerRegistry",
    "UnknownTypeUrlError",
    "InvalidConfigError",
    "TooManyRoutesError",
    "PatternTooLongError",
    "MAX_ROUTES",
    "MAX_PATTERN_LENGTH",
]
