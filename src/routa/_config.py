"""Config types for building a route table from data.

Config-driven construction path:
  dict / YAML -> parse_route_table_config() -> RouteTableConfig
              -> HandlerRegistry.load_table() -> RouteTable

Shape::

    routes:
      - method: GET
        path: /user/:id(int)
        handler:
          type_url: routa.test.v1.Format
          config: {template: "User {id}"}

Parsing only checks shapes and types. Patterns are compiled (and may
raise InvalidRouteSegment) when the registry loads the table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from pathlib import Path

# ═══════════════════════════════════════════════════════════════════════════════
# Config types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class TypedConfig:
    """Reference to a registered handler factory with its configuration.

    - type_url identifies the factory in the HandlerRegistry
    - config carries the factory-specific payload
    """

    type_url: str
    config: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """One route: method + pattern + handler reference."""

    method: str
    path: str
    handler: TypedConfig


@dataclass(frozen=True, slots=True)
class RouteTableConfig:
    """Ordered routes. Order is preserved into the loaded table."""

    routes: tuple[RouteConfig, ...]


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict -> config types)
# ═══════════════════════════════════════════════════════════════════════════════


class ConfigParseError(Exception):
    """Error parsing a config dict into config types."""


def parse_route_table_config(data: dict[str, Any]) -> RouteTableConfig:
    """Parse a dict into a RouteTableConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_routes = data.get("routes")
    if raw_routes is None:
        msg = "missing required field 'routes'"
        raise ConfigParseError(msg)
    if not isinstance(raw_routes, list):
        msg = f"'routes' must be a list, got {type(raw_routes).__name__}"
        raise ConfigParseError(msg)

    return RouteTableConfig(routes=tuple(_parse_route(r) for r in raw_routes))


def read_route_table_config(path: Path) -> RouteTableConfig:
    """Read a YAML file and parse it into a RouteTableConfig.

    Raises:
        ConfigParseError: If the file is not valid YAML or is malformed.
        OSError: If the file cannot be read.
    """
    with path.open(encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            msg = f"{path}: invalid YAML: {e}"
            raise ConfigParseError(msg) from e
    return parse_route_table_config(data)


def _parse_route(data: dict[str, Any]) -> RouteConfig:
    if not isinstance(data, dict):
        msg = f"route must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    for name in ("method", "path", "handler"):
        if name not in data:
            msg = f"route missing required field {name!r}"
            raise ConfigParseError(msg)

    method = data["method"]
    path = data["path"]
    if not isinstance(method, str):
        msg = f"'method' must be a string, got {type(method).__name__}"
        raise ConfigParseError(msg)
    if not isinstance(path, str):
        msg = f"'path' must be a string, got {type(path).__name__}"
        raise ConfigParseError(msg)

    return RouteConfig(method=method, path=path, handler=_parse_typed_config(data["handler"]))


def _parse_typed_config(data: dict[str, Any]) -> TypedConfig:
    """Parse a typed config dict."""
    if not isinstance(data, dict):
        msg = f"handler must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    if "type_url" not in data:
        msg = "handler missing required field 'type_url'"
        raise ConfigParseError(msg)

    type_url = data["type_url"]
    if not isinstance(type_url, str):
        msg = f"type_url must be a string, got {type(type_url).__name__}"
        raise ConfigParseError(msg)

    config = data.get("config", {})
    if not isinstance(config, dict):
        msg = f"config must be a dict, got {type(config).__name__}"
        raise ConfigParseError(msg)

    return TypedConfig(type_url=type_url, config=config)
