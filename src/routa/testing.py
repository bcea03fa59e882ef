"""Test utilities for routa.

Provides ready-made handlers for tests and examples, and a registry
hook so config fixtures can reference them by type URL.

For real applications, register your own handler factories.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from routa._registry import HandlerRegistryBuilder
    from routa._types import Params


@dataclass(frozen=True, slots=True)
class FormatHandler:
    """Render captured params into a ``str.format`` template.

    >>> from routa import RouteTable
    >>> from routa.testing import FormatHandler
    >>> table = RouteTable()
    >>> table.register("GET", "/user/:id(int)", FormatHandler("User {id}"))
    >>> table.dispatch("GET", "/user/42")
    'User 42'
    """

    template: str

    def __call__(self, params: Params) -> str:
        return self.template.format(**params)


@dataclass(slots=True)
class RecordingHandler:
    """Record every params mapping it is called with, return a fixed result."""

    result: Any = None
    calls: list[Params] = field(default_factory=list)

    def __call__(self, params: Params) -> Any:
        self.calls.append(params)
        return self.result


def register(builder: HandlerRegistryBuilder[str]) -> HandlerRegistryBuilder[str]:
    """Register the test-domain FormatHandler.

    Type URL: routa.test.v1.Format
    Config field: { "template": "User {id}" }
    """
    return builder.handler("routa.test.v1.Format", _format_factory)


def _format_factory(config: dict[str, Any]) -> FormatHandler:
    template = config.get("template")
    if not isinstance(template, str):
        msg = "FormatHandler requires a 'template' field (string)"
        raise ValueError(msg)
    return FormatHandler(template=template)
