"""Tool registry: one place that lists every tool the server exposes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class ToolSpec:
    """Declarative specification for a single MCP tool."""

    name: str
    description: str
    handler: Callable[..., Any]


TOOL_REGISTRY: dict[str, ToolSpec] = {}


def register_tool(
    name: str,
    description: str,
    handler: Callable[..., Any],
) -> None:
    """Register a tool in the global registry."""
    TOOL_REGISTRY[name] = ToolSpec(
        name=name,
        description=description,
        handler=handler,
    )
