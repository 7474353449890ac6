"""Footprint import tools exposed over MCP."""

# Import modules to trigger tool registration via register_tool() calls
from . import footprint  # noqa: F401
from .registry import TOOL_REGISTRY, register_tool

__all__ = [
    "TOOL_REGISTRY",
    "register_tool",
]
