"""Typed pad model produced by footprint import."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .common import Position, Size


class PadShape(str, Enum):
    """Pad shape keywords used in footprint files."""

    RECT = "rect"
    CIRCLE = "circle"
    OVAL = "oval"
    ROUNDRECT = "roundrect"
    TRAPEZOID = "trapezoid"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Pad:
    """A surface-mount pad on the top copper layer.

    ``roundness`` is in percent (0-100) for rect, circle and oval pads, but
    is the raw ``roundrect_rratio`` fraction (usually 0.0-1.0) for roundrect
    pads. The two scales are intentionally not reconciled.
    """

    name: str
    mount_type: str  # "smd"; other mount types are filtered out
    shape: PadShape
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    width: float = 0.0
    height: float = 0.0
    roundness: float = 0.0

    @property
    def position(self) -> Position:
        return Position(self.x, self.y, self.rotation)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "mount_type": self.mount_type,
            "shape": self.shape.value,
            "x": self.x,
            "y": self.y,
            "rotation": self.rotation,
            "width": self.width,
            "height": self.height,
            "roundness": self.roundness,
        }
