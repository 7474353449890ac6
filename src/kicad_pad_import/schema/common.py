"""Geometry value types shared by the pad models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """2D position in footprint coordinates, with rotation in degrees."""

    x: float
    y: float
    angle: float = 0.0


@dataclass(frozen=True)
class Size:
    """Width/height dimensions."""

    width: float
    height: float
