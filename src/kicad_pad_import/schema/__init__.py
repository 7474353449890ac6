"""Typed pad models and extraction from footprint trees."""

from .common import Position, Size
from .extract import extract_pad, extract_pads, is_top_copper, shape_roundness
from .pad import Pad, PadShape

__all__ = [
    "Pad",
    "PadShape",
    "Position",
    "Size",
    "extract_pad",
    "extract_pads",
    "is_top_copper",
    "shape_roundness",
]
