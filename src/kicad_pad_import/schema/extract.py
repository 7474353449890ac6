"""Extract typed pads from a parsed footprint tree.

A pad node looks like this::

    (pad "1" smd roundrect
        (at -1.4625 0)
        (size 1.125 1.75)
        (layers "F.Cu" "F.Paste" "F.Mask")
        (roundrect_rratio 0.222222)
        (uuid "dbad0287-b397-45bd-8a16-43e87bdf7c5c"))

Only SMD pads on the top copper layer are imported. Field lookup is lenient:
a missing sub-node or value reads as 0.0, since footprint files from
different KiCad versions carry different subsets of fields.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from ..config import ImportSettings, get_settings
from ..exceptions import InvalidFieldValue, NoPadsFound, UnsupportedShape
from ..logging_config import create_logger
from ..sexp import TreeNode
from .pad import Pad, PadShape

logger = create_logger(__name__)

# Roundness in percent for shapes with a fixed corner style.
_FIXED_ROUNDNESS: dict[PadShape, float] = {
    PadShape.RECT: 0.0,
    PadShape.CIRCLE: 100.0,
    PadShape.OVAL: 100.0,
}


def _float(val: str | None, field: str) -> float:
    """Parse a finite decimal number; digit separators, nan and inf are rejected."""
    if val is None:
        return 0.0
    try:
        if "_" in val:
            raise ValueError(val)
        number = float(val)
    except ValueError as e:
        raise InvalidFieldValue(
            f"Field {field} is not a number: {val!r}", field=field, value=val
        ) from e
    if not math.isfinite(number):
        raise InvalidFieldValue(
            f"Field {field} is not a finite number: {val!r}", field=field, value=val
        )
    return number


def _field(node: TreeNode, tag: str, index: int) -> float:
    """Read item ``index`` of the first ``tag`` node under ``node``, 0.0 if absent."""
    sub = node.find_first(tag)
    if sub is None:
        return 0.0
    return _float(sub.get_item(index), f"{tag}[{index}]")


def shape_roundness(shape: str, rratio: float = 0.0) -> tuple[PadShape, float]:
    """Map a shape keyword to its PadShape and roundness.

    rect is 0 and circle/oval are 100, both in percent. roundrect returns
    ``rratio`` unchanged, so its roundness is a fraction, not a percentage.

    Raises:
        UnsupportedShape: For trapezoid, custom and unknown keywords.
    """
    try:
        pad_shape = PadShape(shape)
    except ValueError:
        raise UnsupportedShape(f"Unsupported pad shape: {shape!r}", shape=shape) from None

    if pad_shape is PadShape.ROUNDRECT:
        return pad_shape, rratio
    if pad_shape in _FIXED_ROUNDNESS:
        return pad_shape, _FIXED_ROUNDNESS[pad_shape]
    raise UnsupportedShape(f"Unsupported pad shape: {shape!r}", shape=shape)


def is_top_copper(
    layers: Iterable[str],
    top_layer: str = "F.Cu",
    wildcard: str = "*.Cu",
) -> bool:
    """Check whether a layer list puts the pad on the top copper layer.

    A layer matches if it equals ``top_layer`` or contains ``wildcard`` as a
    plain substring. No glob evaluation is done.
    """
    return any(layer == top_layer or wildcard in layer for layer in layers)


def extract_pad(node: TreeNode, settings: ImportSettings | None = None) -> Pad | None:
    """Extract a Pad from a (pad ...) node.

    Returns None if the pad is not an SMD pad on the top copper layer.

    The shape is checked before any numeric field is read, so a trapezoid or
    custom pad with a bad number is skipped as unsupported instead of failing
    the whole import. Older importers read the fields first and aborted.

    Raises:
        UnsupportedShape: If the pad passes the filter but has no roundness mapping.
        InvalidFieldValue: If a numeric field is not a finite number.
    """
    settings = settings or get_settings()
    name = node.get_item(0) or ""
    mount_type = node.get_item(1) or ""
    shape = node.get_item(2) or ""

    layers_node = node.find_first("layers")
    layers = layers_node.items if layers_node is not None else ()

    if mount_type != settings.mount_type or not is_top_copper(
        layers, settings.top_copper_layer, settings.copper_wildcard
    ):
        logger.debug(f"Skipping pad {name!r}: type={mount_type!r} layers={list(layers)}")
        return None

    try:
        rratio = _field(node, "roundrect_rratio", 0) if shape == PadShape.ROUNDRECT.value else 0.0
        pad_shape, roundness = shape_roundness(shape, rratio)
    except UnsupportedShape as e:
        e.pad_name = name
        raise

    return Pad(
        name=name,
        mount_type=mount_type,
        shape=pad_shape,
        x=_field(node, "at", 0),
        y=_field(node, "at", 1),
        rotation=_field(node, "at", 2),
        width=_field(node, "size", 0),
        height=_field(node, "size", 1),
        roundness=roundness,
    )


def extract_pads(
    root: TreeNode,
    settings: ImportSettings | None = None,
    warnings: list[str] | None = None,
) -> list[Pad]:
    """Extract all importable pads from a footprint tree, in document order.

    Pads with an unsupported shape are skipped; a message for each is logged
    and appended to ``warnings`` if given.

    Raises:
        NoPadsFound: If the tree contains no pad nodes at all.
        InvalidFieldValue: If a numeric field of an imported pad is not a number.
    """
    settings = settings or get_settings()
    pad_nodes = root.find_all(settings.pad_tag)
    if not pad_nodes:
        raise NoPadsFound(f"No pads found in footprint {root.name!r}")

    pads: list[Pad] = []
    for node in pad_nodes:
        try:
            pad = extract_pad(node, settings)
        except UnsupportedShape as e:
            message = f"Skipping pad {e.pad_name!r}: {e.message}"
            logger.warning(message)
            if warnings is not None:
                warnings.append(message)
            continue
        if pad is not None:
            logger.debug(f"Imported pad {pad.name!r} ({pad.shape.value})")
            pads.append(pad)
    return pads
