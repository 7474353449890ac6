"""Footprint tools: import pads and inspect the parsed tree."""

from __future__ import annotations

from typing import Any

from ..config import get_settings
from ..exceptions import PadImportError
from ..importer import KicadModImporter
from ..logging_config import create_logger
from ..security import PathValidator
from ..sexp import Document
from .registry import register_tool

logger = create_logger(__name__)

MAX_INSPECT_NODES = 50


def _validator() -> PathValidator:
    return PathValidator(allowed_extensions=get_settings().extensions)


def _import_footprint_pads_handler(footprint_path: str) -> dict[str, Any]:
    """Import the SMD top-copper pads of a KiCad footprint file.

    Args:
        footprint_path: Path to a .kicad_mod file.
    """
    try:
        path = _validator().validate_input(footprint_path)
        importer = KicadModImporter(path)
        pads = importer.load()
    except PadImportError as e:
        return e.to_dict()

    return {
        "status": "ok",
        "message": f"Imported {len(pads)} pads from {path.name}",
        "count": len(pads),
        "pads": [pad.to_dict() for pad in pads],
        "warnings": importer.warnings,
    }


def _inspect_footprint_handler(footprint_path: str, tag: str = "pad") -> dict[str, Any]:
    """List the nodes with a given tag in a footprint file.

    Args:
        footprint_path: Path to a .kicad_mod file.
        tag: Node name to search for. Default: 'pad'.
    """
    settings = get_settings()
    try:
        path = _validator().validate_input(footprint_path)
        doc = Document.load(path, encoding=settings.encoding, max_depth=settings.max_depth)
    except PadImportError as e:
        return e.to_dict()

    nodes = doc.root.find_all(tag)
    shown = nodes[:MAX_INSPECT_NODES]
    return {
        "root": doc.root.name,
        "tag": tag,
        "count": len(nodes),
        "returned": len(shown),
        "nodes": [node.to_string() for node in shown],
    }


register_tool(
    name="import_footprint_pads",
    description=(
        "Import the SMD pads on the top copper layer of a KiCad footprint (.kicad_mod) "
        "as name, position, rotation, size and roundness records."
    ),
    handler=_import_footprint_pads_handler,
)

register_tool(
    name="inspect_footprint",
    description="List the S-expression nodes with a given tag in a KiCad footprint file.",
    handler=_inspect_footprint_handler,
)
