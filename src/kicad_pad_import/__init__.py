"""Import the SMD pads of KiCad footprint files (.kicad_mod)."""

from .config import ImportSettings, get_settings
from .exceptions import (
    FootprintLoadError,
    FootprintParseError,
    InvalidFieldValue,
    MalformedNode,
    NestingLimitExceeded,
    NoPadsFound,
    PadImportError,
    UnexpectedEndOfInput,
    UnsupportedShape,
)
from .importer import KicadModImporter, import_pads
from .schema import Pad, PadShape

__version__ = "0.1.0"

__all__ = [
    "FootprintLoadError",
    "FootprintParseError",
    "ImportSettings",
    "InvalidFieldValue",
    "KicadModImporter",
    "MalformedNode",
    "NestingLimitExceeded",
    "NoPadsFound",
    "Pad",
    "PadImportError",
    "PadShape",
    "UnexpectedEndOfInput",
    "UnsupportedShape",
    "get_settings",
    "import_pads",
]
