"""Footprint importer: footprint file to a list of pads.

One importer instance handles one import. It is not safe to share an
instance between threads while ``load`` is running.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import IO

from .config import ImportSettings, get_settings
from .exceptions import PadImportError
from .logging_config import create_logger, import_id_ctx
from .schema import Pad, extract_pads
from .sexp import Document

logger = create_logger(__name__)


class KicadModImporter:
    """Imports the SMD top-copper pads of a KiCad footprint (.kicad_mod).

    Usage::

        importer = KicadModImporter("R_0603.kicad_mod")
        pads = importer.load()
        importer.warnings  # pads skipped because of unsupported shapes
    """

    def __init__(
        self,
        source: str | Path | IO[str] | IO[bytes],
        settings: ImportSettings | None = None,
    ) -> None:
        self.source = source
        self.settings = settings or get_settings()
        self.pads: list[Pad] = []
        self.warnings: list[str] = []

    @property
    def source_name(self) -> str:
        if isinstance(self.source, (str, Path)):
            return str(self.source)
        return str(getattr(self.source, "name", "<stream>"))

    def _read_document(self) -> Document:
        if isinstance(self.source, (str, Path)):
            return Document.load(
                self.source,
                encoding=self.settings.encoding,
                max_depth=self.settings.max_depth,
            )
        return Document.from_stream(
            self.source,
            encoding=self.settings.encoding,
            max_depth=self.settings.max_depth,
        )

    def load(self) -> list[Pad]:
        """Read, parse and extract the pads.

        Returns:
            The imported pads in document order. May be empty if the file has
            pads but none of them is an SMD pad on the top copper layer.

        Raises:
            FootprintLoadError: If the source cannot be read.
            FootprintParseError: If the source is not a well-formed footprint.
            NoPadsFound: If the footprint has no pad nodes at all.
            InvalidFieldValue: If a pad field is not a number.
        """
        self.pads = []
        self.warnings = []
        token = import_id_ctx.set(uuid.uuid4().hex[:8])
        try:
            logger.debug(f"Opening footprint {self.source_name}")
            try:
                doc = self._read_document()
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(f"Parsed footprint:\n{doc.root.to_string()}")
                pads = extract_pads(doc.root, self.settings, self.warnings)
            except PadImportError as e:
                logger.error(f"Failed to import {self.source_name}: {e.message}")
                raise
            self.pads = pads
            logger.info(
                f"Imported {len(pads)} pads from {self.source_name} "
                f"({len(self.warnings)} skipped)"
            )
            return pads
        finally:
            import_id_ctx.reset(token)


def import_pads(
    source: str | Path | IO[str] | IO[bytes],
    settings: ImportSettings | None = None,
) -> list[Pad]:
    """Import the pads of a footprint file or stream. See :class:`KicadModImporter`."""
    return KicadModImporter(source, settings).load()
