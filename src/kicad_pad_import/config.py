"""Importer settings with environment overrides."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, field

from .constants import (
    COPPER_WILDCARD,
    DEFAULT_ENCODING,
    FOOTPRINT_EXTENSIONS,
    MAX_DEPTH_DEFAULT,
    PAD_TAG,
    SMD_MOUNT_TYPE,
    TOP_COPPER_LAYER,
)
from .logging_config import create_logger

logger = create_logger(__name__)


@dataclass(frozen=True)
class ImportSettings:
    """Knobs for reading footprint files and selecting pads.

    Usage::

        settings = ImportSettings.from_env()
        settings.max_depth  # 512 unless KICAD_PAD_IMPORT_MAX_DEPTH is set
    """

    encoding: str = DEFAULT_ENCODING
    max_depth: int = MAX_DEPTH_DEFAULT
    pad_tag: str = PAD_TAG
    mount_type: str = SMD_MOUNT_TYPE
    top_copper_layer: str = TOP_COPPER_LAYER
    copper_wildcard: str = COPPER_WILDCARD
    extensions: frozenset[str] = field(default_factory=lambda: FOOTPRINT_EXTENSIONS)

    @classmethod
    def from_env(cls) -> ImportSettings:
        """Build settings from ``KICAD_PAD_IMPORT_*`` environment variables."""
        encoding = os.environ.get("KICAD_PAD_IMPORT_ENCODING") or DEFAULT_ENCODING
        max_depth = MAX_DEPTH_DEFAULT
        raw_depth = os.environ.get("KICAD_PAD_IMPORT_MAX_DEPTH")
        if raw_depth:
            try:
                max_depth = int(raw_depth)
            except ValueError:
                logger.warning(f"Ignoring invalid KICAD_PAD_IMPORT_MAX_DEPTH={raw_depth!r}")
            else:
                if max_depth < 1:
                    logger.warning(f"Ignoring non-positive KICAD_PAD_IMPORT_MAX_DEPTH={raw_depth!r}")
                    max_depth = MAX_DEPTH_DEFAULT
        return cls(encoding=encoding, max_depth=max_depth)


# ── Singleton helpers ───────────────────────────────────────────────

_settings: ImportSettings | None = None
_settings_lock = threading.Lock()


def get_settings() -> ImportSettings:
    """Get the shared settings (thread-safe lazy init from the environment)."""
    global _settings
    if _settings is None:
        with _settings_lock:
            if _settings is None:
                _settings = ImportSettings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the shared settings so the next call re-reads the environment."""
    global _settings
    with _settings_lock:
        _settings = None
