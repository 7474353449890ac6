"""Global constants for the KiCad pad importer."""

PAD_TAG = "pad"
"""Tag of the footprint nodes that describe a single pad."""

SMD_MOUNT_TYPE = "smd"
"""Mount type of the pads that get imported."""

TOP_COPPER_LAYER = "F.Cu"
"""Exact layer name for the front copper layer."""

COPPER_WILDCARD = "*.Cu"
"""Layer pattern that puts a pad on every copper layer, matched as a substring."""

FOOTPRINT_EXTENSIONS = frozenset({".kicad_mod"})
"""File extensions accepted by the file-path entry points."""

DEFAULT_ENCODING = "utf-8"

MAX_DEPTH_DEFAULT = 512
"""Default maximum list nesting depth before parsing is aborted."""
