"""Path validation for footprint files requested through the tool surface.

Rejects null bytes, ``..`` traversal, files outside the trusted roots and
files without a footprint extension.
"""

from __future__ import annotations

from pathlib import Path

from .constants import FOOTPRINT_EXTENSIONS
from .exceptions import SecurityError


class PathValidator:
    """Validates footprint paths against trusted roots and an extension whitelist.

    Usage::

        validator = PathValidator(trusted_roots=[Path("/home/me/footprints")])
        validator.validate_input("/home/me/footprints/R_0603.kicad_mod")  # OK
        validator.validate_input("../../etc/passwd")  # raises SecurityError
    """

    def __init__(
        self,
        trusted_roots: list[Path] | None = None,
        allowed_extensions: frozenset[str] | None = None,
    ) -> None:
        self.trusted_roots = trusted_roots or []
        self.allowed_extensions = allowed_extensions or FOOTPRINT_EXTENSIONS

    def validate_input(self, path: str | Path) -> Path:
        """Validate an input footprint path (must exist).

        Returns:
            The resolved, validated Path.

        Raises:
            SecurityError: If the path fails validation.
        """
        path_str = str(path)
        if "\x00" in path_str:
            raise SecurityError("Path contains null bytes")
        if ".." in Path(path_str).parts:
            raise SecurityError(f"Path contains traversal: {path_str}")

        try:
            resolved = Path(path_str).expanduser().resolve(strict=False)
        except (OSError, ValueError) as e:
            raise SecurityError(f"Invalid path: {path_str} ({e})") from e

        self._check_trusted_root(resolved)
        self._check_extension(resolved)

        if not resolved.is_file():
            raise SecurityError(f"File does not exist: {resolved}")
        return resolved

    def _check_trusted_root(self, resolved: Path) -> None:
        if not self.trusted_roots:
            return  # No restrictions

        for root in self.trusted_roots:
            try:
                resolved.relative_to(root.resolve())
            except ValueError:
                continue
            return

        roots = [str(r) for r in self.trusted_roots]
        raise SecurityError(f"Path {resolved} is not under any trusted root: {roots}")

    def _check_extension(self, path: Path) -> None:
        name = path.name
        for ext in self.allowed_extensions:
            if name.endswith(ext):
                return
        raise SecurityError(f"Extension not allowed: {path.suffix!r} (file: {path.name})")
