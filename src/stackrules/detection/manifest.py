"""package.json loading and dependency-table merging."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from stackrules.schemas.manifest import PackageManifest

logger = logging.getLogger(__name__)


class ManifestNotFoundError(FileNotFoundError):
    """Raised when the project has no package.json."""


class ManifestError(ValueError):
    """Raised when package.json exists but is not a valid manifest."""


def read_manifest(path: str | Path) -> PackageManifest:
    """Load and validate a package.json file.

    Raises ``ManifestNotFoundError`` if the path doesn't exist and
    ``ManifestError`` (with the parser's message) if the content is not
    UTF-8 text holding a JSON object of the expected shape.
    """
    path = Path(path)
    if not path.is_file():
        raise ManifestNotFoundError(f"Manifest not found: {path}")

    try:
        manifest = PackageManifest.model_validate_json(path.read_text(encoding="utf-8"))
    except (ValidationError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Invalid manifest {path}: {exc}") from exc

    logger.debug(
        "Loaded %s: %d dependencies, %d devDependencies, %d scripts",
        path,
        len(manifest.dependencies),
        len(manifest.devDependencies),
        len(manifest.scripts),
    )
    return manifest


def merge_dependencies(
    dependencies: Mapping[str, str] | None,
    dev_dependencies: Mapping[str, str] | None,
) -> dict[str, str]:
    """Union both tables into a new one; devDependencies win on collision."""
    return {**(dependencies or {}), **(dev_dependencies or {})}
