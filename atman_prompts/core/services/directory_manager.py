"""
Directory manager — creates the output tree ``<base>/<language>/``.

Creation is idempotent: an existing directory is success.  Failures are
returned, never raised, so one bad language directory does not stop the
others.
"""

from __future__ import annotations

import logging
from pathlib import Path

from atman_prompts.core.models.result import DirectoryResult, DirectoryStructure

logger = logging.getLogger(__name__)


def ensure_directory(path: Path) -> DirectoryResult:
    """Create *path* and any missing parents.

    Returns:
        DirectoryResult with ``created`` True only if the directory was new,
        or ``error`` set if it could not be created (permission denied, a
        path component is a regular file, disk full, ...).
    """
    try:
        existed = path.is_dir()
        path.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as e:
        logger.warning("Cannot create directory %s: %s", path, e)
        return DirectoryResult(path=str(path), error=f"Cannot create directory {path}: {e}")

    if not existed:
        logger.debug("Created directory: %s", path)
    return DirectoryResult(path=str(path), created=not existed)


def create_structure(base_dir: Path, languages: tuple[str, ...] | list[str]) -> DirectoryStructure:
    """Ensure the base directory and one subdirectory per language.

    Every language directory is attempted even when the base failed; each
    failure is recorded under its language code.  ``language_dirs`` lists
    every targeted directory regardless of outcome.
    """
    base = ensure_directory(base_dir)

    language_dirs: list[str] = []
    errors: dict[str, str] = {}
    for language in languages:
        language_dir = base_dir / language
        language_dirs.append(str(language_dir))
        result = ensure_directory(language_dir)
        if not result.ok:
            errors[language] = result.error or f"Cannot create directory {language_dir}"

    return DirectoryStructure(
        base_dir=str(base_dir),
        language_dirs=language_dirs,
        errors=errors,
        base_error=base.error,
    )
