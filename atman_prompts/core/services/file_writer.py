"""
File writer — materializes a file only when nothing exists at its path.

An existing file is never read, compared, or replaced; it is reported as
skipped.  The existence check and the write are not atomic: concurrent
writers to the same output tree are not supported.
"""

from __future__ import annotations

import logging
from pathlib import Path

from atman_prompts.core.models.result import FileCreationResult

logger = logging.getLogger(__name__)


def write_if_absent(path: Path, content: str, language: str | None = None) -> FileCreationResult:
    """Write *content* to *path* unless the path already exists.

    Never raises for I/O problems: permission errors, a missing parent
    directory, or a full disk come back as a failed result.
    """
    target = str(path)
    try:
        if path.exists():
            return FileCreationResult.skipped_existing(target, language)

        path.write_text(content, encoding="utf-8", newline="")
    except (OSError, ValueError) as e:
        logger.warning("Failed to create %s: %s", path, e)
        return FileCreationResult.failed(target, str(e) or type(e).__name__, language)

    return FileCreationResult.created(target, language)
