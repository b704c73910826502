"""
Template repository — discovers and loads bundled prompt templates.

Templates live in ``<root>/<language>/*.md``.  The root defaults to the
package's own data directory, so loading works from any working directory.

Discovery never fails: a missing or unreadable language directory is an
empty list.  Loading reports "nothing found" and read failures as a failed
``TemplateLoadResult`` instead of raising.
"""

from __future__ import annotations

import logging
from pathlib import Path

from atman_prompts.core.data import TEMPLATES_DIR
from atman_prompts.core.models.template import TemplateDocument, TemplateLoadResult

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".md"


class TemplateReadError(Exception):
    """Raised when a discovered template file cannot be read as text."""


def get_templates_root() -> Path:
    """Return the absolute path of the bundled templates directory."""
    return TEMPLATES_DIR.resolve()


def _is_template(entry: Path) -> bool:
    return (
        entry.suffix == TEMPLATE_SUFFIX
        and not entry.name.startswith(".")
        and entry.is_file()
    )


def discover_template_files(language: str, root: Path | None = None) -> list[str]:
    """List template file names for *language*, sorted by name.

    Subdirectories, dotfiles and other extensions are ignored.

    Returns:
        File names, or an empty list if the directory is missing or unreadable.
    """
    language_dir = (root or get_templates_root()) / language

    try:
        names = sorted(entry.name for entry in language_dir.iterdir() if _is_template(entry))
    except (OSError, ValueError) as e:
        logger.debug("No templates discovered in %s: %s", language_dir, e)
        return []

    logger.debug("Discovered %d template(s) in %s", len(names), language_dir)
    return names


def read_template_file(file_name: str, language: str, root: Path | None = None) -> str:
    """Read one template verbatim.

    Raises:
        TemplateReadError: If the file is gone or is not valid UTF-8 text.
    """
    path = (root or get_templates_root()) / language / file_name
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, ValueError) as e:
        raise TemplateReadError(
            f"Failed to read template file {file_name} for language {language}: {e}"
        ) from e


def load_templates(language: str, root: Path | None = None) -> TemplateLoadResult:
    """Load every template for *language*.

    A single unreadable file fails the whole language; no partial set is
    returned.
    """
    file_names = discover_template_files(language, root)
    if not file_names:
        return TemplateLoadResult.failed(f"No template files found for language: {language}")

    templates: list[TemplateDocument] = []
    for file_name in file_names:
        try:
            content = read_template_file(file_name, language, root)
        except TemplateReadError as e:
            logger.warning("%s", e)
            return TemplateLoadResult.failed(str(e))
        templates.append(TemplateDocument(file_name=file_name, content=content, language=language))

    return TemplateLoadResult.loaded(templates)


def available_languages(root: Path | None = None) -> list[str]:
    """Language codes that have at least one template, sorted."""
    base = root or get_templates_root()
    if not base.is_dir():
        logger.debug("Templates root not found: %s", base)
        return []

    return [
        child.name
        for child in sorted(base.iterdir())
        if child.is_dir() and not child.name.startswith(".")
        and discover_template_files(child.name, base)
    ]
