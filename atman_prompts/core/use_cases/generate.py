"""
Generate use case — materialize bundled prompt templates into a project.

For each requested language: ensure ``<output_dir>/<language>/`` exists,
load that language's templates, and write each one only if absent.  Every
outcome, including language-level failures, lands in one flat report.
Nothing here aborts the run: a failed language or file is recorded and the
next one is attempted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from atman_prompts.core.config.loader import (
    DEFAULT_CONFIG,
    GenerateOptions,
    PromptsConfig,
    language_code_error,
)
from atman_prompts.core.models.result import DirectoryStructure, FileCreationResult
from atman_prompts.core.services.directory_manager import create_structure
from atman_prompts.core.services.file_writer import write_if_absent
from atman_prompts.core.services.template_repository import load_templates

logger = logging.getLogger(__name__)


@dataclass
class GenerationReport:
    """Ordered outcomes of one generation run."""

    output_dir: Path
    languages: list[str] = field(default_factory=list)
    structure: DirectoryStructure | None = None
    results: list[FileCreationResult] = field(default_factory=list)

    @property
    def created(self) -> list[FileCreationResult]:
        return [r for r in self.results if r.status == "created"]

    @property
    def skipped(self) -> list[FileCreationResult]:
        return [r for r in self.results if r.status == "skipped"]

    @property
    def failed(self) -> list[FileCreationResult]:
        return [r for r in self.results if r.status == "failed"]

    @property
    def ok(self) -> bool:
        """True when no entry failed. Skips are not failures."""
        return all(r.success for r in self.results)

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "output_dir": str(self.output_dir),
            "languages": self.languages,
            "counts": {
                "total": len(self.results),
                "created": len(self.created),
                "skipped": len(self.skipped),
                "failed": len(self.failed),
            },
            "results": [r.model_dump() for r in self.results],
        }


def _generate_language(
    language: str,
    output_dir: Path,
    templates_root: Path,
    progress,
) -> list[FileCreationResult]:
    """Load and write every template for one language."""
    language_dir = output_dir / language

    progress("Loading templates for language: %s", language)
    loaded = load_templates(language, templates_root)
    if not loaded.success:
        message = f"Failed to load templates for {language}: {loaded.error}"
        logger.warning("%s", message)
        return [FileCreationResult.failed(str(language_dir), message, language)]

    progress("Found %d templates for %s", len(loaded.templates), language)

    results: list[FileCreationResult] = []
    for template in loaded.templates:
        result = write_if_absent(language_dir / template.file_name, template.content, language)
        if result.status == "created":
            progress("Created file: %s", result.path)
        elif result.status == "skipped":
            progress("Skipped existing file: %s", result.path)
        results.append(result)
    return results


def generate(
    output_dir: Path | str,
    languages: list[str] | tuple[str, ...] | None = None,
    verbose: bool = False,
    *,
    config: PromptsConfig = DEFAULT_CONFIG,
) -> GenerationReport:
    """Create the prompt tree and report every per-file outcome.

    Args:
        output_dir: Base directory of the generated tree.
        languages:  Language codes in order. None uses ``config`` defaults.
        verbose:    Report progress at INFO instead of DEBUG.
        config:     Defaults and the template storage root.

    Returns:
        GenerationReport — check ``ok`` / ``exit_code`` for overall status.
    """
    output_dir = Path(output_dir)
    if languages is None:
        languages = config.supported_languages
    # Ordered set: a repeated code would see its own files as pre-existing
    languages = list(dict.fromkeys(str(code) for code in languages))
    rejected: dict[str, str] = {}
    for code in languages:
        error = language_code_error(code)
        if error:
            rejected[code] = error
    progress = logger.info if verbose else logger.debug

    report = GenerationReport(output_dir=output_dir, languages=languages)

    # ── Prepare directories ─────────────────────────────────────
    structure = create_structure(output_dir, [c for c in languages if c not in rejected])
    report.structure = structure
    progress("Prepared directory structure: %s", structure.base_dir)

    # ── Per language ────────────────────────────────────────────
    for language in languages:
        if language in rejected:
            logger.warning("Rejected language code: %s", rejected[language])
            report.results.append(
                FileCreationResult.failed(str(output_dir), rejected[language], language)
            )
            continue

        if structure.failed(language):
            report.results.append(
                FileCreationResult.failed(
                    str(output_dir / language), structure.errors[language], language,
                )
            )
            continue

        try:
            report.results.extend(
                _generate_language(language, output_dir, config.templates_root, progress)
            )
        except (OSError, ValueError) as e:
            logger.warning("Error processing %s: %s", language, e)
            report.results.append(
                FileCreationResult.failed(
                    str(output_dir / language), f"Error processing {language}: {e}", language,
                )
            )

    logger.info(
        "Generation finished: %d created, %d skipped, %d failed",
        len(report.created), len(report.skipped), len(report.failed),
    )
    return report


def generate_from_options(
    options: GenerateOptions,
    config: PromptsConfig = DEFAULT_CONFIG,
) -> GenerationReport:
    """Run :func:`generate` with already-resolved CLI/config options."""
    return generate(options.output_dir, options.languages, options.verbose, config=config)
