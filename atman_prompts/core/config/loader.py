"""
Configuration loader — built-in defaults plus an optional prompts.yml.

The orchestrator never reads ambient state: it receives a resolved
``GenerateOptions`` and an immutable ``PromptsConfig``.  This module
builds both.

Values are resolved in precedence order:
    CLI flag  >  prompts.yml  >  PromptsConfig defaults
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from atman_prompts.core.data import TEMPLATES_DIR

logger = logging.getLogger(__name__)

# Default config filenames, searched in order
PROMPTS_CONFIG_FILES = ("prompts.yml", "prompts.yaml")

_ALLOWED_KEYS = frozenset({"output_dir", "languages"})
_SEPARATORS = ("/", "\\")


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


class PromptsConfig(BaseModel):
    """Process-wide defaults, passed explicitly instead of read from globals.

    Attributes:
        base_directory:      Output directory used when nothing else is given.
        supported_languages: Languages generated when none are requested.
        templates_root:      Bundled template storage (``<root>/<lang>/*.md``).
    """

    model_config = ConfigDict(frozen=True)

    base_directory: str = ".prompts"
    supported_languages: tuple[str, ...] = ("en", "ja")
    templates_root: Path = TEMPLATES_DIR


DEFAULT_CONFIG = PromptsConfig()


def language_code_error(code: str) -> str | None:
    """Why *code* cannot name a directory under the output and template roots.

    Returns None for a usable code.  A code must be a single path segment:
    not empty, not ``.``/``..``, no separators, no NUL bytes.
    """
    if not code:
        return "language codes must be non-empty"
    if "\x00" in code:
        return f"language code {code!r} contains a NUL byte"
    if code in (".", "..") or any(sep in code for sep in _SEPARATORS) or Path(code).is_absolute():
        return f"language code {code!r} must be a single directory name"
    return None


def _ordered_codes(values: list[str] | tuple[str, ...]) -> tuple[str, ...]:
    """Strip, validate, and drop duplicates keeping first occurrence."""
    seen: dict[str, None] = {}
    for raw in values:
        code = str(raw).strip()
        error = language_code_error(code)
        if error:
            raise ValueError(error)
        seen.setdefault(code, None)
    return tuple(seen)


class GenerateOptions(BaseModel):
    """Resolved options handed to the generation orchestrator."""

    model_config = ConfigDict(frozen=True)

    output_dir: Path
    languages: tuple[str, ...]
    verbose: bool = False

    @field_validator("languages", mode="before")
    @classmethod
    def _normalize_languages(cls, value: list[str] | tuple[str, ...]) -> tuple[str, ...]:
        if isinstance(value, str):
            value = [value]
        return _ordered_codes(value)


def split_language_args(values: tuple[str, ...] | list[str]) -> list[str]:
    """Flatten ``-l "en ja" -l fr,de`` style arguments into single codes."""
    codes: list[str] = []
    for value in values:
        codes.extend(part for part in value.replace(",", " ").split() if part)
    return codes


def find_prompts_file(start_dir: Path | None = None) -> Path | None:
    """Search for prompts.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to the config file, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        for name in PROMPTS_CONFIG_FILES:
            candidate = current / name
            if candidate.is_file():
                return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_prompts_file(path: Path) -> dict:
    """Read and validate a prompts.yml file.

    Relative ``output_dir`` values are resolved against the file's directory.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading prompts config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    unknown = set(data) - _ALLOWED_KEYS
    if unknown:
        raise ConfigError(f"Unknown keys in {path}: {', '.join(sorted(unknown))}")

    result: dict = {}
    if data.get("output_dir") is not None:
        output_dir = Path(str(data["output_dir"]))
        if not output_dir.is_absolute():
            output_dir = path.parent / output_dir
        result["output_dir"] = output_dir

    languages = data.get("languages")
    if languages is not None:
        if isinstance(languages, str):
            languages = split_language_args([languages])
        if not isinstance(languages, list):
            raise ConfigError(f"'languages' in {path} must be a list of codes")
        result["languages"] = [str(code) for code in languages]

    return result


def resolve_options(
    output_dir: str | None = None,
    languages: list[str] | None = None,
    verbose: bool = False,
    config_path: Path | None = None,
    config: PromptsConfig = DEFAULT_CONFIG,
) -> GenerateOptions:
    """Merge CLI values, prompts.yml and defaults into GenerateOptions.

    Args:
        output_dir:  Explicit output directory (CLI), or None.
        languages:   Explicit language codes (CLI), or None / empty.
        verbose:     Verbose progress reporting.
        config_path: Explicit prompts.yml. If None, searches upward from cwd.
        config:      Built-in defaults.

    Raises:
        ConfigError: If the config file or the merged values are invalid.
    """
    if config_path is None:
        config_path = find_prompts_file()
    file_values = load_prompts_file(config_path) if config_path else {}

    resolved_dir = (
        Path(output_dir)
        if output_dir
        else file_values.get("output_dir", Path(config.base_directory))
    )
    resolved_langs = languages or file_values.get("languages") or list(config.supported_languages)

    try:
        options = GenerateOptions(
            output_dir=resolved_dir,
            languages=resolved_langs,
            verbose=verbose,
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid options: {e}") from e

    logger.debug(
        "Resolved options: output_dir=%s languages=%s (config file: %s)",
        options.output_dir, list(options.languages), config_path,
    )
    return options
