"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from atman_prompts.core.config.loader import PromptsConfig


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """A template storage root with ``{en: [a.md, b.md], ja: [a.md]}``."""
    root = tmp_path / "templates"
    (root / "en").mkdir(parents=True)
    (root / "ja").mkdir()
    (root / "en" / "a.md").write_text("# en a\n", encoding="utf-8")
    (root / "en" / "b.md").write_text("# en b\n", encoding="utf-8")
    (root / "ja" / "a.md").write_text("# ja a\n", encoding="utf-8")
    return root


@pytest.fixture
def config(templates_root: Path) -> PromptsConfig:
    """PromptsConfig pointing at the fixture template root."""
    return PromptsConfig(templates_root=templates_root)


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """An output directory that does not exist yet."""
    return tmp_path / "out" / ".prompts"


