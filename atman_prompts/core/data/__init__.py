"""
Bundled data shipped with the package.

Template documents live in ``templates/<language>/*.md`` and are resolved
relative to this file, so lookups work from any working directory.
"""

from __future__ import annotations

from pathlib import Path

DATA_DIR = Path(__file__).parent
TEMPLATES_DIR = DATA_DIR / "templates"
