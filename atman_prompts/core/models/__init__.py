"""
Domain models — Pydantic types for prompt generation.

All models are re-exported here for convenient access:

    from atman_prompts.core.models import TemplateDocument, FileCreationResult
"""

from atman_prompts.core.models.result import (
    DirectoryResult,
    DirectoryStructure,
    FileCreationResult,
)
from atman_prompts.core.models.template import TemplateDocument, TemplateLoadResult

__all__ = [
    # result.py
    "DirectoryResult",
    "DirectoryStructure",
    "FileCreationResult",
    # template.py
    "TemplateDocument",
    "TemplateLoadResult",
]
