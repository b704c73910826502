"""
Result models — what the materialization steps report back.

Every filesystem step returns one of these instead of raising, so a
failure for one file or one language never unwinds past its siblings.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DirectoryResult(BaseModel):
    """Outcome of ensuring a single directory exists.

    ``created`` is False both when the directory was already there and
    when creation failed; ``error`` tells the two apart.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    created: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DirectoryStructure(BaseModel):
    """The on-disk layout targeted by one run.

    Attributes:
        base_dir:      Output directory.
        language_dirs: ``<base_dir>/<language>`` for every requested language,
                       whether or not its creation succeeded.
        errors:        Language code → failure message for directories that
                       could not be created.
        base_error:    Failure message for the base directory itself.
    """

    model_config = ConfigDict(frozen=True)

    base_dir: str
    language_dirs: list[str] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)
    base_error: str | None = None

    def failed(self, language: str) -> bool:
        """Whether *language*'s directory could not be created."""
        return language in self.errors


class FileCreationResult(BaseModel):
    """Outcome of materializing one file (or of one language-level step).

    Invariants:
        skipped       → success and no error
        not success   → not skipped and an error message
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    path: str
    skipped: bool = False
    error: str | None = None
    language: str | None = None

    @model_validator(mode="after")
    def _check_invariants(self) -> FileCreationResult:
        if self.skipped and (not self.success or self.error is not None):
            raise ValueError("a skipped file is a success without an error")
        if not self.success and (self.skipped or not self.error):
            raise ValueError("a failure carries an error and is never skipped")
        if self.success and self.error is not None:
            raise ValueError("a success carries no error")
        return self

    @property
    def status(self) -> Literal["created", "skipped", "failed"]:
        if not self.success:
            return "failed"
        return "skipped" if self.skipped else "created"

    @classmethod
    def created(cls, path: str, language: str | None = None) -> FileCreationResult:
        return cls(success=True, path=path, language=language)

    @classmethod
    def skipped_existing(cls, path: str, language: str | None = None) -> FileCreationResult:
        return cls(success=True, path=path, skipped=True, language=language)

    @classmethod
    def failed(cls, path: str, error: str, language: str | None = None) -> FileCreationResult:
        return cls(success=False, path=path, error=error, language=language)
