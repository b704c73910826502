"""
Template models — documents loaded from the bundled template repository.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TemplateDocument(BaseModel):
    """One bundled template file, loaded eagerly.

    Attributes:
        file_name: File name relative to the language directory (``*.md``).
        content:   Full text payload, copied verbatim into the output tree.
        language:  Language code the document was loaded under.
    """

    model_config = ConfigDict(frozen=True)

    file_name: str
    content: str
    language: str


class TemplateLoadResult(BaseModel):
    """Outcome of loading every template for one language.

    A failed load never carries a partial template set.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    templates: list[TemplateDocument] = Field(default_factory=list)
    error: str | None = None

    @model_validator(mode="after")
    def _check_outcome(self) -> TemplateLoadResult:
        if not self.success and (self.templates or not self.error):
            raise ValueError("a failed load has an error and no templates")
        if self.success and self.error:
            raise ValueError("a successful load carries no error")
        return self

    @classmethod
    def loaded(cls, templates: list[TemplateDocument]) -> TemplateLoadResult:
        return cls(success=True, templates=templates)

    @classmethod
    def failed(cls, error: str) -> TemplateLoadResult:
        return cls(success=False, error=error)
