"""Document input model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """A text document supplied by the note store (read-only to the graph core)."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "projects/klarity.md",
                "title": "Project",
                "content": "See [[Implementation]] and [[Roadmap|the roadmap]].",
                "is_pinned": False,
            }
        },
    )

    id: str = Field(..., min_length=1, description="Stable document identifier")
    title: str = Field(default="", description="Title used to resolve wiki-links")
    content: str = Field(default="", description="Raw document text")
    is_pinned: bool = Field(default=False, description="Pinned flag forwarded to the renderer")


__all__ = ["Document"]
