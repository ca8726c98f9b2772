"""Pydantic models for records exchanged with the generation endpoint."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenerateRequest(BaseModel):
    """Request body accepted by the ``/api/generate`` endpoint."""

    model: str
    prompt: str


class ResponseChunk(BaseModel):
    """One newline-delimited record of a streamed generation response."""

    response: str
    done: bool


class StructuredInsight(BaseModel):
    """A single fact about a concept, as re-expressed by the model.

    Every field is optional. Keys the model invents are ignored, and a value
    that is not a string is dropped to ``None`` so that one bad field does not
    discard the rest of the record.
    """
    model_config = ConfigDict(extra="ignore")

    topic: Optional[str] = Field(default=None, description="Broader field the concept belongs to")
    concept: Optional[str] = Field(default=None, description="Name of the concept")
    definition: Optional[str] = Field(default=None, description="Short definition of the concept")
    example: Optional[str] = Field(default=None, description="One example of the concept")
    subtopic: Optional[str] = Field(default=None, description="Topic worth expanding from the root")

    @field_validator("topic", "concept", "definition", "example", "subtopic", mode="before")
    @classmethod
    def drop_non_strings(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) else None


__all__ = ["GenerateRequest", "ResponseChunk", "StructuredInsight"]
