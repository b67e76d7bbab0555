"""Request/response models for the datafmt API."""

from typing import Any

from pydantic import BaseModel, Field


class FormatRequest(BaseModel):
    """Template plus data to format."""

    template: str | None = Field(default=None, description="Text with {{...}} placeholders")
    data: Any = Field(default=None, description="JSON document the placeholders read from")


class FormatResponse(BaseModel):
    result: str


class TransformInfo(BaseModel):
    """A transformation usable inside placeholders."""

    name: str
    description: str
    usage: str = ""


class TutorialResponse(BaseModel):
    tutorial: str
