"""Tag search API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class TagResponse(BaseModel):
    """One tag or person name with its association count."""

    model_config = ConfigDict(from_attributes=True)

    value: str
    count: int = Field(..., ge=0, description="Number of associations in scope")


class TagSearchResponse(BaseModel):
    """Tag search response (ordered list of tags)."""

    results: list[TagResponse]
