"""Data models for catalog content."""

from typing import List
from typing import Optional

from pydantic import BaseModel
from pydantic import Field


class Tool(BaseModel):
    """One cataloged external resource, stored inside its category file.

    Field order is the on-disk key order.
    """

    name: str
    slug: str = Field(description="Unique within the category, derived from name")
    description: str
    url: str
    tags: List[str]


class ExtractedMetadata(BaseModel):
    """Best-effort title/description pulled from a fetched page."""

    title: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def empty(cls) -> "ExtractedMetadata":
        return cls(title=None, description=None)
