# servers/fastapi/models/slide_request.py

from typing import List, Optional
from pydantic import BaseModel, field_validator

from constants.slides import (
    DEFAULT_SLIDE_CONTENT,
    DEFAULT_SLIDE_LAYOUT,
    DEFAULT_SLIDE_TITLE,
)
from enums.slide_layout import SlideLayout


class CreateSlideRequest(BaseModel):
    """
    Body of POST /slides. Every field is optional; missing or empty values
    fall back to the slide defaults.
    """
    title: Optional[str] = None
    content: Optional[str] = None
    layout: Optional[SlideLayout] = None
    order: Optional[int] = None

    @field_validator("layout", mode="before")
    @classmethod
    def blank_layout_to_default(cls, value):
        return value or None


class UpdateSlideRequest(BaseModel):
    """
    Body of PUT /slides/{id}. Only the fields present in the request body
    are applied, so an explicit "" or 0 overwrites the stored value.
    """
    title: Optional[str] = None
    content: Optional[str] = None
    layout: Optional[SlideLayout] = None
    order: Optional[int] = None

    def get_changes(self) -> dict:
        # null is treated as "not provided", the columns are non-nullable
        return self.model_dump(exclude_unset=True, exclude_none=True)


class SlideItem(BaseModel):
    """One slide of a bulk replace payload. Any `order` or timestamp sent by
    the client is ignored; position in the payload decides the order."""
    id: Optional[str] = None
    title: str = DEFAULT_SLIDE_TITLE
    content: str = DEFAULT_SLIDE_CONTENT
    layout: SlideLayout = DEFAULT_SLIDE_LAYOUT


class BulkReplaceSlidesRequest(BaseModel):
    slides: List[SlideItem]
