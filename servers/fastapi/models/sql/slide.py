from datetime import datetime
import uuid
from sqlalchemy import Column, DateTime, Enum, Integer, String, Text
from sqlmodel import Field, SQLModel

from constants.slides import (
    DEFAULT_SLIDE_CONTENT,
    DEFAULT_SLIDE_LAYOUT,
    DEFAULT_SLIDE_ORDER,
    DEFAULT_SLIDE_TITLE,
)
from enums.slide_layout import SlideLayout
from utils.datetime_utils import get_current_utc_datetime


def generate_slide_id() -> str:
    return str(uuid.uuid4())


class SlideModel(SQLModel, table=True):
    __tablename__ = "slides"
    __table_args__ = {"extend_existing": True}

    id: str = Field(
        default_factory=generate_slide_id,
        sa_column=Column(String(36), primary_key=True),
    )
    title: str = Field(
        default=DEFAULT_SLIDE_TITLE,
        sa_column=Column(String(255), nullable=False, default=DEFAULT_SLIDE_TITLE),
    )
    content: str = Field(
        default=DEFAULT_SLIDE_CONTENT,
        sa_column=Column(Text, nullable=False, default=DEFAULT_SLIDE_CONTENT),
    )
    # Stored as the enum value ("two-column", not "TWO_COLUMN") with a CHECK constraint
    layout: SlideLayout = Field(
        default=DEFAULT_SLIDE_LAYOUT,
        sa_column=Column(
            Enum(
                SlideLayout,
                name="slide_layout",
                native_enum=False,
                create_constraint=True,
                length=20,
                values_callable=lambda layouts: [layout.value for layout in layouts],
            ),
            nullable=False,
            default=DEFAULT_SLIDE_LAYOUT,
        ),
    )
    # Advisory display position, duplicates allowed
    order: int = Field(
        default=DEFAULT_SLIDE_ORDER,
        sa_column=Column(
            "order", Integer, nullable=False, index=True, default=DEFAULT_SLIDE_ORDER
        ),
    )

    created_at: datetime = Field(
        default_factory=get_current_utc_datetime,
        sa_column=Column(
            DateTime(timezone=True),
            nullable=False,
            default=get_current_utc_datetime,
        ),
    )
    updated_at: datetime = Field(
        default_factory=get_current_utc_datetime,
        sa_column=Column(
            DateTime(timezone=True),
            nullable=False,
            default=get_current_utc_datetime,
            onupdate=get_current_utc_datetime,
        ),
    )
