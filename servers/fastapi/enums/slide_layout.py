from enum import Enum


class SlideLayout(str, Enum):
    TITLE = "title"
    CONTENT = "content"
    TWO_COLUMN = "two-column"
    CODE = "code"
