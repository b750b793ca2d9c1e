"""Domain value objects for the comment board.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

from enum import Enum

from pydantic import field_validator

from board.domain.value.common import RootValueObject

MAX_CONTENT_LENGTH = 10000


class Content(RootValueObject[str]):
    """Comment body text.

    Surrounding whitespace is trimmed; the trimmed text must not be empty.
    """

    @field_validator("root", mode="before")
    @classmethod
    def validate_content(cls, v: object) -> str:
        """Trim the text and reject blank or oversized content."""
        if not isinstance(v, str):
            raise ValueError("Content must be a string")
        text = v.strip()
        if not text:
            raise ValueError("Content must not be empty")
        if len(text) > MAX_CONTENT_LENGTH:
            raise ValueError(
                f"Content must be at most {MAX_CONTENT_LENGTH} characters"
            )
        return text


class Alignment(str, Enum):
    """Horizontal anchoring of a rendered comment."""

    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> "Alignment":
        """Alignment used for the children of a node with this alignment."""
        return Alignment.RIGHT if self is Alignment.LEFT else Alignment.LEFT


class CommentEventType(str, Enum):
    """Kinds of real-time comment events."""

    CREATED = "comment_created"
    DELETED = "comment_deleted"
