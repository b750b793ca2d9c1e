"""Strongly typed identifiers for board domain entities.

Using NewType keeps user and comment identifiers from being mixed up.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
CommentId = NewType("CommentId", UUID)
