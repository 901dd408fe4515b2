"""Domain value objects for StackIt."""

from stackit.domain.value.identifiers import (
    AnswerId,
    QuestionId,
    TagId,
    UserId,
    VoteId,
)
from stackit.domain.value.types import (
    Email,
    ProfileUpdate,
    TagName,
    UserRole,
    Username,
    VoteTargetType,
    VoteType,
    WebsiteUrl,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "TagId",
    "VoteId",
    # Types
    "Email",
    "ProfileUpdate",
    "TagName",
    "UserRole",
    "Username",
    "VoteTargetType",
    "VoteType",
    "WebsiteUrl",
]
