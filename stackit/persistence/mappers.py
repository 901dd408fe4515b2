"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from stackit.domain.model import (
    Answer,
    AnswerSummary,
    Author,
    Question,
    QuestionSummary,
    Tag,
    User,
    Vote,
)
from stackit.domain.value import (
    AnswerId,
    Email,
    QuestionId,
    TagId,
    TagName,
    UserId,
    UserRole,
    Username,
    VoteId,
    VoteTargetType,
    VoteType,
    WebsiteUrl,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        avatar_url=row.get("avatar_url"),
        bio=row.get("bio"),
        location=row.get("location"),
        website=WebsiteUrl(row["website"]) if row.get("website") else None,
        role=UserRole(row.get("role") or UserRole.USER.value),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        last_login_at=row.get("last_login_at"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email.root,
        "password_hash": user.password_hash,
        "avatar_url": user.avatar_url,
        "bio": user.bio,
        "location": user.location,
        "website": user.website.root if user.website else None,
        "role": user.role.value,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
        "last_login_at": user.last_login_at,
    }


def row_to_author(row: Dict[str, Any]) -> Author:
    """Build an Author from ``author_*`` columns of a joined row."""
    return Author(
        id=UserId(_uuid(row["author_id"])),
        username=Username(row["author_username"]),
        avatar_url=row.get("author_avatar_url"),
    )


def row_to_question(
    row: Dict[str, Any], tag_names: Optional[list[str]] = None
) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict
        tag_names: Tag names in insertion order (fetched separately)

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        author_id=UserId(_uuid(row["author_id"])),
        tag_names=[TagName(name) for name in tag_names or []],
        vote_count=row["vote_count"],
        accepted_answer_id=_optional_uuid(row.get("accepted_answer_id")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_question_summary(
    row: Dict[str, Any], tag_names: Optional[list[str]] = None
) -> QuestionSummary:
    """Convert a question row joined with author and answer count."""
    return QuestionSummary(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        author=row_to_author(row),
        tag_names=[TagName(name) for name in tag_names or []],
        vote_count=row["vote_count"],
        answer_count=row["answer_count"] or 0,
        accepted_answer_id=_optional_uuid(row.get("accepted_answer_id")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Tag names are excluded; they live in the question_tags table.
    """
    return {
        "id": question.id,
        "title": question.title,
        "description": question.description,
        "author_id": question.author_id,
        "vote_count": question.vote_count,
        "accepted_answer_id": question.accepted_answer_id,
        "created_at": question.created_at,
        "updated_at": question.updated_at,
    }


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        vote_count=row["vote_count"],
        is_accepted=row["is_accepted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_answer_summary(row: Dict[str, Any]) -> AnswerSummary:
    """Convert an answer row joined with its author."""
    return AnswerSummary(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        content=row["content"],
        author=row_to_author(row),
        vote_count=row["vote_count"],
        is_accepted=row["is_accepted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        created_at=row["created_at"],
    )


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        target_type=VoteTargetType(row["target_type"]),
        target_id=_uuid(row["target_id"]),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "id": vote.id,
        "user_id": vote.user_id,
        "target_type": vote.target_type.value,
        "target_id": vote.target_id,
        "vote_type": vote.vote_type.value,
        "created_at": vote.created_at,
        "updated_at": vote.updated_at,
    }
