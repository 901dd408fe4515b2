"""Question aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from stackit.domain.model.common import DomainModel, utcnow
from stackit.domain.model.user import Author
from stackit.domain.value import AnswerId, QuestionId, TagName, UserId


class Question(DomainModel):
    """Question aggregate root.

    ``vote_count`` is a cache of the vote ledger for this question and is
    only written by the tally engine. ``accepted_answer_id`` must agree with
    the ``is_accepted`` flag of the question's answers.
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1)
    author_id: UserId
    tag_names: list[TagName] = Field(default_factory=list)
    vote_count: int = 0
    accepted_answer_id: Optional[AnswerId] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("title", "description")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        """Reject whitespace-only text."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class QuestionSummary(DomainModel):
    """Read model of a question for listings, search and detail views."""

    id: QuestionId
    title: str
    description: str
    author: Author
    tag_names: list[TagName]
    vote_count: int
    answer_count: int = Field(ge=0)
    accepted_answer_id: Optional[AnswerId] = None
    created_at: datetime
    updated_at: datetime
