"""Answer entity."""

from datetime import datetime

from pydantic import Field, field_validator

from stackit.domain.model.common import DomainModel, utcnow
from stackit.domain.model.user import Author
from stackit.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer to a question.

    At most one answer per question has ``is_accepted`` set, and it is the
    one referenced by ``Question.accepted_answer_id``.
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    content: str = Field(min_length=1)
    vote_count: int = 0
    is_accepted: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("content")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        """Reject whitespace-only content."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class AnswerSummary(DomainModel):
    """Answer with its author, as shown under a question."""

    id: AnswerId
    question_id: QuestionId
    content: str
    author: Author
    vote_count: int
    is_accepted: bool
    created_at: datetime
    updated_at: datetime
