"""Domain model entities for StackIt."""

from stackit.domain.model.answer import Answer, AnswerSummary
from stackit.domain.model.question import Question, QuestionSummary
from stackit.domain.model.tag import Tag
from stackit.domain.model.user import Author, User
from stackit.domain.model.vote import Vote

__all__ = [
    "Answer",
    "AnswerSummary",
    "Author",
    "Question",
    "QuestionSummary",
    "Tag",
    "User",
    "Vote",
]
