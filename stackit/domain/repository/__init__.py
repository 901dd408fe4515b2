"""Repository interfaces for StackIt domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from stackit.domain.repository.answer import AnswerRepository
from stackit.domain.repository.question import QuestionRepository, QuestionSortOrder
from stackit.domain.repository.tag import TagRepository
from stackit.domain.repository.user import UserRepository
from stackit.domain.repository.vote import VoteRepository

__all__ = [
    "AnswerRepository",
    "QuestionRepository",
    "QuestionSortOrder",
    "TagRepository",
    "UserRepository",
    "VoteRepository",
]
