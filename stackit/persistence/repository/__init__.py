"""PostgreSQL repository implementations."""

from stackit.persistence.repository.answer import PostgresAnswerRepository
from stackit.persistence.repository.question import PostgresQuestionRepository
from stackit.persistence.repository.tag import PostgresTagRepository
from stackit.persistence.repository.user import PostgresUserRepository
from stackit.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresAnswerRepository",
    "PostgresQuestionRepository",
    "PostgresTagRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
