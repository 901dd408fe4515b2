"""Shared state for the in-memory repositories.

Summaries need users, answers and tags next to questions, so all in-memory
repositories of one container read and write the same store.
"""

from uuid import UUID

from stackit.domain.model import Answer, Question, Tag, User, Vote
from stackit.domain.value import AnswerId, QuestionId, UserId


class InMemoryStore:
    """Dict-backed tables; insertion order doubles as the natural row order."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.questions: dict[QuestionId, Question] = {}
        self.answers: dict[AnswerId, Answer] = {}
        self.tags: dict[str, Tag] = {}
        self.votes: dict[tuple[UserId, str, UUID], Vote] = {}
