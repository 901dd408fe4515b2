"""Unit tests for question ordering and search helpers."""

import pytest

from stackit.domain.repository import QuestionSortOrder
from stackit.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryQuestionRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from stackit.persistence.repository.question import escape_like
from tests.factories import at, make_answer, make_question, make_user


class TestEscapeLike:
    """Tests for LIKE wildcard escaping."""

    def test_plain_text_unchanged(self):
        assert escape_like("react hooks") == "react hooks"

    def test_wildcards_escaped(self):
        assert escape_like("100%_done") == "100\\%\\_done"

    def test_escape_character_doubled(self):
        assert escape_like("a\\b") == "a\\\\b"


class TestInMemoryQuestionOrdering:
    """The in-memory repository must order like the SQL one."""

    @pytest.fixture
    def store(self):
        return InMemoryStore()

    async def _seed(self, store):
        users = InMemoryUserRepository(store)
        questions = InMemoryQuestionRepository(store)
        answers = InMemoryAnswerRepository(store)

        author = await users.save(make_user())
        # Equal votes and equal answer counts so only tie-breaks decide
        q1 = await questions.save(make_question(author, title="q1", created_at=at(0)))
        q2 = await questions.save(make_question(author, title="q2", created_at=at(1)))
        q3 = await questions.save(
            make_question(author, title="q3", created_at=at(2), vote_count=1)
        )
        await answers.save(make_answer(q3, author))
        return questions, (q1, q2, q3)

    @pytest.mark.asyncio
    async def test_votes_then_newest(self, store):
        questions, _ = await self._seed(store)

        page = await questions.find_all(sort=QuestionSortOrder.VOTES)

        assert [q.title for q in page] == ["q3", "q2", "q1"]

    @pytest.mark.asyncio
    async def test_unanswered_then_newest(self, store):
        questions, _ = await self._seed(store)

        page = await questions.find_all(sort=QuestionSortOrder.UNANSWERED)

        assert [q.title for q in page] == ["q2", "q1", "q3"]

    @pytest.mark.asyncio
    async def test_limit_and_offset(self, store):
        questions, _ = await self._seed(store)

        page = await questions.find_all(limit=1, offset=1)

        assert [q.title for q in page] == ["q2"]
        assert await questions.count() == 3

    @pytest.mark.asyncio
    async def test_search_dedupes_title_and_tag_match(self, store):
        """A question matching on title and tag appears once."""
        users = InMemoryUserRepository(store)
        questions = InMemoryQuestionRepository(store)
        author = await users.save(make_user())
        await questions.save(
            make_question(author, title="python packaging", tags=["python"])
        )

        results = await questions.search("python")

        assert len(results) == 1
