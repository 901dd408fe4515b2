"""Unit tests for ListQuestionsUseCase."""

import pytest

from stackit.application.usecase.question import (
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from stackit.application.usecase.question.list_questions import MAX_OFFSET
from stackit.domain.error import ValidationError
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    QuestionSortOrder,
    UserRepository,
)
from tests.factories import at, make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListQuestionsUseCase:
    """Tests for ListQuestionsUseCase."""

    async def _seed(self, unit_env):
        """Three questions: old/popular/answered, mid, new/unvoted."""
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        author = await user_repo.save(make_user("author"))
        old = await question_repo.save(
            make_question(author, title="Old", created_at=at(0), vote_count=5)
        )
        mid = await question_repo.save(
            make_question(author, title="Mid", created_at=at(10), vote_count=2)
        )
        new = await question_repo.save(
            make_question(author, title="New", created_at=at(20))
        )
        await answer_repo.save(make_answer(old, author, created_at=at(30)))
        await answer_repo.save(make_answer(old, author, created_at=at(31)))
        await answer_repo.save(make_answer(mid, author, created_at=at(32)))
        return old, mid, new

    @pytest.mark.asyncio
    async def test_newest_first_by_default(self, unit_env):
        """Default sort should be newest first with default pagination."""
        # Arrange
        use_case = await unit_env.get(ListQuestionsUseCase)
        await self._seed(unit_env)

        # Act
        response = await use_case.execute(ListQuestionsRequest())

        # Assert
        assert [q.title for q in response.questions] == ["New", "Mid", "Old"]
        assert response.page == 1
        assert response.limit == 10
        assert response.total == 3

    @pytest.mark.asyncio
    async def test_sort_by_votes(self, unit_env):
        """Votes sort should order by vote_count descending."""
        use_case = await unit_env.get(ListQuestionsUseCase)
        await self._seed(unit_env)

        response = await use_case.execute(
            ListQuestionsRequest(sort=QuestionSortOrder.VOTES)
        )

        assert [q.title for q in response.questions] == ["Old", "Mid", "New"]
        assert [q.vote_count for q in response.questions] == [5, 2, 0]

    @pytest.mark.asyncio
    async def test_sort_unanswered(self, unit_env):
        """Unanswered sort should put questions with fewest answers first."""
        use_case = await unit_env.get(ListQuestionsUseCase)
        await self._seed(unit_env)

        response = await use_case.execute(
            ListQuestionsRequest(sort=QuestionSortOrder.UNANSWERED)
        )

        assert [q.title for q in response.questions] == ["New", "Mid", "Old"]
        assert [q.answer_count for q in response.questions] == [0, 1, 2]

    @pytest.mark.asyncio
    async def test_votes_tie_broken_by_newest(self, unit_env):
        """Questions with equal votes should come newest first."""
        # Arrange
        use_case = await unit_env.get(ListQuestionsUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        author = await user_repo.save(make_user("author"))
        await question_repo.save(make_question(author, title="A", created_at=at(0)))
        await question_repo.save(make_question(author, title="B", created_at=at(5)))

        # Act
        response = await use_case.execute(
            ListQuestionsRequest(sort=QuestionSortOrder.VOTES)
        )

        # Assert
        assert [q.title for q in response.questions] == ["B", "A"]

    @pytest.mark.asyncio
    async def test_pagination_offsets(self, unit_env):
        """Page 2 with limit 2 should return the third question."""
        use_case = await unit_env.get(ListQuestionsUseCase)
        await self._seed(unit_env)

        response = await use_case.execute(ListQuestionsRequest(page=2, limit=2))

        assert [q.title for q in response.questions] == ["Old"]
        assert response.page == 2
        assert response.limit == 2
        assert response.total == 3

    @pytest.mark.asyncio
    async def test_summary_carries_author_and_tags(self, unit_env):
        """Each item should include author info and tags in order."""
        # Arrange
        use_case = await unit_env.get(ListQuestionsUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        author = await user_repo.save(make_user("carol"))
        await question_repo.save(make_question(author, tags=["sql", "postgres"]))

        # Act
        response = await use_case.execute(ListQuestionsRequest())

        # Assert
        item = response.questions[0]
        assert item.author_username == "carol"
        assert item.author_id == str(author.id)
        assert item.tags == ["sql", "postgres"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "page,limit",
        [(0, 10), (1, 0), (1, 101), (-1, 5)],
    )
    async def test_out_of_range_paging_rejected(self, unit_env, page, limit):
        """Page below 1 or limit outside 1..100 should be rejected."""
        use_case = await unit_env.get(ListQuestionsUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(ListQuestionsRequest(page=page, limit=limit))

    @pytest.mark.asyncio
    async def test_page_past_largest_offset_rejected(self, unit_env):
        """A page whose offset exceeds a 64-bit OFFSET should be rejected."""
        use_case = await unit_env.get(ListQuestionsUseCase)
        last_page = MAX_OFFSET // 10 + 1

        response = await use_case.execute(ListQuestionsRequest(page=last_page, limit=10))
        assert response.questions == []

        with pytest.raises(ValidationError, match="out of range"):
            await use_case.execute(ListQuestionsRequest(page=last_page + 1, limit=10))

    @pytest.mark.asyncio
    async def test_limit_at_ceiling_allowed(self, unit_env):
        """A limit equal to the ceiling should be accepted."""
        use_case = await unit_env.get(ListQuestionsUseCase)

        response = await use_case.execute(ListQuestionsRequest(limit=100))

        assert response.limit == 100
        assert response.questions == []
