"""Unit tests for SearchQuestionsUseCase."""

import pytest

from stackit.application.usecase.question import (
    SearchQuestionsRequest,
    SearchQuestionsUseCase,
)
from stackit.domain.error import ValidationError
from stackit.domain.repository import QuestionRepository, UserRepository
from tests.factories import at, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSearchQuestionsUseCase:
    """Tests for SearchQuestionsUseCase."""

    async def _seed(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        author = await user_repo.save(make_user("author"))

        await question_repo.save(
            make_question(
                author,
                title="React hooks and state",
                description="useState confusion",
                tags=["javascript"],
                created_at=at(0),
            )
        )
        await question_repo.save(
            make_question(
                author,
                title="Rendering lists",
                description="Keys warning",
                tags=["react", "lists"],
                created_at=at(10),
            )
        )
        await question_repo.save(
            make_question(
                author,
                title="Python generators",
                description="What does 100% lazy mean?",
                tags=["python"],
                created_at=at(20),
            )
        )

    @pytest.mark.asyncio
    async def test_matches_title_and_tag_case_insensitively(self, unit_env):
        """A query should match titles and tag names, newest first."""
        use_case = await unit_env.get(SearchQuestionsUseCase)
        await self._seed(unit_env)

        response = await use_case.execute(SearchQuestionsRequest(query="REACT"))

        assert response.query == "REACT"
        assert [q.title for q in response.questions] == [
            "Rendering lists",
            "React hooks and state",
        ]

    @pytest.mark.asyncio
    async def test_matches_description(self, unit_env):
        """A query should match question descriptions."""
        use_case = await unit_env.get(SearchQuestionsUseCase)
        await self._seed(unit_env)

        response = await use_case.execute(SearchQuestionsRequest(query="usestate"))

        assert [q.title for q in response.questions] == ["React hooks and state"]

    @pytest.mark.asyncio
    async def test_percent_matches_literally(self, unit_env):
        """A '%' in the query should only match a literal percent sign."""
        use_case = await unit_env.get(SearchQuestionsUseCase)
        await self._seed(unit_env)

        response = await use_case.execute(SearchQuestionsRequest(query="100%"))

        assert [q.title for q in response.questions] == ["Python generators"]

    @pytest.mark.asyncio
    async def test_no_matches_returns_empty_list(self, unit_env):
        """An unmatched query should return no questions."""
        use_case = await unit_env.get(SearchQuestionsUseCase)
        await self._seed(unit_env)

        response = await use_case.execute(SearchQuestionsRequest(query="haskell"))

        assert response.questions == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", [None, "", "   "])
    async def test_blank_query_rejected(self, unit_env, query):
        """Missing or blank queries should raise ValidationError."""
        use_case = await unit_env.get(SearchQuestionsUseCase)

        with pytest.raises(ValidationError, match="Search query is required"):
            await use_case.execute(SearchQuestionsRequest(query=query))
