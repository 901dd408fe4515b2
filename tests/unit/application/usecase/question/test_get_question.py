"""Unit tests for GetQuestionUseCase."""

from uuid import uuid4

import pytest

from stackit.application.usecase.question import (
    GetQuestionRequest,
    GetQuestionUseCase,
)
from stackit.domain.error import NotFoundError
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from stackit.domain.service import AcceptanceService
from tests.factories import at, make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetQuestionUseCase:
    """Tests for GetQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_answers_ordered_accepted_then_votes_then_oldest(self, unit_env):
        """Accepted answer first, then higher votes, then older answers."""
        # Arrange
        use_case = await unit_env.get(GetQuestionUseCase)
        acceptance = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        asker = await user_repo.save(make_user("asker"))
        helper = await user_repo.save(make_user("helper"))
        question = await question_repo.save(make_question(asker, tags=["a", "b"]))

        low = await answer_repo.save(
            make_answer(question, helper, content="low", created_at=at(1))
        )
        top_old = await answer_repo.save(
            make_answer(
                question, helper, content="top-old", created_at=at(2), vote_count=3
            )
        )
        top_new = await answer_repo.save(
            make_answer(
                question, helper, content="top-new", created_at=at(3), vote_count=3
            )
        )
        await acceptance.accept_answer(asker.id, low.id)

        # Act
        response = await use_case.execute(
            GetQuestionRequest(question_id=str(question.id))
        )

        # Assert
        assert [a.id for a in response.answers] == [
            str(low.id),
            str(top_old.id),
            str(top_new.id),
        ]
        assert response.answers[0].is_accepted is True
        assert response.answers[0].author_username == "helper"
        assert response.accepted_answer_id == str(low.id)
        assert response.answer_count == 3
        assert response.tags == ["a", "b"]
        assert response.author_username == "asker"

    @pytest.mark.asyncio
    async def test_question_without_answers(self, unit_env):
        """A question with no answers should return an empty answer list."""
        use_case = await unit_env.get(GetQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        asker = await user_repo.save(make_user("asker"))
        question = await question_repo.save(make_question(asker))

        response = await use_case.execute(
            GetQuestionRequest(question_id=str(question.id))
        )

        assert response.id == str(question.id)
        assert response.answers == []
        assert response.accepted_answer_id is None

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env):
        """An unknown ID should raise NotFoundError."""
        use_case = await unit_env.get(GetQuestionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetQuestionRequest(question_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_malformed_id_raises_not_found(self, unit_env):
        """A non-UUID ID cannot name a question."""
        use_case = await unit_env.get(GetQuestionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetQuestionRequest(question_id="not-a-uuid"))
