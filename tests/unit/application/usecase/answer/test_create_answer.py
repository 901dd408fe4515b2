"""Unit tests for CreateAnswerUseCase."""

from uuid import UUID, uuid4

import pytest

from stackit.application.usecase.answer import CreateAnswerRequest, CreateAnswerUseCase
from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from stackit.domain.value import AnswerId
from tests.factories import make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateAnswerUseCase:
    """Tests for CreateAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_create_answer(self, unit_env):
        """Answering an existing question should store the answer."""
        # Arrange
        use_case = await unit_env.get(CreateAnswerUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        author = await user_repo.save(make_user())
        question = await question_repo.save(make_question(author))

        # Act
        response = await use_case.execute(
            CreateAnswerRequest(
                author_id=str(author.id),
                question_id=str(question.id),
                content="Slice with [::-1].",
            )
        )

        # Assert
        assert response.success is True
        assert response.message == "Answer posted successfully"
        saved = await answer_repo.find_by_id(AnswerId(UUID(response.answer_id)))
        assert saved.question_id == question.id
        assert saved.is_accepted is False
        assert saved.vote_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, "", "  \n "])
    async def test_blank_content_rejected(self, unit_env, content):
        """Missing or blank content should raise ValidationError."""
        use_case = await unit_env.get(CreateAnswerUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateAnswerRequest(
                    author_id=str(uuid4()), question_id=str(uuid4()), content=content
                )
            )

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env):
        """Answering a non-existent question should raise NotFoundError."""
        use_case = await unit_env.get(CreateAnswerUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateAnswerRequest(
                    author_id=str(uuid4()), question_id=str(uuid4()), content="Hi"
                )
            )
