"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from stackit.domain.error import NotFoundError
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
    VoteRepository,
)
from stackit.domain.service import VoteService
from stackit.domain.value import UserId, VoteTargetType, VoteType
from tests.factories import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCastVoteOnQuestion:
    """Tests for voting on questions."""

    async def _setup(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)

        author = await user_repo.save(make_user("author"))
        question = await question_repo.save(make_question(author))
        return question

    @pytest.mark.asyncio
    async def test_upvote_creates_ledger_row_and_sets_count(self, unit_env):
        """First upvote should store a vote and set vote_count to 1."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        question_repo = await unit_env.get(QuestionRepository)
        question = await self._setup(unit_env)
        voter = UserId(uuid4())

        # Act
        result = await vote_service.cast_vote(
            voter, VoteTargetType.QUESTION, question.id, VoteType.UP
        )

        # Assert
        assert result.vote_count == 1
        assert result.vote.vote_type == VoteType.UP
        stored = await vote_repo.find_by_user_and_target(
            voter, VoteTargetType.QUESTION, question.id
        )
        assert stored == result.vote
        updated = await question_repo.find_by_id(question.id)
        assert updated.vote_count == 1

    @pytest.mark.asyncio
    async def test_repeated_vote_keeps_single_row(self, unit_env):
        """Voting up twice should leave one row and a count of 1."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        question = await self._setup(unit_env)
        voter = UserId(uuid4())

        # Act
        first = await vote_service.cast_vote(
            voter, VoteTargetType.QUESTION, question.id, VoteType.UP
        )
        second = await vote_service.cast_vote(
            voter, VoteTargetType.QUESTION, question.id, VoteType.UP
        )

        # Assert
        assert second.vote_count == 1
        assert second.vote.id == first.vote.id
        votes = await vote_repo.find_by_target(VoteTargetType.QUESTION, question.id)
        assert len(votes) == 1

    @pytest.mark.asyncio
    async def test_changing_direction_replaces_vote(self, unit_env):
        """Switching from up to down should flip the tally to -1."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await self._setup(unit_env)
        voter = UserId(uuid4())

        # Act
        first = await vote_service.cast_vote(
            voter, VoteTargetType.QUESTION, question.id, VoteType.UP
        )
        second = await vote_service.cast_vote(
            voter, VoteTargetType.QUESTION, question.id, VoteType.DOWN
        )

        # Assert
        assert second.vote_count == -1
        assert second.vote.vote_type == VoteType.DOWN
        assert second.vote.id == first.vote.id
        assert second.vote.created_at == first.vote.created_at
        updated = await question_repo.find_by_id(question.id)
        assert updated.vote_count == -1

    @pytest.mark.asyncio
    async def test_tally_counts_all_voters(self, unit_env):
        """Two ups and one down should give a count of 1."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await self._setup(unit_env)

        # Act
        for vote_type in (VoteType.UP, VoteType.UP, VoteType.DOWN):
            result = await vote_service.cast_vote(
                UserId(uuid4()), VoteTargetType.QUESTION, question.id, vote_type
            )

        # Assert
        assert result.vote_count == 1
        updated = await question_repo.find_by_id(question.id)
        assert updated.vote_count == 1

    @pytest.mark.asyncio
    async def test_vote_on_missing_question_raises_and_writes_nothing(self, unit_env):
        """Voting on a non-existent question should fail without a ledger row."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        missing_id = uuid4()

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(
                UserId(uuid4()), VoteTargetType.QUESTION, missing_id, VoteType.UP
            )

        assert await vote_repo.find_by_target(VoteTargetType.QUESTION, missing_id) == []


class TestCastVoteOnAnswer:
    """Tests for voting on answers."""

    @pytest.mark.asyncio
    async def test_vote_on_answer_updates_answer_count_only(self, unit_env):
        """An answer vote should update the answer, not its question."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        author = await user_repo.save(make_user("author"))
        question = await question_repo.save(make_question(author))
        answer = await answer_repo.save(make_answer(question, author))

        # Act
        result = await vote_service.cast_vote(
            UserId(uuid4()), VoteTargetType.ANSWER, answer.id, VoteType.DOWN
        )

        # Assert
        assert result.vote_count == -1
        assert (await answer_repo.find_by_id(answer.id)).vote_count == -1
        assert (await question_repo.find_by_id(question.id)).vote_count == 0

    @pytest.mark.asyncio
    async def test_same_id_on_other_target_type_is_independent(self, unit_env):
        """A question vote and an answer vote by one user are separate rows."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        author = await user_repo.save(make_user("author"))
        question = await question_repo.save(make_question(author))
        answer = await answer_repo.save(make_answer(question, author))
        voter = UserId(uuid4())

        # Act
        await vote_service.cast_vote(
            voter, VoteTargetType.QUESTION, question.id, VoteType.UP
        )
        await vote_service.cast_vote(voter, VoteTargetType.ANSWER, answer.id, VoteType.UP)

        # Assert
        assert await vote_repo.tally(VoteTargetType.QUESTION, question.id) == 1
        assert await vote_repo.tally(VoteTargetType.ANSWER, answer.id) == 1

    @pytest.mark.asyncio
    async def test_vote_on_missing_answer_raises(self, unit_env):
        """Voting on a non-existent answer should raise NotFoundError."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await vote_service.cast_vote(
                UserId(uuid4()), VoteTargetType.ANSWER, uuid4(), VoteType.UP
            )
