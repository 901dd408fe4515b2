"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import VoteService
from stackit.domain.value import UserId, VoteTargetType, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    user_id: str  # From authenticated user
    target_type: VoteTargetType
    target_id: UUID
    vote_type: VoteType


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    success: bool = True
    message: str = "Vote recorded successfully"
    vote_id: str
    vote_type: VoteType
    vote_count: int


class CastVoteUseCase:
    """Use case for voting a question or answer up or down."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            The recorded vote and the target's new vote count

        Raises:
            NotFoundError: If the target does not exist
        """
        result = await self.vote_service.cast_vote(
            user_id=UserId(UUID(request.user_id)),
            target_type=request.target_type,
            target_id=request.target_id,
            vote_type=request.vote_type,
        )
        return CastVoteResponse(
            vote_id=str(result.vote.id),
            vote_type=result.vote.vote_type,
            vote_count=result.vote_count,
        )
