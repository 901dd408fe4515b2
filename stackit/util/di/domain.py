"""Domain layer DI providers."""

from dishka import Scope, provide

from stackit.config import AuthSettings
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
    VoteRepository,
)
from stackit.domain.service import (
    AcceptanceService,
    AnswerService,
    AuthService,
    JWTService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_auth_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> AuthService:
        """Provide password authentication domain service."""
        return AuthService(
            user_repository=user_repository, auth_settings=auth_settings
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository, tag_service: TagService
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository, tag_service=tag_service
        )

    @provide
    def get_answer_service(
        self, answer_repository: AnswerRepository, question_service: QuestionService
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository, question_service=question_service
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            question_service=question_service,
            answer_service=answer_service,
        )

    @provide
    def get_acceptance_service(
        self, question_service: QuestionService, answer_service: AnswerService
    ) -> AcceptanceService:
        """Provide accepted-answer domain service."""
        return AcceptanceService(
            question_service=question_service, answer_service=answer_service
        )
