"""Application layer DI providers."""

from dishka import Scope, provide

from stackit.application.usecase.answer import AcceptAnswerUseCase, CreateAnswerUseCase
from stackit.application.usecase.auth import LoginUseCase, RegisterUseCase
from stackit.application.usecase.question import (
    CreateQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    SearchQuestionsUseCase,
)
from stackit.application.usecase.user import (
    GetUserProfileUseCase,
    GetUserStatsUseCase,
    UpdateUserProfileUseCase,
)
from stackit.application.usecase.vote import CastVoteUseCase
from stackit.config import Settings
from stackit.domain.service import (
    AcceptanceService,
    AnswerService,
    AuthService,
    JWTService,
    QuestionService,
    UserService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_user_stats_use_case(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> GetUserStatsUseCase:
        """Provide get user stats use case."""
        return GetUserStatsUseCase(
            user_service=user_service,
            question_service=question_service,
            answer_service=answer_service,
        )

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, question_service: QuestionService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_question_use_case(
        self, question_service: QuestionService, answer_service: AnswerService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service, answer_service=answer_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService, settings: Settings
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_search_questions_use_case(
        self, question_service: QuestionService, settings: Settings
    ) -> SearchQuestionsUseCase:
        """Provide search questions use case."""
        return SearchQuestionsUseCase(
            question_service=question_service, settings=settings
        )

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self, answer_service: AnswerService
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(answer_service=answer_service)

    @provide(scope=Scope.REQUEST)
    def get_accept_answer_use_case(
        self, acceptance_service: AcceptanceService
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(acceptance_service=acceptance_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)
