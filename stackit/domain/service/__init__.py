"""Domain services."""

from .acceptance_service import AcceptanceService
from .answer_service import AnswerService
from .auth_service import AuthService
from .base import Service
from .jwt_service import JWTService
from .question_service import QuestionService
from .tag_service import TagService
from .user_service import UserService
from .vote_service import TallyResult, VoteService

__all__ = [
    "AcceptanceService",
    "AnswerService",
    "AuthService",
    "JWTService",
    "QuestionService",
    "Service",
    "TagService",
    "TallyResult",
    "UserService",
    "VoteService",
]
