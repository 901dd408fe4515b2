"""Question use cases."""

from .create_question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
)
from .get_question import (
    AnswerItem,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
)
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionListItem,
)
from .search_questions import (
    SearchQuestionsRequest,
    SearchQuestionsResponse,
    SearchQuestionsUseCase,
)

__all__ = [
    "AnswerItem",
    "CreateQuestionRequest",
    "CreateQuestionResponse",
    "CreateQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionResponse",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "QuestionListItem",
    "SearchQuestionsRequest",
    "SearchQuestionsResponse",
    "SearchQuestionsUseCase",
]
