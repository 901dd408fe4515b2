"""Question routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel

from stackit.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
)
from stackit.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from stackit.domain.repository import QuestionSortOrder
from stackit.domain.service import JWTService
from stackit.interface.api.auth import bearer_scheme, require_user_id

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str | None = None
    description: str | None = None
    tags: list[str] | None = None


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str | None = None


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    sort: QuestionSortOrder = Query(default=QuestionSortOrder.NEWEST),
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
) -> ListQuestionsResponse:
    """List questions, one page at a time.

    Args:
        sort: ``newest``, ``votes`` or ``unanswered``
        page: 1-based page number
        limit: Page size (defaults to the configured page size)

    Example:
        GET /questions?sort=votes&page=2&limit=20
    """
    return await list_questions_use_case.execute(
        ListQuestionsRequest(sort=sort, page=page, limit=limit)
    )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: str,
    get_question_use_case: FromDishka[GetQuestionUseCase],
) -> GetQuestionResponse:
    """Get a question with its tags and answers.

    Answers come accepted first, then by votes, then oldest first.
    """
    return await get_question_use_case.execute(
        GetQuestionRequest(question_id=question_id)
    )


@router.post(
    "",
    response_model=CreateQuestionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CreateQuestionResponse:
    """Ask a question.

    Example:
        POST /questions
        Authorization: Bearer eyJ...

        Request:
        {
            "title": "How do I reverse a list?",
            "description": "Without copying it, ideally.",
            "tags": ["python", "lists"]
        }
    """
    user_id = require_user_id(jwt_service, credentials)
    return await create_question_use_case.execute(
        CreateQuestionRequest(
            author_id=user_id,
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
    )


@router.post(
    "/{question_id}/answers",
    response_model=CreateAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: str,
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CreateAnswerResponse:
    """Post an answer to a question."""
    user_id = require_user_id(jwt_service, credentials)
    return await create_answer_use_case.execute(
        CreateAnswerRequest(
            author_id=user_id,
            question_id=question_id,
            content=request.content,
        )
    )
