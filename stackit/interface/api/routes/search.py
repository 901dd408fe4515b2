"""Search routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from stackit.application.usecase.question import (
    SearchQuestionsRequest,
    SearchQuestionsResponse,
    SearchQuestionsUseCase,
)

router = APIRouter(tags=["search"], route_class=DishkaRoute)


@router.get("/search", response_model=SearchQuestionsResponse)
async def search_questions(
    search_questions_use_case: FromDishka[SearchQuestionsUseCase],
    q: str | None = Query(default=None),
) -> SearchQuestionsResponse:
    """Search questions by title, description or tag name.

    Example:
        GET /search?q=asyncio
    """
    return await search_questions_use_case.execute(SearchQuestionsRequest(query=q))
