"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stackit.config import Settings
from stackit.interface.api.routes import (
    answers,
    auth,
    health,
    questions,
    search,
    users,
    votes,
)
from stackit.interface.error import register_error_handlers
from stackit.util.di.container import create_container, setup_di
from stackit.util.observability import instrument_fastapi

ROUTERS = (
    health.router,
    auth.router,
    users.router,
    questions.router,
    answers.router,
    votes.router,
    search.router,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Assemble the StackIt API.

    Logfire has to be configured before this runs: ``scripts/start_app.py``
    does it for the server and ``tests/conftest.py`` for the test suite.

    Args:
        container: DI container to serve requests from; the production
            container is built when omitted
    """
    settings = Settings()

    app = FastAPI(
        title="StackIt API",
        description="Questions, answers, votes and tags for the StackIt community",
        version="0.1.0",
    )
    instrument_fastapi(app)

    # Preflight responses are cached by browsers for 10 minutes
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )
    register_error_handlers(app)

    setup_di(app, container if container is not None else create_container())

    for router in ROUTERS:
        app.include_router(router)

    return app


# Imported by uvicorn; see scripts/start_app.py
app = create_app()
