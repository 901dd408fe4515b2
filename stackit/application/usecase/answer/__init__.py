"""Answer use cases."""

from .accept_answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
)
from .create_answer import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
)

__all__ = [
    "AcceptAnswerRequest",
    "AcceptAnswerResponse",
    "AcceptAnswerUseCase",
    "CreateAnswerRequest",
    "CreateAnswerResponse",
    "CreateAnswerUseCase",
]
