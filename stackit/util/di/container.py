"""Container assembly for the running application."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from stackit.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Every slot resolves to its production provider. ``FastapiProvider``
    makes the current ``Request`` injectable into request-scoped factories.
    """
    providers = [get_provider(slot)() for slot in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app`` so routes can use ``FromDishka``.

    The container is closed when the app shuts down.
    """
    setup_dishka(container, app)
