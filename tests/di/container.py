"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from stackit.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where swappable components default to test doubles.

    Args:
        unmock: Components that should use their production provider instead

    Raises:
        ValueError: If ``unmock`` names a component no provider declares

    Examples:
        # Unit and e2e tests: in-memory persistence
        container = build_test_container()

        # Integration tests: real persistence (needs a running postgres)
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    providers = []
    for slot in PROVIDERS:
        component = slot.__mock_component__
        use_mock = component is not None and component not in unmock
        providers.append(get_provider(slot, use_mock=use_mock)())

    # FastapiProvider lets the same container serve a TestClient app
    return make_async_container(*providers, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject component names no provider declares."""
    known = {slot.__mock_component__ for slot in PROVIDERS} - {None}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
