"""Dependency injection wiring."""

from stackit.util.di.application import ProdApplicationProvider
from stackit.util.di.base import Component, ProviderBase
from stackit.util.di.core import ProdConfigProvider
from stackit.util.di.domain import ProdDomainProvider
from stackit.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from stackit.util.error import DependencyInjectionError

# Order is irrelevant to dishka; swappable slots come last for readability
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: type[ProviderBase], use_mock: bool = False
) -> type[ProviderBase]:
    """Resolve a provider slot to the class that should be instantiated.

    Concrete providers resolve to themselves. A swappable slot resolves to
    its subclass whose ``__is_mock__`` equals ``use_mock``.

    Raises:
        DependencyInjectionError: If the slot has no matching subclass
    """
    if base.__mock_component__ is None:
        return base

    for candidate in base.__subclasses__():
        if candidate.__is_mock__ is use_mock:
            return candidate

    variant = "test" if use_mock else "production"
    raise DependencyInjectionError(
        f"Component '{base.__mock_component__}' has no {variant} provider"
    )


__all__ = [
    "Component",
    "DependencyInjectionError",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
