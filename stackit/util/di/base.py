"""Provider metadata shared by every dishka provider in the app."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with interchangeable production and test implementations
Component = Literal["persistence"]


class ProviderBase(Provider):
    """dishka provider tagged with swap metadata.

    A provider that declares ``__mock_component__`` is an abstract slot: its
    subclasses are the production and test implementations, told apart by
    ``__is_mock__``. Providers without it are used as-is everywhere.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
