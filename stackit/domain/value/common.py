"""Base classes for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Immutable value object compared by its fields."""

    model_config = ConfigDict(frozen=True)


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Value object wrapping a single primitive (``TagName``, ``Username``...).

    The wrapped value is available as ``.root`` and ``model_dump()`` returns
    the primitive itself, so these serialize transparently in API responses.
    Validators may normalize the value (e.g. lower-casing) as well as reject it.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
