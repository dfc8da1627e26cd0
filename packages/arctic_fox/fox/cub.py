"""Wrapped-value capability carried by Arctic Fox containers.

A cub is any value that can estimate its own serialized size, clone itself
and serialize to a JSON-compatible structure. Containers never inspect a
cub's structure beyond these three operations.
"""

from __future__ import annotations

import copy
from typing import Any, Generic, Protocol, Self, TypeVar, runtime_checkable

from pydantic import BaseModel

T = TypeVar("T")


@runtime_checkable
class Cub(Protocol):
    """Capability contract for values carried by a container."""

    def size(self) -> int:
        """Return a byte-size estimate of the serialized value."""
        ...

    def clone(self) -> Self:
        """Return an independent copy of the value."""
        ...

    def serialized(self) -> Any:
        """Return a JSON-compatible representation of the value."""
        ...


class CubModel(BaseModel):
    """Pydantic base implementing the cub capability for domain models."""

    @classmethod
    def new(cls, id: str | None = None) -> Self:
        """Build the type-appropriate default value.

        ``id`` populates the model's ``id`` field; models without one reject it.
        """
        if id is None:
            return cls()
        if "id" not in cls.model_fields:
            raise TypeError(f"{cls.__name__} has no id field")
        return cls(id=id)

    def size(self) -> int:
        """Return the UTF-8 length of the model's compact JSON dump."""
        return len(self.model_dump_json().encode("utf-8"))

    def clone(self) -> Self:
        """Return a deep copy so callers cannot reach the stored instance."""
        return self.model_copy(deep=True)

    def serialized(self) -> Any:
        """Return the JSON-mode model dump."""
        return self.model_dump(mode="json")


class AdoptedCub(CubModel, Generic[T]):
    """Cub wrapper giving a primitive or plain value the cub capability."""

    data: T

    def unstore(self) -> T:
        """Return an independent copy of the adopted value."""
        return copy.deepcopy(self.data)

    def serialized(self) -> Any:
        """Serialize the adopted value itself rather than the wrapper."""
        return self.model_dump(mode="json")["data"]
