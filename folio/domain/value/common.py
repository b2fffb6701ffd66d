"""Immutable bases for value objects."""

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Structured value object, compared by its fields."""

    model_config = ConfigDict(frozen=True)


class StringValue(RootModel[str]):
    """A validated string.

    Subclasses add a ``root`` validator. Instances hash and compare by the
    wrapped string, render as it in ``str()`` and dump to it in JSON.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root

    def __len__(self) -> int:
        return len(self.root)
