"""Base classes for value objects."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator

from hunt.domain.error import ValidationError


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
        arbitrary_types_allowed=True,
    )


class Patch(ValueObject):
    """Base class for partial updates of an entity.

    Every field of a patch is tri-state:
    - absent: never passed to the constructor, the stored value is kept
    - None: passed explicitly as None, the stored value is cleared
    - value: the stored value is replaced

    Absent and None are told apart through ``model_fields_set``, so
    subclasses declare every field as optional with a ``None`` default and
    list the columns that may actually be cleared in ``nullable_fields``.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required_fields(self) -> "Patch":
        """Only nullable columns may be cleared."""
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValidationError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields that were explicitly provided."""
        return self.model_dump(include=set(self.model_fields_set))

    def is_empty(self) -> bool:
        """Whether the patch leaves the entity untouched."""
        return not self.model_fields_set
