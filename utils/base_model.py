# utils/base_model.py
from typing import Any, TypeVar
from pydantic import BaseModel, ConfigDict

T = TypeVar('T', bound='ImmutableModel')


class ImmutableModel(BaseModel):
    """
    Base class for value types such as points and tolerances.

    Instances are frozen after creation, compare by field values and are
    hashable when their fields are. Modified copies are created with
    with_changes(), which runs validation again on the new values.
    """
    model_config = ConfigDict(frozen=True)

    def with_changes(self: T, **changes: Any) -> T:
        """
        Create a new instance with specified changes.

        Raises:
            ValueError: If an invalid field name is provided
        """
        unknown = [key for key in changes if key not in type(self).model_fields]
        if unknown:
            raise ValueError(f"Invalid field: {', '.join(unknown)}")

        current_data = {name: getattr(self, name) for name in type(self).model_fields}
        current_data.update(changes)
        return type(self).model_validate(current_data)
