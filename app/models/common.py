# /halaqat-backend/app/models/common.py

"""Small validation helpers shared by the entity contracts."""

from typing import Any, Iterable, Optional

from pydantic import BaseModel, BeforeValidator, StringConstraints
from typing_extensions import Annotated


def blank_to_none(value: Any) -> Any:
    """
    A blank optional text field means "not provided". It is stored as null,
    never as an empty string.
    """
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


def reject_explicit_null(values: Any, required_fields: Iterable[str]) -> Any:
    """
    Partial-update payloads may omit a required field, but may not set it
    to null.
    """
    if isinstance(values, dict):
        for field_name in required_fields:
            if field_name in values and values[field_name] is None:
                raise ValueError(f"'{field_name}' cannot be null")
    return values


OptionalText = Annotated[Optional[str], BeforeValidator(blank_to_none)]

# Required free text: surrounding whitespace is dropped before the
# non-empty check, so "   " is rejected like "".
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class MessageResponse(BaseModel):
    message: str
