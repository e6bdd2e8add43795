"""Base schema configuration for all Pydantic models.

Every API schema inherits from one of:
    - APIRequest: incoming request bodies (unknown fields ignored)
    - APIResponse: outgoing response bodies (unknown fields forbidden)

Both accept snake_case or camelCase on input and serialize camelCase.
"""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# Upper bounds for free-text quantity fields
MAX_AMOUNT_LENGTH: Final[int] = 64
MAX_UNIT_LENGTH: Final[int] = 64


class _BaseSchema(BaseModel):
    """Private base schema with common configuration.

    Do not use directly - inherit from one of the public subclasses.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        serialize_by_alias=True,
    )


class APIRequest(_BaseSchema):
    """Base class for incoming API request schemas.

    Clients may send properties we don't recognize; they are dropped.
    """

    model_config = ConfigDict(
        extra="ignore",
    )


class APIResponse(_BaseSchema):
    """Base class for outgoing API response schemas.

    Only explicitly declared properties are returned.
    """

    model_config = ConfigDict(
        extra="forbid",
        from_attributes=True,
    )
