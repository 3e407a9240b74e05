from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from tripclient.core.exceptions import ParseError


class CamelModel(BaseModel):
    """Backend payloads use camelCase keys; python code uses snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def from_payload(cls, data: Any):
        """Validate a backend payload, reporting a mis-shaped one as ParseError."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ParseError(f"unexpected {cls.__name__} payload: {e.error_count()} invalid field(s)") from e
