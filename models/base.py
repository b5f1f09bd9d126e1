from __future__ import annotations

import logging
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel


class LinkedInModel(BaseModel):
    """Normalized record: snake_case attributes, camelCase JSON field names.

    Optional fields that arrive null or in the wrong shape fall back to their
    default instead of failing the whole record.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_on_bad_shape(cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError:
            field = cls.model_fields[info.field_name]
            if field.is_required():
                raise
            logging.debug(f"Ignoring malformed {cls.__name__}.{info.field_name}")
            return field.get_default(call_default_factory=True)

    def to_payload(self) -> dict:
        """Serialize with the API's camelCase names, omitting absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
