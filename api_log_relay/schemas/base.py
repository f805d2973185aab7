"""
Shared schema building blocks.

Wire payloads use camelCase keys; Python code uses snake_case attributes.
"""

from typing import Annotated, Literal

from pydantic import AfterValidator, AnyHttpUrl, BaseModel, ConfigDict, JsonValue, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel


# HTTP methods accepted for logging and relaying
HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]

# Structured request document: a JSON object or array
JsonDocument = dict[str, JsonValue] | list[JsonValue]

_http_url = TypeAdapter(AnyHttpUrl)


def _check_absolute_url(value: str) -> str:
    """Reject anything that is not an absolute http(s) URL; keep the original text."""
    try:
        _http_url.validate_python(value)
    except PydanticValidationError:
        raise ValueError("Invalid URL format") from None
    return value


AbsoluteUrl = Annotated[str, AfterValidator(_check_absolute_url)]


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
