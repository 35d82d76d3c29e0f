"""Domain models (Pydantic v2).

Why Pydantic here:
- Frozen models give immutable descriptors that are handed from one component
  to the next and never aliased.
- The discriminated union makes GET and POST a closed choice: a GET request has
  no body field at all.

Note:
- These models describe *what* is sent, not *how*; httpx lives in adapters.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class HttpMethod(str, Enum):
    """HTTP methods supported by the CLI."""

    GET = "GET"
    POST = "POST"


class UrlKeyValue(BaseModel):
    """A `key=value` token from the command line, already split."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(
        ...,
        min_length=1,
        description="JSON field name in the POST body.",
    )
    value: str = Field(
        ...,
        min_length=1,
        description="JSON string value for `key`.",
    )


class GetRequest(BaseModel):
    """Outbound GET request. Sent without a body."""

    model_config = ConfigDict(frozen=True)

    method: Literal[HttpMethod.GET] = HttpMethod.GET
    url: str = Field(
        ...,
        min_length=1,
        description="Absolute URL, validated at argument-parse time.",
    )


class PostRequest(BaseModel):
    """Outbound POST request with a JSON object body."""

    model_config = ConfigDict(frozen=True)

    method: Literal[HttpMethod.POST] = HttpMethod.POST
    url: str = Field(
        ...,
        min_length=1,
        description="Absolute URL, validated at argument-parse time.",
    )
    body: dict[str, str] = Field(
        default_factory=dict,
        description="Fields of the JSON object sent as the request body.",
    )


RequestDescriptor = Annotated[Union[GetRequest, PostRequest], Field(discriminator="method")]
