"""Search response models decoded from the endpoint's JSON body.

JSON ``null`` decodes to the zero value: ``""`` for text, ``[]`` for results.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchResult(BaseModel):
    """A single title/url/description triple."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = ""
    url: str = ""
    description: str = ""

    @field_validator("title", "url", "description", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class SearchResponse(BaseModel):
    """Results in the order the server returned them."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    results: list[SearchResult] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [{} if item is None else item for item in value]
        return value

    @classmethod
    def from_json(cls, payload: Any) -> "SearchResponse":
        """Validate an already-decoded JSON value; a bare ``null`` is an empty response.

        Raises:
            pydantic.ValidationError: If the payload is not the expected shape.
        """
        if payload is None:
            return cls()
        return cls.model_validate(payload)
