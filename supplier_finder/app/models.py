from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchRequest(BaseModel):
    """Body of a supplier search request. Every field is optional."""

    model_config = ConfigDict(populate_by_name=True)

    requirements: Optional[str] = None
    country: Optional[str] = None
    certifications: Optional[str] = None
    max_results: Optional[Union[int, float]] = Field(default=None, alias="maxResults")

    @field_validator("requirements", "country", "certifications", mode="before")
    @classmethod
    def text_or_none(cls, value):
        # Numbers become text; lists, objects and booleans are ignored
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return str(value)
        if not isinstance(value, str):
            return None
        return value

    @field_validator("max_results", mode="before")
    @classmethod
    def ignore_non_numeric(cls, value):
        # Anything that is not a number falls back to the default count
        if isinstance(value, bool):
            return None
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                return None
        if not isinstance(value, (int, float)):
            return None
        return value
