"""Data models for annotated supplier search results."""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class SupplierCandidate(BaseModel):
    """A web search result annotated as a possible supplier."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    url: str
    display_link: str = Field(..., alias="displayLink")
    country_hint: str = Field(..., alias="countryHint")
    description: str
    tags: List[str]

    size_category: str = Field(..., alias="sizeCategory")
    employees: str
    turnover: str
    location: str
    location_detail: str = Field(..., alias="locationDetail")

    match_score: int = Field(..., ge=0, le=100, alias="matchScore")
    match_summary: str = Field(..., alias="matchSummary")
