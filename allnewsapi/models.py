"""Pydantic models for data structures."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, SkipValidation, model_validator

# Checked by the parameter encoder rather than at construction time.
DateOption = Annotated[str | datetime | None, SkipValidation]


class SearchOptions(BaseModel):
    """Parameters shared by the search and headlines endpoints."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    query: str = Field(default="", description="Search query string")
    start_date: DateOption = Field(default=None, description="Start date, string or datetime")
    end_date: DateOption = Field(default=None, description="End date, string or datetime")
    content: bool | None = Field(default=None, description="Whether to include full content")
    lang: tuple[str, ...] = Field(default=(), description="Languages to filter by")
    country: tuple[str, ...] = Field(default=(), description="Countries to filter by")
    region: tuple[str, ...] = Field(default=(), description="Regions to filter by")
    category: tuple[str, ...] = Field(default=(), description="Categories to filter by")
    attributes: tuple[str, ...] = Field(
        default=(), description="Attributes to search in (title, description, content)"
    )
    publisher: tuple[str, ...] = Field(default=(), description="Publishers to filter by")
    max_results: int = Field(default=0, description="Maximum number of results (1-100)")
    page: int = Field(default=0, description="Page number for pagination")
    sort_by: str = Field(default="", description="Sort by 'publishedAt' or 'relevance'")
    format: str = Field(default="", description="Response format (json, csv, xlsx)")

    def with_page(self, page: int) -> "SearchOptions":
        """Return a copy of these options asking for another page."""
        return self.model_copy(update={"page": page})


class ResponseModel(BaseModel):
    """Base for decoded API payloads.

    A JSON null leaves the field at its default, so ``"image": null`` reads
    as ``""`` and ``"articles": null`` as an empty list.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Source(ResponseModel):
    """Publisher of an article."""

    name: str = ""
    url: str = ""


class Article(ResponseModel):
    """News article returned by the API."""

    title: str = ""
    description: str = ""
    category: str = ""
    content: str = ""
    country: str = ""
    region: str = ""
    language: str = Field(default="", alias="lang")
    sentiment: str = ""
    url: str = ""
    image: str = ""
    published_at: datetime | None = Field(default=None, alias="publishedAt")
    source: Source = Field(default_factory=Source)


class SearchResponse(ResponseModel):
    """Response from the search and headlines endpoints."""

    total_articles: int = Field(default=0, alias="totalArticles")
    current_page: int = Field(default=0, alias="currentPage")
    next_page: int | None = Field(default=None, alias="nextPage")
    articles: list[Article] = Field(default_factory=list)

    @property
    def has_next_page(self) -> bool:
        return self.next_page is not None
