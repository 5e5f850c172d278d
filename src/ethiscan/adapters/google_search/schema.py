"""Pydantic models for the Custom Search JSON API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GoogleSearchBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SearchItem(GoogleSearchBaseModel):
    title: str | None = None
    link: str | None = None
    snippet: str | None = None


class SearchError(GoogleSearchBaseModel):
    code: int | None = None
    message: str | None = None
    status: str | None = None


class SearchResponse(GoogleSearchBaseModel):
    items: list[SearchItem] = Field(default_factory=list["SearchItem"])
    error: SearchError | None = None

    @property
    def first_snippet(self) -> str | None:
        if not self.items:
            return None
        snippet = (self.items[0].snippet or "").strip()
        return snippet or None
