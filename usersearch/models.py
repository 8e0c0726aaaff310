"""Pydantic models for user records and the rendered result view."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

EMPTY_RESULTS_MESSAGE = "No results found"
INPUT_PLACEHOLDER = "Search users by ID, address, name..."


class User(BaseModel):
    """A directory record as delivered by the data source.

    Text fields that are missing or ``null`` in the payload fall back to empty
    values so that they simply never match a query.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int | str
    name: str = ""
    items: list[str] = Field(default_factory=list)
    address: str = ""
    pincode: str = ""

    @field_validator("name", "address", "pincode", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("items", mode="before")
    @classmethod
    def _coerce_items(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [str(item) for item in value if item is not None]
        return value

    @property
    def id_text(self) -> str:
        return str(self.id)


class HighlightSpan(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    is_match: bool = False


class ResultRow(BaseModel):
    index: int
    user: User
    id_spans: list[HighlightSpan]
    name_spans: list[HighlightSpan]
    address_spans: list[HighlightSpan]
    items_match: bool = False
    items_notice: str | None = None
    highlighted: bool = False


class ResultsView(BaseModel):
    query: str
    visible: bool
    rows: list[ResultRow] = Field(default_factory=list)
    placeholder: str = INPUT_PLACEHOLDER
    empty_message: str = EMPTY_RESULTS_MESSAGE

    @property
    def empty(self) -> bool:
        return self.visible and not self.rows
