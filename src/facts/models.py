"""Fact and category models."""

import base64

from pydantic import BaseModel, ConfigDict, Field, model_validator

from shared_types import CategoryGroup

MAX_TEXT_CHARS = 1000
MAX_INSIGHT_CHARS = 500
MAX_SOURCE_CHARS = 200


def derive_fact_id(text: str, category: str) -> str:
    """Deterministic id from content: base64 of the first 50 chars of text plus category."""
    return base64.b64encode(f"{text[:50]}-{category}".encode("utf-8")).decode("ascii")


class Fact(BaseModel):
    """A short contrarian statement. Identity is the id alone."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    text: str
    category: str
    source: str = ""
    contrary_insight: str = Field(default="", alias="contraryInsight")

    @model_validator(mode="before")
    @classmethod
    def fill_id(cls, data):
        if isinstance(data, dict) and not data.get("id"):
            data = dict(data)
            data["id"] = derive_fact_id(str(data.get("text", "")), str(data.get("category", "")))
        return data

    def __eq__(self, other) -> bool:
        if not isinstance(other, Fact):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def to_dict(self) -> dict:
        """JSON shape used by the bundled file and persisted favorites."""
        return self.model_dump(by_alias=True)


def validate_fact(fact: Fact) -> bool:
    """True if the fact passes the content checks applied to loaded files."""
    return (
        bool(fact.text)
        and bool(fact.category)
        and len(fact.text) <= MAX_TEXT_CHARS
        and len(fact.contrary_insight) <= MAX_INSIGHT_CHARS
        and len(fact.source) <= MAX_SOURCE_CHARS
    )


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    display_name: str
    icon: str
    group: CategoryGroup
