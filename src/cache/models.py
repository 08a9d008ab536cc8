# src/cache/models.py — v1
"""Cache domain models: CacheKey, InvalidationResult, CacheKeyProducer."""

from __future__ import annotations

from typing import Any, Protocol

from pydantic import BaseModel, Field, JsonValue, field_validator

__all__ = ["CacheKey", "CacheKeyProducer", "InvalidationResult", "JsonValue"]


class CacheKey(BaseModel):
    """Fingerprint and dependency tags for one cacheable result."""

    fingerprint: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, v: list[str]) -> list[str]:
        """Collapse duplicate tags, keeping first-seen order."""
        return list(dict.fromkeys(v))


class InvalidationResult(BaseModel):
    """Outcome of invalidating a single tag."""

    tag: str
    members: int = 0
    deleted: int = 0

    @property
    def stale(self) -> int:
        """Members whose entry was already gone."""
        return self.members - self.deleted


class CacheKeyProducer(Protocol):
    """Computes the fingerprint and tag set for a request description.

    Implementations must be deterministic: the same logical request always
    yields the same fingerprint.
    """

    def compute_cache_key(self, request: Any) -> CacheKey: ...
