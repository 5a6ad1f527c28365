"""Shared data models (TypedDict) for the gallery pipeline."""
from __future__ import annotations

from typing import TypedDict


class SanitizedRequest(TypedDict):
    """Gallery parameters after filtering; both keys are always present."""

    url: str
    limit: int


class Album(TypedDict):
    """A single category entry from a Piwigo ``pwg.categories.getList`` call."""

    name: str
    comment: str
    tn_url: str
    url: str
