"""
Pydantic schema definitions for the catalog module.

The ``Project`` model captures a single portfolio entry as it is
rendered by the front‑end. Records are frozen: the catalog is built
once at startup and never modified afterwards. ``ProjectQuery``
gathers the listing parameters (search text, tag, page, page size and
sort order) into one structure with documented defaults, and coerces
malformed pagination values instead of rejecting them. ``Metrics``
describes the payload of the showcase statistics endpoint.
"""

import re
from datetime import date
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 50
DEFAULT_SORT = "newest"

_INT_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


class Project(BaseModel):
    """A single portfolio project.

    ``tags`` keep their original casing; matching against them is
    case-insensitive. ``demo`` holds either a URL or the literal
    ``"none"`` when the project has no hosted demo. ``difficulty`` is
    one of ``Beginner``, ``Intermediate`` or ``Advanced`` but is not
    strictly validated.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    tags: Tuple[str, ...] = ()
    demo: str = "none"
    repo: str = ""
    excerpt: str = ""
    created_at: date
    difficulty: str = "Beginner"


def _parse_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)


class ProjectQuery(BaseModel):
    """Listing parameters for ``GET /api/v1/projects``.

    Defaults: ``page=1``, ``perPage=10`` (capped at 50) and
    ``sort="newest"``. A missing, non-numeric or non-positive ``page``
    becomes 1; a missing, non-numeric or non-positive ``perPage``
    becomes 10. Unknown ``sort`` values are kept as-is and leave the
    filtered order untouched.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    q: Optional[str] = None
    tag: Optional[str] = None
    page: int = DEFAULT_PAGE
    per_page: int = Field(default=DEFAULT_PER_PAGE, alias="perPage")
    sort: str = DEFAULT_SORT

    @field_validator("page", mode="before")
    @classmethod
    def _coerce_page(cls, value: Any) -> int:
        number = _parse_int(value)
        if number is None or number < 1:
            return DEFAULT_PAGE
        return number

    @field_validator("per_page", mode="before")
    @classmethod
    def _coerce_per_page(cls, value: Any) -> int:
        number = _parse_int(value)
        if number is None or number < 1:
            return DEFAULT_PER_PAGE
        return min(MAX_PER_PAGE, number)

    @field_validator("sort", mode="before")
    @classmethod
    def _coerce_sort(cls, value: Any) -> str:
        if value is None or value == "":
            return DEFAULT_SORT
        return str(value)


class PageMeta(BaseModel):
    """Pagination metadata returned alongside a page of projects."""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    page: int
    per_page: int = Field(alias="perPage")


class Metrics(BaseModel):
    """Showcase statistics.

    Only ``total_projects`` is real. The star, fork and visitor counts
    are decorative values drawn around a fixed base; they are not
    collected from any telemetry source.
    """

    total_projects: int
    total_stars: int
    total_forks: int
    active_visitors_last_24h: int
