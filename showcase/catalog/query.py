"""
Search, filter, sort and paginate a sequence of projects.

``filter_and_paginate`` is a pure function: it copies its input, never
mutates it and returns the requested page together with the number of
matches before pagination.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence

from .schemas import DEFAULT_PER_PAGE, DEFAULT_SORT, Project


class PageResult(NamedTuple):
    data: List[Project]
    total: int
    page: int
    per_page: int


def _norm(s: Optional[str]) -> str:
    return (s or "").strip().lower()


def _haystack(project: Project) -> str:
    return " ".join((project.title, project.description, project.excerpt)).lower()


def filter_and_paginate(
    items: Sequence[Project],
    q: Optional[str] = None,
    tag: Optional[str] = None,
    page: int = 1,
    per_page: int = DEFAULT_PER_PAGE,
    sort: Optional[str] = DEFAULT_SORT,
) -> PageResult:
    """Return one page of ``items`` matching ``q`` and ``tag``.

    Parameters
    ----------
    items : Sequence[Project]
        Projects in their natural order.
    q : Optional[str]
        Case-insensitive substring searched in the title, description
        and excerpt. Empty or blank means no search.
    tag : Optional[str]
        Case-insensitive exact tag match. Empty or blank means no filter.
    page : int
        1-indexed page number. Pages past the end are empty.
    per_page : int
        Number of projects per page.
    sort : Optional[str]
        ``"newest"`` or ``"oldest"`` by ``created_at``; any other value
        keeps the filtered order.

    Returns
    -------
    PageResult
        The page, the total number of matches and the ``page`` and
        ``per_page`` values used.
    """
    out = list(items)

    nq = _norm(q)
    if nq:
        out = [p for p in out if nq in _haystack(p)]

    ntag = _norm(tag)
    if ntag:
        out = [p for p in out if any(t.lower() == ntag for t in p.tags)]

    if sort == "newest":
        out.sort(key=lambda p: p.created_at, reverse=True)
    elif sort == "oldest":
        out.sort(key=lambda p: p.created_at)

    total = len(out)
    start = (page - 1) * per_page
    return PageResult(data=out[start:start + per_page], total=total, page=page, per_page=per_page)
