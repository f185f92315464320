"""
Route definitions for the catalogue API.

Endpoints under /api/v1:
- GET  /projects               : list projects (search, tag filter, sort, pagination)
- GET  /projects/{project_id}  : get one project
- GET  /skills                 : every distinct tag, sorted
- GET  /metrics                : showcase statistics (decorative)
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from ..envelope import NOT_FOUND, failure, success
from .metrics import sample_metrics, utc_timestamp
from .query import filter_and_paginate
from .schemas import PageMeta, ProjectQuery
from .store import Catalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["catalog"])


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def get_rng(request: Request) -> random.Random:
    return request.app.state.rng


@router.get("/projects")
def list_projects(
    q: Optional[str] = Query(default=None, description="Text search (title/description/excerpt)"),
    tag: Optional[str] = Query(default=None, description="Filter by tag (case-insensitive)"),
    page: Optional[str] = Query(default=None, description="Page number, 1-indexed"),
    per_page: Optional[str] = Query(default=None, alias="perPage", description="Page size, max 50"),
    sort: Optional[str] = Query(default=None, description="newest | oldest"),
    catalog: Catalog = Depends(get_catalog),
):
    """
    Returns a paginated list of projects.

    Pagination parameters are received as raw strings and coerced by
    ``ProjectQuery``: bad values fall back to their defaults instead of
    producing a validation error.
    """
    params = ProjectQuery(q=q, tag=tag, page=page, per_page=per_page, sort=sort)
    result = filter_and_paginate(
        catalog.projects,
        q=params.q,
        tag=params.tag,
        page=params.page,
        per_page=params.per_page,
        sort=params.sort,
    )
    meta = PageMeta(total=result.total, page=result.page, per_page=result.per_page)
    return success(result.data, meta=meta.model_dump(by_alias=True))


@router.get("/projects/{project_id}")
def get_project(project_id: str, catalog: Catalog = Depends(get_catalog)):
    project = catalog.get(project_id)
    if project is None:
        return failure(NOT_FOUND, 404)
    return success(project)


@router.get("/skills")
def list_skills(catalog: Catalog = Depends(get_catalog)):
    return success(catalog.skills())


@router.get("/metrics")
def get_metrics(
    catalog: Catalog = Depends(get_catalog),
    rng: random.Random = Depends(get_rng),
):
    """Return showcase statistics.

    ``total_projects`` is exact; the remaining figures are decorative
    random values (see ``metrics.sample_metrics``).
    """
    stats = sample_metrics(len(catalog), rng)
    return success(stats, generated_at=utc_timestamp())
