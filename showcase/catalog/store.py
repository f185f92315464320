"""
Read-only data store for the catalogue API.

The catalogue is built once when the application starts, either from
the ``SEED_PROJECTS`` literal below or from a JSON file named by the
``CATALOG_FILE`` setting. Each entry is converted into a ``Project``
instance from ``schemas`` and the resulting ``Catalog`` is shared by
every request without locking: nothing mutates it after construction.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from pydantic import ValidationError

from .schemas import Project

logger = logging.getLogger(__name__)


SEED_PROJECTS: List[Dict[str, Any]] = [
    {
        "id": "proj-1",
        "title": "Smart Queue Manager",
        "description": "Computer-vision powered queue analysis system using YOLOv8 for cart detection.",
        "tags": ["Python", "YOLOv8", "Machine Learning", "Backend"],
        "demo": "none",
        "repo": "https://github.com/Lightzzz011/Smart-Queue-Manager",
        "excerpt": (
            "Trained a custom YOLOv8 model for cart detection and integrated the "
            "inference pipeline into the backend workflow."
        ),
        "created_at": "2025-10-12",
        "difficulty": "Advanced",
    },
    {
        "id": "proj-2",
        "title": "Crazy Chess Analyzer",
        "description": "A chess PGN analyzer that computes a 'craziness score' based on moves and patterns.",
        "tags": ["JavaScript", "Chess.js", "Analysis"],
        "demo": "none",
        "repo": "https://github.com/Lightzzz011/crazyyychess",
        "excerpt": (
            "Implemented a scoring algorithm that evaluates how unconventional or "
            "chaotic a chess game is using PGN parsing."
        ),
        "created_at": "2025-06-20",
        "difficulty": "Intermediate",
    },
    {
        "id": "proj-3",
        "title": "DriversProject",
        "description": "Full-stack project for driver-related management with a hosted live frontend.",
        "tags": ["React", "Next.js", "Frontend"],
        "demo": "https://driveshort-1mp9uy0f2-sai-srinivas-projects-112b70ed.vercel.app/",
        "repo": "https://github.com/Lightzzz011/DriversProject",
        "excerpt": (
            "Developed the entire project end-to-end including UI, routing, data "
            "handling and deployments."
        ),
        "created_at": "2025-07-15",
        "difficulty": "Beginner",
    },
]


class CatalogError(Exception):
    """Raised when the catalogue cannot be built."""


class Catalog:
    """Immutable, ordered collection of projects.

    Parameters
    ----------
    projects : Iterable[Project]
        The projects in display order. Identifiers must be unique.

    Raises
    ------
    CatalogError
        If two projects share the same ``id``.
    """

    def __init__(self, projects: Iterable[Project]) -> None:
        items = tuple(projects)
        index: Dict[str, Project] = {}
        for project in items:
            if project.id in index:
                raise CatalogError(f"Duplicate project id: {project.id!r}")
            index[project.id] = project
        self._projects = items
        self._index = MappingProxyType(index)

    @property
    def projects(self) -> Tuple[Project, ...]:
        return self._projects

    def __len__(self) -> int:
        return len(self._projects)

    def __iter__(self) -> Iterator[Project]:
        return iter(self._projects)

    def get(self, project_id: str) -> Optional[Project]:
        """Return the project whose id matches exactly, or ``None``."""
        return self._index.get(project_id)

    def skills(self) -> List[str]:
        """Return every distinct tag across the catalogue, sorted."""
        return sorted({tag for project in self._projects for tag in project.tags})


def _build_projects(raw: Any) -> List[Project]:
    if not isinstance(raw, list):
        raise CatalogError("Catalog data must be a JSON array of project objects")
    try:
        return [Project.model_validate(entry) for entry in raw]
    except ValidationError as exc:
        raise CatalogError(f"Invalid project record: {exc}") from exc


def load_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    """Build the catalogue for the running process.

    Parameters
    ----------
    path : Optional[Union[str, Path]]
        JSON file holding an array of project objects. When omitted,
        the built-in ``SEED_PROJECTS`` are used.

    Returns
    -------
    Catalog
        The read-only catalogue.

    Raises
    ------
    CatalogError
        If the file cannot be read, is not valid JSON, holds invalid
        records or repeats an identifier.
    """
    if path is None:
        catalog = Catalog(_build_projects(SEED_PROJECTS))
        logger.info("Loaded %d seed projects", len(catalog))
        return catalog

    data_file = Path(path)
    try:
        with data_file.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as exc:
        logger.error("Cannot read catalog file %s: %s", data_file, exc)
        raise CatalogError(f"Cannot read catalog file {data_file}: {exc}") from exc
    catalog = Catalog(_build_projects(raw))
    logger.info("Loaded %d projects from %s", len(catalog), data_file)
    return catalog
