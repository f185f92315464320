"""
Catalog package for the project showcase API.

This package holds the read-only project catalogue, the query engine
that searches, filters, sorts and paginates it, and the route
definitions exposing it over HTTP: project listing and lookup, the
list of skills (distinct tags) and the decorative showcase metrics.
The catalogue is built once at startup from the seed data in
``store`` or from a JSON file, and is never modified afterwards.
"""

from .router import router as catalog_router  # noqa: F401
