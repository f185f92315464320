"""
Simple configuration management.

The ``Settings`` dataclass reads configuration from environment
variables when it is instantiated. Defaults are provided for all
fields, so the service runs out of the box on port 4000 with the
built-in seed catalogue.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Project Showcase API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  When unset, logs only go to the console.
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Optional JSON file (an array of project objects) replacing the
    # built-in seed catalogue.  Read once at startup.
    catalog_file: Optional[str] = field(default_factory=lambda: os.getenv("CATALOG_FILE") or None)

    # Seed for the decorative metrics generator.  Leave unset for
    # different numbers on every call.
    metrics_seed: Optional[int] = field(default_factory=lambda: _env_int("METRICS_SEED"))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _env_int("PORT") or 4000)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
