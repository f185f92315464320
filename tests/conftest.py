import random
from datetime import date

import pytest
from fastapi.testclient import TestClient

from showcase.catalog.store import Catalog, load_catalog
from showcase.config import Settings
from showcase.main import create_app

from .helpers import make_project


@pytest.fixture
def catalog():
    return load_catalog()


@pytest.fixture
def client(catalog):
    app = create_app(settings=Settings(), catalog=catalog, rng=random.Random(1234))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def many_projects():
    # 23 projects, one per day, tagged alternately
    return [
        make_project(
            f"p-{i}",
            date(2024, 1, 1 + i),
            tags=("Python",) if i % 2 == 0 else ("Go", "CLI"),
            title=f"Tool {i}",
            description="even" if i % 2 == 0 else "odd",
        )
        for i in range(23)
    ]


@pytest.fixture
def big_catalog(many_projects):
    return Catalog(many_projects)
