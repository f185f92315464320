import math
from datetime import date

import pytest

from showcase.catalog.query import filter_and_paginate
from showcase.catalog.schemas import ProjectQuery

from .helpers import make_project


def ids(projects):
    return [p.id for p in projects]


def test_defaults_sort_newest_first(catalog):
    result = filter_and_paginate(catalog.projects)
    assert ids(result.data) == ["proj-1", "proj-3", "proj-2"]
    assert result.total == 3
    assert (result.page, result.per_page) == (1, 10)


def test_oldest_is_reverse_of_newest(many_projects):
    newest = filter_and_paginate(many_projects, sort="newest", per_page=50).data
    oldest = filter_and_paginate(many_projects, sort="oldest", per_page=50).data
    assert ids(newest) == list(reversed(ids(oldest)))


def test_unknown_sort_keeps_input_order(catalog):
    result = filter_and_paginate(catalog.projects, sort="popular")
    assert ids(result.data) == ["proj-1", "proj-2", "proj-3"]


def test_sort_is_stable_for_equal_dates():
    same_day = [make_project(f"s-{i}", date(2025, 1, 1)) for i in range(4)]
    assert ids(filter_and_paginate(same_day, sort="newest").data) == ["s-0", "s-1", "s-2", "s-3"]
    assert ids(filter_and_paginate(same_day, sort="oldest").data) == ["s-0", "s-1", "s-2", "s-3"]


def test_does_not_mutate_input(many_projects):
    before = list(many_projects)
    filter_and_paginate(many_projects, q="tool", tag="python", sort="oldest", page=2, per_page=3)
    assert many_projects == before


def test_search_is_case_insensitive_substring(catalog):
    assert ids(filter_and_paginate(catalog.projects, q="CHESS").data) == ["proj-2"]
    # "backend" only appears in proj-1's excerpt
    assert ids(filter_and_paginate(catalog.projects, q="Backend Work").data) == ["proj-1"]


def test_search_covers_title_description_and_excerpt():
    projects = [
        make_project("t", date(2025, 1, 3), title="Needle here"),
        make_project("d", date(2025, 1, 2), description="a needle in description"),
        make_project("e", date(2025, 1, 1), excerpt="NEEDLE in excerpt"),
        make_project("x", date(2025, 1, 4), tags=("needle",)),
    ]
    result = filter_and_paginate(projects, q="needle")
    assert ids(result.data) == ["t", "d", "e"]
    assert result.total == 3


def test_blank_search_is_ignored(catalog):
    assert filter_and_paginate(catalog.projects, q="   ").total == 3
    assert filter_and_paginate(catalog.projects, q="").total == 3


def test_tag_filter_is_exact_and_case_insensitive(catalog):
    assert ids(filter_and_paginate(catalog.projects, tag="python").data) == ["proj-1"]
    assert ids(filter_and_paginate(catalog.projects, tag="MACHINE LEARNING").data) == ["proj-1"]
    assert filter_and_paginate(catalog.projects, tag="pyth").total == 0


def test_search_and_tag_combine(many_projects):
    result = filter_and_paginate(many_projects, q="odd", tag="cli", per_page=50)
    assert result.total == 11
    assert all("CLI" in p.tags for p in result.data)


def test_out_of_range_page_is_empty(catalog):
    result = filter_and_paginate(catalog.projects, page=5, per_page=2)
    assert result.data == []
    assert result.total == 3
    assert result.page == 5


def test_second_page_of_two(catalog):
    result = filter_and_paginate(catalog.projects, page=2, per_page=2)
    assert ids(result.data) == ["proj-2"]
    assert result.total == 3


@pytest.mark.parametrize("per_page", [1, 4, 7, 23, 50])
def test_pages_cover_filtered_sequence_once(many_projects, per_page):
    full = filter_and_paginate(many_projects, tag="python", per_page=50).data
    total = len(full)
    pages = []
    for page in range(1, math.ceil(total / per_page) + 1):
        result = filter_and_paginate(many_projects, tag="python", page=page, per_page=per_page)
        assert result.total == total
        pages.extend(result.data)
    assert ids(pages) == ids(full)


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 1), ("", 1), ("abc", 1), ("0", 1), ("-4", 1), ("2.5", 1), ("٢", 1), ("2_0", 1), ("+2", 2), ("3", 3), (" 7 ", 7)],
)
def test_page_coercion(raw, expected):
    assert ProjectQuery(page=raw).page == expected


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 10), ("x", 10), ("0", 10), ("-1", 10), ("5", 5), ("50", 50), ("51", 50), ("1000", 50), ("2_0", 10), ("٢", 10)],
)
def test_per_page_coercion(raw, expected):
    assert ProjectQuery(per_page=raw).per_page == expected


def test_per_page_alias_and_sort_default():
    params = ProjectQuery.model_validate({"perPage": "20", "sort": ""})
    assert params.per_page == 20
    assert params.sort == "newest"
    assert ProjectQuery(sort="oldest").sort == "oldest"
    assert ProjectQuery(sort="weird").sort == "weird"
