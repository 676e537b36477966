import pytest

from football_backend.core.pagination import Page, normalize_pagination, total_pages
from football_backend.services.team_service import TeamService


@pytest.mark.parametrize(
    "page, limit, expected",
    [
        (1, 0, (1, 10)),
        (1, 500, (1, 10)),
        (1, 50, (1, 50)),
        (1, 100, (1, 100)),
        (0, 10, (1, 10)),
        (-3, 5, (1, 5)),
        (4, 1, (4, 1)),
    ],
)
def test_normalize_pagination(page, limit, expected):
    assert normalize_pagination(page, limit) == expected


def test_total_pages_is_ceiling():
    assert total_pages(0, 10) == 0
    assert total_pages(10, 10) == 1
    assert total_pages(11, 10) == 2
    assert total_pages(23, 10) == 3


def test_page_build():
    page = Page.build(["a", "b"], total=12, page=2, limit=10)
    assert page.total_pages == 2
    assert page.items == ["a", "b"]


def test_last_page_holds_remainder(store, make_team):
    for _ in range(23):
        make_team()

    service = TeamService(store)
    first, total, _, _ = service.list(page=1, limit=10)
    last, _, _, _ = service.list(page=3, limit=10)
    beyond, _, _, _ = service.list(page=4, limit=10)

    assert total == 23
    assert len(first) == 10
    assert len(last) == 3
    assert beyond == []


def test_list_clamps_bad_limit(store, make_team):
    for _ in range(12):
        make_team()

    items, total, page, limit = TeamService(store).list(page=0, limit=0)
    assert (page, limit, total) == (1, 10, 12)
    assert len(items) == 10
