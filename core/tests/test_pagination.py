"""
Tests — Paginator bounds and metadata.

@file core/tests/test_pagination.py
"""

import pytest

from core.pagination import PaginationMeta, Paginator


class ListSource:
    """Serves a fixed list through the fetch/count callables."""

    def __init__(self, rows):
        self.rows = list(rows)
        self.fetches = []
        self.counts = []

    def fetch(self, where, order, offset, limit):
        self.fetches.append((where, order, offset, limit))
        return self.rows[offset:offset + limit]

    def count(self, where):
        self.counts.append(where)
        return len(self.rows)


def paginate(rows, **kwargs):
    source = ListSource(rows)
    paginator = Paginator(default_limit=10, max_limit=100)
    return paginator.paginate(source.fetch, source.count, **kwargs), source


class TestPaginator:

    @pytest.mark.parametrize('page', [None, 0, -1, -50])
    def test_page_below_one_becomes_one(self, page):
        result, source = paginate(range(25), page=page, limit=10)
        assert result.meta.page == 1
        assert source.fetches[0][2] == 0

    @pytest.mark.parametrize('limit', [101, 500, 10_000])
    def test_limit_truncated_to_max(self, limit):
        result, source = paginate(range(250), limit=limit)
        assert result.meta.limit == 100
        assert len(result.data) == 100
        assert source.fetches[0][3] == 100

    @pytest.mark.parametrize('limit', [None, 0, -3])
    def test_missing_limit_uses_default(self, limit):
        result, _ = paginate(range(25), limit=limit)
        assert result.meta.limit == 10

    def test_first_page_metadata(self):
        result, _ = paginate(range(25), page=1, limit=10)
        assert result.data == list(range(10))
        assert result.meta == PaginationMeta(
            page=1, limit=10, total=25, total_pages=3, has_next=True, has_prev=False,
        )

    def test_last_page_is_partial(self):
        result, source = paginate(range(25), page=3, limit=10)
        assert result.data == [20, 21, 22, 23, 24]
        assert result.meta.has_next is False
        assert result.meta.has_prev is True
        assert source.fetches[0][2] == 20

    def test_page_past_the_end_is_empty_not_an_error(self):
        result, _ = paginate(range(25), page=7, limit=10)
        assert result.data == []
        assert result.meta.total == 25
        assert result.meta.total_pages == 3
        assert result.meta.has_next is False
        assert result.meta.has_prev is True

    def test_empty_source(self):
        result, _ = paginate([], page=1)
        assert result.data == []
        assert result.meta.total == 0
        assert result.meta.total_pages == 0
        assert result.meta.has_next is False
        assert result.meta.has_prev is False

    def test_count_and_fetch_share_the_filter(self):
        where = object()
        _, source = paginate(range(5), where=where)
        assert source.counts == [where]
        assert source.fetches[0][0] is where

    def test_default_limit_never_exceeds_max(self):
        assert Paginator(default_limit=50, max_limit=20).default_limit == 20

    def test_limits_read_from_settings(self, settings):
        settings.PAGINATION_DEFAULT_LIMIT = 5
        settings.PAGINATION_MAX_LIMIT = 7
        paginator = Paginator()
        assert paginator.effective_limit(None) == 5
        assert paginator.effective_limit(50) == 7


class TestPaginationMeta:

    @pytest.mark.parametrize('total,limit,pages', [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (100, 7, 15)])
    def test_total_pages(self, total, limit, pages):
        assert PaginationMeta.build(page=1, limit=limit, total=total).total_pages == pages

    def test_as_dict(self):
        meta = PaginationMeta.build(page=2, limit=10, total=25)
        assert meta.as_dict() == {
            'page': 2, 'limit': 10, 'total': 25,
            'total_pages': 3, 'has_next': True, 'has_prev': True,
        }
