"""
Core — Pagination

Bounded page/limit pagination with a hard max cap. Out-of-range input
is corrected, never rejected: page < 1 becomes 1, an oversized limit is
truncated to the maximum, and a page past the end yields an empty page
with accurate metadata.

@file core/pagination.py
"""

import math
from dataclasses import asdict, dataclass
from typing import Any, Callable

from django.conf import settings

from core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


@dataclass(frozen=True)
class PaginationMeta:
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, *, page: int, limit: int, total: int) -> 'PaginationMeta':
        total_pages = math.ceil(total / limit) if total else 0
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class PaginatedResult:
    data: list
    meta: PaginationMeta


class Paginator:
    """Computes effective page/limit and runs the count + bounded fetch."""

    def __init__(self, default_limit=None, max_limit=None):
        self.default_limit = default_limit or getattr(settings, 'PAGINATION_DEFAULT_LIMIT', DEFAULT_PAGE_SIZE)
        self.max_limit = max_limit or getattr(settings, 'PAGINATION_MAX_LIMIT', MAX_PAGE_SIZE)
        if self.default_limit > self.max_limit:
            self.default_limit = self.max_limit

    def effective_page(self, page) -> int:
        if page is None or page < 1:
            return 1
        return int(page)

    def effective_limit(self, limit) -> int:
        if limit is None or limit < 1:
            return self.default_limit
        return min(int(limit), self.max_limit)

    def paginate(
        self,
        fetch: Callable[..., list],
        count: Callable[..., int],
        *,
        where=None,
        order=None,
        page=None,
        limit=None,
    ) -> PaginatedResult:
        """
        ``fetch(where, order, offset, limit)`` returns the page rows and
        ``count(where)`` the total; both see the same filter.
        """
        page = self.effective_page(page)
        limit = self.effective_limit(limit)

        total = count(where)
        data = list(fetch(where, order, (page - 1) * limit, limit))

        return PaginatedResult(
            data=data,
            meta=PaginationMeta.build(page=page, limit=limit, total=total),
        )
