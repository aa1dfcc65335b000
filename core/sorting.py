"""
Core — Sort Policy

Turns a client-requested (sortBy, sortOrder) pair into a single-key
ordering directive. Each resource owns one policy parameterized by its
own column enumeration and defaults.

@file core/sorting.py
"""

from dataclasses import dataclass

from core.constants import SORT_ASC, SORT_DESC, SORT_ORDERS
from core.exceptions import UnsupportedSortField, UnsupportedSortOrder


@dataclass(frozen=True)
class OrderDirective:
    column: str
    direction: str = SORT_ASC

    @property
    def descending(self) -> bool:
        return self.direction == SORT_DESC

    def as_order_by(self) -> str:
        """Django ``order_by`` expression, e.g. ``'-name'``."""
        return f'-{self.column}' if self.descending else self.column


def normalize(sort_by, sort_order, allowed_columns, default_column, default_order=SORT_ASC) -> OrderDirective:
    if sort_by is None or sort_by == '':
        column = default_column
    elif sort_by in allowed_columns:
        column = sort_by
    else:
        raise UnsupportedSortField(sort_by, allowed_columns)

    if sort_order is None or sort_order == '':
        direction = default_order
    elif isinstance(sort_order, str) and sort_order.lower() in SORT_ORDERS:
        direction = sort_order.lower()
    else:
        raise UnsupportedSortOrder(sort_order, SORT_ORDERS)

    return OrderDirective(column=column, direction=direction)


class SortPolicy:
    """Per-resource sort rules: allowed columns plus a default directive."""

    def __init__(self, allowed_columns=('code', 'name'), default_column='code', default_order=SORT_ASC):
        if default_column not in allowed_columns:
            raise ValueError(f'Default sort column {default_column!r} is not an allowed column.')
        if default_order not in SORT_ORDERS:
            raise ValueError(f'Default sort order {default_order!r} must be one of {SORT_ORDERS}.')
        self.allowed_columns = tuple(allowed_columns)
        self.default_column = default_column
        self.default_order = default_order

    def __repr__(self):
        return (
            f'SortPolicy(allowed_columns={self.allowed_columns!r}, '
            f'default={self.default_column} {self.default_order})'
        )

    @property
    def default(self) -> OrderDirective:
        return OrderDirective(self.default_column, self.default_order)

    def normalize(self, sort_by=None, sort_order=None) -> OrderDirective:
        return normalize(
            sort_by, sort_order,
            self.allowed_columns, self.default_column, self.default_order,
        )
