"""
Core — Storage Accessor

The narrow boundary between the query layer and persistence. Services
only ever call the five methods of ``ModelStorage``; anything that
quacks the same way (e.g. an in-memory stub in tests) can stand in.

Errors raised by the ORM propagate unchanged.

@file core/storage.py
"""

import logging
from dataclasses import dataclass

from django.conf import settings
from django.db import connections, router

from core.constants import DEFAULT_INSENSITIVE_FILTERING_VENDORS

logger = logging.getLogger('wilayah')


@dataclass(frozen=True)
class SubstringFilter:
    """``field`` contains ``value``; case-insensitive when ``insensitive``."""

    field: str
    value: str
    insensitive: bool = False

    def as_lookup(self) -> dict:
        operator = 'icontains' if self.insensitive else 'contains'
        return {f'{self.field}__{operator}': self.value}


class ModelStorage:
    """
    Storage accessor over a Django model whose primary key is its code.

    ``relations`` maps a relation name (the reverse accessor on the
    parent, e.g. ``'districts'``) to the child's foreign-key field name.
    Children are matched on that foreign key *and* on the parent-code
    prefix of their own code.
    """

    def __init__(self, model, relations=None):
        self.model = model
        self.relations = dict(relations or {})

    def __repr__(self):
        return f'ModelStorage({self.model.__name__})'

    def get_queryset(self):
        return self.model._default_manager.all()

    def _apply(self, queryset, where=None, order=None):
        if where is not None:
            queryset = queryset.filter(**where.as_lookup())
        if order is not None:
            queryset = queryset.order_by(order.as_order_by())
        return queryset

    def find_one(self, key):
        return self.get_queryset().filter(pk=key).first()

    def find_many(self, where=None, order=None, offset=0, limit=None):
        queryset = self._apply(self.get_queryset(), where, order)
        if limit is None:
            return list(queryset[offset:])
        return list(queryset[offset:offset + limit])

    def count(self, where=None) -> int:
        return self._apply(self.get_queryset(), where).count()

    def find_related(self, parent_key, relation_name, order=None):
        """
        Children of ``parent_key`` through ``relation_name``, or ``None``
        when the parent does not exist.
        """
        if relation_name not in self.relations:
            raise KeyError(f'{self.model.__name__} has no relation {relation_name!r}')

        parent = self.find_one(parent_key)
        if parent is None:
            return None

        related = getattr(parent, relation_name)
        queryset = related.filter(
            **{self.relations[relation_name]: parent.pk},
            code__startswith=parent.pk,
        )
        return list(self._apply(queryset, order=order))

    def supports_insensitive_filtering(self) -> bool:
        alias = router.db_for_read(self.model)
        vendor = connections[alias].vendor
        vendors = getattr(settings, 'INSENSITIVE_FILTERING_VENDORS', DEFAULT_INSENSITIVE_FILTERING_VENDORS)
        return vendor in vendors
