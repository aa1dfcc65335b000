"""
Core — Resource Query Service

Generic read service shared by every administrative resource. A
subclass declares its model, code format, sort policy and child
relations; the base class composes validation, sorting, filtering and
pagination over a storage accessor.

Not-found is an ordinary outcome (``None``); validation faults are
raised before any storage call; storage errors propagate unchanged.

@file core/services.py
"""

import logging

from core.pagination import PaginatedResult, Paginator
from core.sorting import SortPolicy
from core.storage import ModelStorage, SubstringFilter
from core.validators import CodeFormat

logger = logging.getLogger('wilayah')


class ResourceQueryService:
    """
    Declarative attributes:

    ``model``
        Django model backing the resource.
    ``code_format``
        ``CodeFormat`` of the resource's own code.
    ``sorter``
        ``SortPolicy`` for listings of this resource, including when it
        is listed as the child of another resource.
    ``children``
        ``{relation_name: (child service class, child fk field)}``.
    ``name_field``
        Column the ``name`` filter applies to.
    """

    model = None
    code_format = CodeFormat()
    sorter = SortPolicy()
    children = {}
    name_field = 'name'

    def __init__(self, storage=None, paginator=None):
        if storage is None:
            relations = {name: fk for name, (_, fk) in self.children.items()}
            storage = ModelStorage(self.model, relations=relations)
        self.storage = storage
        self.paginator = paginator or Paginator()

    @property
    def resource_name(self) -> str:
        return self.model.__name__ if self.model is not None else type(self).__name__

    @staticmethod
    def prepare(record):
        """Hook applied exactly once to every record leaving the service."""
        return record

    def name_filter(self, name):
        if not name:
            return None
        return SubstringFilter(
            field=self.name_field,
            value=name,
            insensitive=self.storage.supports_insensitive_filtering(),
        )

    def find(self, *, name=None, sort_by=None, sort_order=None, page=None, limit=None) -> PaginatedResult:
        order = self.sorter.normalize(sort_by, sort_order)
        where = self.name_filter(name)
        logger.debug(
            'find %s name=%r order=%s page=%s limit=%s',
            self.resource_name, name, order.as_order_by(), page, limit,
        )

        result = self.paginator.paginate(
            self.storage.find_many,
            self.storage.count,
            where=where,
            order=order,
            page=page,
            limit=limit,
        )
        result.data = [self.prepare(record) for record in result.data]
        return result

    def find_by_code(self, code):
        code = self.code_format.validate(code)
        record = self.storage.find_one(code)
        if record is None:
            logger.debug('%s %s not found', self.resource_name, code)
            return None
        return self.prepare(record)

    def find_children(self, parent_code, relation, *, sort_by=None, sort_order=None):
        """
        Children of ``parent_code`` through ``relation``, ordered by the
        child's own sort policy. ``None`` when the parent does not exist,
        an empty list when it exists without children.
        """
        child_service_class, _ = self.children[relation]
        parent_code = self.code_format.validate(parent_code)
        order = child_service_class.sorter.normalize(sort_by, sort_order)

        records = self.storage.find_related(parent_code, relation, order)
        if records is None:
            logger.debug('%s %s not found, no %s', self.resource_name, parent_code, relation)
            return None
        return [child_service_class.prepare(record) for record in records]
