"""
Tests — Sort policy normalization.

@file core/tests/test_sorting.py
"""

import pytest

from core.exceptions import UnsupportedSortField, UnsupportedSortOrder
from core.sorting import OrderDirective, SortPolicy, normalize


class TestSortPolicy:

    def test_defaults_to_code_ascending(self):
        assert SortPolicy().normalize() == OrderDirective('code', 'asc')

    def test_explicit_column_and_order(self):
        assert SortPolicy().normalize('name', 'desc') == OrderDirective('name', 'desc')

    @pytest.mark.parametrize('order', ['DESC', 'Desc', 'desc'])
    def test_order_is_case_insensitive(self, order):
        assert SortPolicy().normalize('code', order).direction == 'desc'

    def test_missing_order_uses_default(self):
        assert SortPolicy().normalize('name') == OrderDirective('name', 'asc')

    def test_missing_column_uses_default(self):
        assert SortPolicy().normalize(sort_order='desc') == OrderDirective('code', 'desc')

    def test_empty_strings_are_treated_as_absent(self):
        assert SortPolicy().normalize('', '') == OrderDirective('code', 'asc')

    @pytest.mark.parametrize('column', ['province_code', 'id', 'NAME', 'created_at'])
    def test_unsupported_field(self, column):
        with pytest.raises(UnsupportedSortField) as excinfo:
            SortPolicy(('code', 'name')).normalize(column)
        assert excinfo.value.default_code == 'UNSUPPORTED_SORT_FIELD'

    @pytest.mark.parametrize('order', ['ascending', 'up', '1'])
    def test_unsupported_order(self, order):
        with pytest.raises(UnsupportedSortOrder) as excinfo:
            SortPolicy().normalize('code', order)
        assert excinfo.value.default_code == 'UNSUPPORTED_SORT_ORDER'

    def test_custom_default(self):
        policy = SortPolicy(('code', 'name'), default_column='name', default_order='desc')
        assert policy.default == OrderDirective('name', 'desc')
        assert policy.normalize() == OrderDirective('name', 'desc')

    def test_default_column_must_be_allowed(self):
        with pytest.raises(ValueError):
            SortPolicy(('code',), default_column='name')

    def test_module_level_normalize(self):
        directive = normalize('name', 'ASC', ('code', 'name'), 'code', 'asc')
        assert directive == OrderDirective('name', 'asc')


class TestOrderDirective:

    def test_as_order_by(self):
        assert OrderDirective('name', 'asc').as_order_by() == 'name'
        assert OrderDirective('name', 'desc').as_order_by() == '-name'
