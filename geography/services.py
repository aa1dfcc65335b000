"""
Geography — Service Layer

One query service per administrative resource. Each declares its code
width, sort policy and child relations; the shared behaviour lives in
core.services.ResourceQueryService.

@file geography/services.py
"""

from core.services import ResourceQueryService
from core.sorting import SortPolicy
from core.validators import CodeFormat

from .geo import with_decimal_coordinate
from .models import District, Island, Province, Regency, Village


class VillageService(ResourceQueryService):
    model = Village
    code_format = CodeFormat(field='code', width=10)
    sorter = SortPolicy(('code', 'name'), default_column='code')


class DistrictService(ResourceQueryService):
    model = District
    code_format = CodeFormat(field='code', width=6)
    sorter = SortPolicy(('code', 'name'), default_column='code')
    children = {
        'villages': (VillageService, 'district_id'),
    }

    def find_villages(self, code, *, sort_by=None, sort_order=None):
        return self.find_children(code, 'villages', sort_by=sort_by, sort_order=sort_order)


class IslandService(ResourceQueryService):
    model = Island
    code_format = CodeFormat(field='code', width=None)
    sorter = SortPolicy(('code', 'name'), default_column='code')

    prepare = staticmethod(with_decimal_coordinate)


class RegencyService(ResourceQueryService):
    model = Regency
    code_format = CodeFormat(field='code', width=4)
    sorter = SortPolicy(('code', 'name'), default_column='code')
    children = {
        'districts': (DistrictService, 'regency_id'),
        'islands': (IslandService, 'regency_id'),
    }

    def find_districts(self, code, *, sort_by=None, sort_order=None):
        return self.find_children(code, 'districts', sort_by=sort_by, sort_order=sort_order)

    def find_islands(self, code, *, sort_by=None, sort_order=None):
        """Islands of a regency, each with decimal latitude/longitude."""
        return self.find_children(code, 'islands', sort_by=sort_by, sort_order=sort_order)


class ProvinceService(ResourceQueryService):
    model = Province
    code_format = CodeFormat(field='code', width=2)
    sorter = SortPolicy(('code', 'name'), default_column='code')
    children = {
        'regencies': (RegencyService, 'province_id'),
    }

    def find_regencies(self, code, *, sort_by=None, sort_order=None):
        return self.find_children(code, 'regencies', sort_by=sort_by, sort_order=sort_order)
