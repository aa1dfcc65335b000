"""
Tests — Geography query services against the database.

@file geography/tests/test_services.py
"""

import pytest

from core.exceptions import InvalidFormat, UnsupportedSortField
from core.storage import ModelStorage
from geography.models import Regency
from geography.services import (
    DistrictService,
    IslandService,
    ProvinceService,
    RegencyService,
    VillageService,
)
from tests.factories import DistrictFactory, ProvinceFactory, RegencyFactory


pytestmark = pytest.mark.django_db


class TestRegencyService:

    def test_find_defaults_to_code_ascending(self, aceh):
        result = RegencyService().find()
        assert [r.code for r in result.data] == ['1101', '1102']
        assert result.meta.total == 2
        assert result.meta.page == 1

    def test_find_by_name_is_case_insensitive_on_sqlite(self, aceh):
        result = RegencyService().find(name='SINGKIL')
        assert [r.code for r in result.data] == ['1102']

    def test_find_sorted_by_name_desc(self, aceh):
        result = RegencyService().find(sort_by='name', sort_order='desc')
        assert [r.name for r in result.data] == ['Kabupaten Simeulue', 'Kabupaten Aceh Singkil']

    def test_find_pagination(self):
        province = ProvinceFactory(code='32')
        for i in range(1, 26):
            RegencyFactory(code=f'32{i:02d}', province=province)

        service = RegencyService()
        first = service.find(page=1, limit=10)
        last = service.find(page=3, limit=10)
        beyond = service.find(page=4, limit=10)

        assert first.meta.has_next and not first.meta.has_prev
        assert len(last.data) == 5
        assert not last.meta.has_next and last.meta.has_prev
        assert beyond.data == []
        assert beyond.meta.total == 25

    def test_find_by_code(self, aceh):
        regency = RegencyService().find_by_code('1101')
        assert regency.name == 'Kabupaten Simeulue'
        assert regency.province_id == '11'

    def test_find_by_code_unknown(self, aceh):
        assert RegencyService().find_by_code('9999') is None

    def test_find_by_code_malformed(self, aceh):
        with pytest.raises(InvalidFormat):
            RegencyService().find_by_code('110')

    def test_find_districts(self, aceh):
        districts = RegencyService().find_districts('1101')
        assert [d.code for d in districts] == ['110101', '110102']

    def test_find_districts_uses_district_sorting(self, aceh):
        districts = RegencyService().find_districts('1101', sort_by='name')
        assert [d.name for d in districts] == ['Simeulue Timur', 'Teupah Selatan']

    def test_find_districts_of_unknown_regency(self, aceh):
        assert RegencyService().find_districts('9999') is None

    def test_find_districts_of_regency_without_districts(self, aceh):
        assert RegencyService().find_districts('1102') == []

    def test_find_districts_requires_code_prefix(self, aceh):
        # Foreign key points at 1101 but the code belongs elsewhere.
        DistrictFactory(code='120101', regency=Regency.objects.get(code='1101'))
        codes = [d.code for d in RegencyService().find_districts('1101')]
        assert '120101' not in codes

    def test_find_islands_are_enriched(self, aceh):
        islands = RegencyService().find_islands('1101')
        assert [i.code for i in islands] == ['110140001', '110140002']
        assert islands[0].latitude == pytest.approx(2 + 29 / 60 + 32.60 / 3600)
        assert islands[0].longitude == pytest.approx(96 + 20.70 / 3600)

    def test_find_islands_rejects_unsupported_sort(self, aceh):
        with pytest.raises(UnsupportedSortField):
            RegencyService().find_islands('1101', sort_by='coordinate')


class TestProvinceService:

    def test_find_regencies(self, aceh):
        regencies = ProvinceService().find_regencies('11')
        assert [r.code for r in regencies] == ['1101', '1102']

    def test_find_regencies_of_unknown_province(self, aceh):
        assert ProvinceService().find_regencies('99') is None

    def test_malformed_province_code(self, aceh):
        with pytest.raises(InvalidFormat):
            ProvinceService().find_by_code('1')


class TestDistrictService:

    def test_find_villages(self, aceh):
        villages = DistrictService().find_villages('110101', sort_by='name', sort_order='asc')
        assert [v.name for v in villages] == ['Labuhan Bajau', 'Latiung']

    def test_find_villages_of_district_without_villages(self, aceh):
        assert DistrictService().find_villages('110102') == []

    def test_find_villages_of_unknown_district(self, aceh):
        assert DistrictService().find_villages('999999') is None

    def test_district_code_must_be_six_digits(self, aceh):
        with pytest.raises(InvalidFormat):
            DistrictService().find_villages('1101')


class TestVillageService:

    def test_find_by_name(self, aceh):
        result = VillageService().find(name='bajau')
        assert [v.code for v in result.data] == ['1101012002']

    def test_find_by_code(self, aceh):
        assert VillageService().find_by_code('1101012001').name == 'Latiung'
        assert VillageService().find_by_code('1101019999') is None


class TestIslandService:

    def test_find_enriches_each_island(self, aceh):
        result = IslandService().find()
        assert result.meta.total == 2
        assert all(hasattr(i, 'latitude') and hasattr(i, 'longitude') for i in result.data)

    def test_find_by_code_enriched(self, aceh):
        island = IslandService().find_by_code('110140002')
        assert island.latitude == pytest.approx(2 + 22 / 60 + 49.31 / 3600)

    def test_find_by_code_unknown(self, aceh):
        assert IslandService().find_by_code('110149999') is None


class TestModelStorage:

    def test_sqlite_supports_insensitive_filtering(self):
        assert ModelStorage(Regency).supports_insensitive_filtering() is True

    def test_capability_follows_vendor_setting(self, settings):
        settings.INSENSITIVE_FILTERING_VENDORS = ['postgresql']
        assert ModelStorage(Regency).supports_insensitive_filtering() is False

    def test_find_related_unknown_relation(self, aceh):
        with pytest.raises(KeyError):
            ModelStorage(Regency).find_related('1101', 'villages')
