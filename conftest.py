"""
Wilayah-ID — Root conftest for pytest

Shared fixtures available to all test modules.

@file conftest.py
"""

import pytest
from rest_framework.test import APIClient

from tests.factories import (
    DistrictFactory,
    IslandFactory,
    ProvinceFactory,
    RegencyFactory,
    VillageFactory,
)


@pytest.fixture
def api_client():
    """Unauthenticated DRF test client."""
    return APIClient()


@pytest.fixture
def aceh(db):
    """
    A small slice of the hierarchy:
      11 Aceh → 1101 Kabupaten Simeulue → 110101 Teupah Selatan → 2 villages
      1101 also has two islands; 1102 has no districts at all.
    """
    province = ProvinceFactory(code='11', name='Aceh')
    simeulue = RegencyFactory(code='1101', name='Kabupaten Simeulue', province=province)
    RegencyFactory(code='1102', name='Kabupaten Aceh Singkil', province=province)
    district = DistrictFactory(code='110101', name='Teupah Selatan', regency=simeulue)
    DistrictFactory(code='110102', name='Simeulue Timur', regency=simeulue)
    VillageFactory(code='1101012001', name='Latiung', district=district)
    VillageFactory(code='1101012002', name='Labuhan Bajau', district=district)
    IslandFactory(
        code='110140001', name='Pulau Babi', regency=simeulue,
        coordinate='02°29\'32.60" N 096°00\'20.70" E', is_populated=True,
    )
    IslandFactory(
        code='110140002', name='Pulau Teupah', regency=simeulue,
        coordinate='02°22\'49.31" N 096°24\'24.55" E',
    )
    return province
