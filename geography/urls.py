"""
Geography — URL Configuration

@file geography/urls.py
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import (
    DistrictViewSet,
    IslandViewSet,
    ProvinceViewSet,
    RegencyViewSet,
    VillageViewSet,
)

app_name = 'geography'

router = SimpleRouter()
router.register('provinces', ProvinceViewSet, basename='province')
router.register('regencies', RegencyViewSet, basename='regency')
router.register('districts', DistrictViewSet, basename='district')
router.register('villages', VillageViewSet, basename='village')
router.register('islands', IslandViewSet, basename='island')

urlpatterns = [
    path('', include(router.urls)),
]
