"""
Geography — Serializers

Query-parameter serializers (coercion and shape checks at the HTTP
boundary) and read serializers for every administrative resource.

@file geography/serializers.py
"""

from rest_framework import serializers

from core.constants import NAME_MAX_LENGTH, NAME_MIN_LENGTH
from core.validators import validate_name

from .models import District, Island, Province, Regency, Village


# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------

class SortQuerySerializer(serializers.Serializer):
    """
    ``sortBy`` / ``sortOrder`` are passed through as strings; whether
    they are allowed is decided by the resource's sort policy.
    """

    sortBy = serializers.CharField(required=False, allow_blank=True)
    sortOrder = serializers.CharField(required=False, allow_blank=True)

    def to_service_kwargs(self) -> dict:
        data = self.validated_data
        return {
            'sort_by': data.get('sortBy') or None,
            'sort_order': data.get('sortOrder') or None,
        }


class FindQuerySerializer(SortQuerySerializer):
    name = serializers.CharField(required=False, allow_blank=True, validators=[validate_name])
    # Out-of-range page/limit are clamped by the paginator, not rejected.
    page = serializers.IntegerField(required=False)
    limit = serializers.IntegerField(required=False)

    def to_service_kwargs(self) -> dict:
        kwargs = super().to_service_kwargs()
        data = self.validated_data
        kwargs.update({
            'name': data.get('name') or None,
            'page': data.get('page'),
            'limit': data.get('limit'),
        })
        return kwargs


class IslandFindQuerySerializer(FindQuerySerializer):
    """Island names may contain the symbols other units forbid (``Pulau Sei-Bela``)."""

    name = serializers.CharField(
        required=False, allow_blank=True,
        min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH,
    )


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------

class ProvinceSerializer(serializers.ModelSerializer):
    class Meta:
        model = Province
        fields = ['code', 'name']
        read_only_fields = fields


class RegencySerializer(serializers.ModelSerializer):
    province_code = serializers.CharField(source='province_id', read_only=True)

    class Meta:
        model = Regency
        fields = ['code', 'name', 'province_code']
        read_only_fields = fields


class DistrictSerializer(serializers.ModelSerializer):
    regency_code = serializers.CharField(source='regency_id', read_only=True)

    class Meta:
        model = District
        fields = ['code', 'name', 'regency_code']
        read_only_fields = fields


class VillageSerializer(serializers.ModelSerializer):
    district_code = serializers.CharField(source='district_id', read_only=True)

    class Meta:
        model = Village
        fields = ['code', 'name', 'district_code']
        read_only_fields = fields


class IslandSerializer(serializers.ModelSerializer):
    """Expects islands enriched with decimal ``latitude``/``longitude``."""

    regency_code = serializers.CharField(source='regency_id', read_only=True, allow_null=True)
    latitude = serializers.FloatField(read_only=True)
    longitude = serializers.FloatField(read_only=True)

    class Meta:
        model = Island
        fields = [
            'code', 'name', 'regency_code', 'coordinate',
            'latitude', 'longitude',
            'is_populated', 'is_outermost_small',
        ]
        read_only_fields = fields
