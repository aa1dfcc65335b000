"""
Geography — Django Admin Configuration

Read-only browsing of the administrative reference tables. Rows come
from seed_geography; the admin never writes them.

@file geography/admin.py
"""

from django.contrib import admin
from django.utils.html import format_html
from django.utils.translation import gettext_lazy as _

from .geo import to_decimal_pair
from .models import District, Island, Province, Regency, Village


class ReferenceAdmin(admin.ModelAdmin):
    search_fields = ('code', 'name')
    ordering = ('code',)
    show_full_result_count = False
    list_per_page = 50

    def get_readonly_fields(self, request, obj=None):
        return [field.name for field in self.model._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Province)
class ProvinceAdmin(ReferenceAdmin):
    list_display = ('code', 'name', 'regencies_count')

    @admin.display(description=_('Regencies'))
    def regencies_count(self, obj):
        return obj.regencies.count()


@admin.register(Regency)
class RegencyAdmin(ReferenceAdmin):
    list_display = ('code', 'name', 'province')
    list_select_related = ('province',)
    list_filter = ('province',)


@admin.register(District)
class DistrictAdmin(ReferenceAdmin):
    list_display = ('code', 'name', 'regency')
    list_select_related = ('regency',)
    raw_id_fields = ('regency',)


@admin.register(Village)
class VillageAdmin(ReferenceAdmin):
    list_display = ('code', 'name', 'district')
    list_select_related = ('district',)
    raw_id_fields = ('district',)


@admin.register(Island)
class IslandAdmin(ReferenceAdmin):
    list_display = (
        'code', 'name', 'regency', 'coordinate', 'decimal_coordinate',
        'is_populated', 'is_outermost_small',
    )
    list_select_related = ('regency',)
    list_filter = ('is_populated', 'is_outermost_small')
    raw_id_fields = ('regency',)

    @admin.display(description=_('Decimal'))
    def decimal_coordinate(self, obj):
        try:
            latitude, longitude = to_decimal_pair(obj.coordinate)
        except ValueError:
            return '—'
        return format_html('<code>{}, {}</code>', f'{latitude:.6f}', f'{longitude:.6f}')
