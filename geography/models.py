"""
Geography — Models

Indonesian administrative reference data:
  Province → Regency → District → Village, plus Islands attached to a
  Regency.

Every code is a fixed-width, zero-padded numeric string used as the
primary key, and every child code starts with its parent's code. Rows
are loaded by the seed_geography command and never mutated by the API.

@file geography/models.py
"""

from django.core.validators import RegexValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from core.models import ReferenceModel
from core.validators import validate_name


def numeric_code_validator(width):
    return RegexValidator(
        regex=rf'^\d{{{width}}}$',
        message=_('Code must be exactly %(width)d digits.') % {'width': width},
        code='invalid_code',
    )


# Format of the island coordinate, e.g. 03°19'03.44" N 097°07'41.73" E
DMS_COORDINATE_REGEX = (
    r'^\d{1,3}°\d{1,2}\'\d{1,2}(?:\.\d+)?" [NS] '
    r'\d{1,3}°\d{1,2}\'\d{1,2}(?:\.\d+)?" [EW]$'
)


class Province(ReferenceModel):
    code = models.CharField(
        _('code'), max_length=2, primary_key=True,
        validators=[numeric_code_validator(2)],
    )
    name = models.CharField(_('name'), max_length=255, validators=[validate_name], db_index=True)

    class Meta:
        verbose_name = _('province')
        verbose_name_plural = _('provinces')
        ordering = ['code']


class Regency(ReferenceModel):
    parent_field = 'province'

    code = models.CharField(
        _('code'), max_length=4, primary_key=True,
        validators=[numeric_code_validator(4)],
    )
    name = models.CharField(_('name'), max_length=255, validators=[validate_name], db_index=True)
    province = models.ForeignKey(
        Province,
        on_delete=models.CASCADE,
        related_name='regencies',
        db_column='province_code',
        verbose_name=_('province'),
    )

    class Meta:
        verbose_name = _('regency')
        verbose_name_plural = _('regencies')
        ordering = ['code']
        indexes = [
            models.Index(fields=['province', 'code'], name='regency_province_code_idx'),
        ]


class District(ReferenceModel):
    parent_field = 'regency'

    code = models.CharField(
        _('code'), max_length=6, primary_key=True,
        validators=[numeric_code_validator(6)],
    )
    name = models.CharField(_('name'), max_length=255, validators=[validate_name], db_index=True)
    regency = models.ForeignKey(
        Regency,
        on_delete=models.CASCADE,
        related_name='districts',
        db_column='regency_code',
        verbose_name=_('regency'),
    )

    class Meta:
        verbose_name = _('district')
        verbose_name_plural = _('districts')
        ordering = ['code']
        indexes = [
            models.Index(fields=['regency', 'code'], name='district_regency_code_idx'),
        ]


class Village(ReferenceModel):
    parent_field = 'district'

    code = models.CharField(
        _('code'), max_length=10, primary_key=True,
        validators=[numeric_code_validator(10)],
    )
    name = models.CharField(_('name'), max_length=255, validators=[validate_name], db_index=True)
    district = models.ForeignKey(
        District,
        on_delete=models.CASCADE,
        related_name='villages',
        db_column='district_code',
        verbose_name=_('district'),
    )

    class Meta:
        verbose_name = _('village')
        verbose_name_plural = _('villages')
        ordering = ['code']
        indexes = [
            models.Index(fields=['district', 'code'], name='village_district_code_idx'),
        ]


class Island(ReferenceModel):
    """
    An island from the national gazetteer. Unassigned islands have no
    regency. ``coordinate`` keeps the sexagesimal form of the source data;
    decimal degrees are derived on the way out (see geography.geo).
    """

    parent_field = 'regency'

    code = models.CharField(
        _('code'), max_length=20, primary_key=True,
        validators=[RegexValidator(r'^\d+$', _('Code must contain only digits.'), 'invalid_code')],
    )
    name = models.CharField(_('name'), max_length=255, db_index=True)
    regency = models.ForeignKey(
        Regency,
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='islands',
        db_column='regency_code',
        verbose_name=_('regency'),
    )
    coordinate = models.CharField(
        _('coordinate'), max_length=50,
        validators=[RegexValidator(DMS_COORDINATE_REGEX, _('Invalid DMS coordinate.'), 'invalid_coordinate')],
    )
    is_populated = models.BooleanField(_('populated'), default=False)
    is_outermost_small = models.BooleanField(_('outermost small island'), default=False)

    class Meta:
        verbose_name = _('island')
        verbose_name_plural = _('islands')
        ordering = ['code']
        indexes = [
            models.Index(fields=['regency', 'code'], name='island_regency_code_idx'),
        ]
