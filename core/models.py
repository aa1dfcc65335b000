"""
Core — Base Models

Reusable abstract models for reference tables.

@file core/models.py
"""

from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _


class TimestampMixin(models.Model):
    """Adds created_at / updated_at to any model."""

    created_at = models.DateTimeField(
        _('created at'), auto_now_add=True, db_index=True,
    )
    updated_at = models.DateTimeField(
        _('updated at'), auto_now=True,
    )

    class Meta:
        abstract = True


class ReferenceModel(TimestampMixin):
    """
    Base for administrative reference data: the fixed-width code is the
    primary key, and rows are only written by the seed command.

    ``parent_field`` names the foreign key to the parent unit; the code
    of a child must start with its parent's code.
    """

    parent_field = None

    class Meta:
        abstract = True

    def __str__(self):
        return f'{self.pk} {getattr(self, "name", "")}'.strip()

    @property
    def parent_code(self):
        if self.parent_field is None:
            return None
        return getattr(self, f'{self.parent_field}_id')

    def clean(self):
        super().clean()
        parent_code = self.parent_code
        if parent_code and self.pk and not str(self.pk).startswith(parent_code):
            raise ValidationError({
                'code': _('Code must start with the parent code %(parent)s.') % {'parent': parent_code},
            })
