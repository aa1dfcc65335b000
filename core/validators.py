"""
Core — Code & Name Validators

Fixed-width numeric codes identify every administrative unit; the width
encodes the hierarchy depth. A code is checked here before it is allowed
anywhere near the storage layer.

@file core/validators.py
"""

from dataclasses import dataclass

from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from core.constants import NAME_FORBIDDEN_SYMBOLS, NAME_MAX_LENGTH, NAME_MIN_LENGTH
from core.exceptions import InvalidFormat


@dataclass(frozen=True)
class CodeFormat:
    """
    Format of one entity's code.

    ``width`` is the exact length (min == max); ``None`` accepts any
    non-empty length.
    """

    field: str = 'code'
    width: int | None = None
    digits: bool = True

    def describe(self) -> str:
        kind = 'digits' if self.digits else 'characters'
        if self.width is None:
            return f'{self.field} must be a non-empty string of {kind}.'
        return f'{self.field} must be exactly {self.width} {kind}.'

    def is_valid(self, raw) -> bool:
        if not isinstance(raw, str) or not raw:
            return False
        if self.width is not None and len(raw) != self.width:
            return False
        # str.isdigit() accepts superscripts and other unicode digits.
        if self.digits and not (raw.isascii() and raw.isdigit()):
            return False
        return True

    def validate(self, raw) -> str:
        """Return ``raw`` unchanged, or raise InvalidFormat naming the field."""
        if not self.is_valid(raw):
            raise InvalidFormat(self.field, self.describe())
        return raw


def has_forbidden_symbol(value: str) -> bool:
    return any(symbol in value for symbol in NAME_FORBIDDEN_SYMBOLS)


def validate_name(value):
    """Django field validator for administrative-unit names."""
    if not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
        raise ValidationError(
            _('Name must be between %(min)d and %(max)d characters.'),
            code='invalid_length',
            params={'min': NAME_MIN_LENGTH, 'max': NAME_MAX_LENGTH},
        )
    if has_forbidden_symbol(value):
        raise ValidationError(
            _('Name must not contain any of %(symbols)s'),
            code='forbidden_symbol',
            params={'symbols': NAME_FORBIDDEN_SYMBOLS},
        )
