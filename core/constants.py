"""
Core — Constants

Project-wide defaults shared by the query layer. Environment overrides
live in config/settings.

@file core/constants.py
"""

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

SORT_ASC = 'asc'
SORT_DESC = 'desc'
SORT_ORDERS = (SORT_ASC, SORT_DESC)

# Symbols that never appear in an administrative-unit name.
NAME_FORBIDDEN_SYMBOLS = "'()-./"
NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 255

# Database vendors on which case-insensitive substring matching is requested.
DEFAULT_INSENSITIVE_FILTERING_VENDORS = ('postgresql', 'sqlite')
