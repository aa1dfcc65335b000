"""
Geography — Application Configuration
"""

from django.apps import AppConfig


class GeographyConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'geography'
    verbose_name = 'Indonesian Administrative Regions'
