"""
Geography — Permissions

Administrative reference data is public and read-only over the API.

@file geography/permissions.py
"""

from rest_framework.permissions import SAFE_METHODS, BasePermission


class ReadOnly(BasePermission):
    """Allow GET / HEAD / OPTIONS for everyone, nothing else."""

    def has_permission(self, request, view):
        return request.method in SAFE_METHODS
