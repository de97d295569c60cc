# apps/common/permissions.py
from rest_framework import permissions

class IsSuperuser(permissions.BasePermission):
    """Maintenance endpoints (activity cleanup) are for superusers only."""
    message = "Admin access required"

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and request.user.is_superuser)
