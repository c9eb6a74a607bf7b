from rest_framework.permissions import BasePermission

from .models import Account


class IsAdminRole(BasePermission):
    message = "Forbidden: Not an admin"

    def has_permission(self, request, view):
        token = getattr(request, "auth", None)
        if token is None:
            return False
        return token.get("role") == Account.ROLE_ADMIN
