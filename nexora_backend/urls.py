"""
URL configuration for nexora_backend project.

Authentication endpoints live under /api/auth/; /health reports liveness.
"""
from django.contrib import admin
from django.http import JsonResponse
from django.urls import include, path
from django.utils import timezone


def health(request):
    return JsonResponse({"ok": True, "timestamp": timezone.now().isoformat()})


urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('accounts.urls')),
    path('health', health, name='health'),
]
