"""
Wilayah-ID — Root URL Configuration

All API endpoints are namespaced under /api/v1/.
The DRF browsable API is available for route inspection in development.

@file config/urls.py
"""

from django.contrib import admin
from django.urls import include, path
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.reverse import reverse

admin.site.site_header = 'Wilayah-ID Administration'
admin.site.site_title = 'Wilayah-ID'
admin.site.index_title = 'Indonesian Administrative Regions'


@api_view(['GET'])
@permission_classes([AllowAny])
def api_root(request, format=None):
    """Wilayah-ID API v1 — endpoint directory."""
    return Response({
        'provinces': reverse('api-v1:geography:province-list', request=request, format=format),
        'regencies': reverse('api-v1:geography:regency-list', request=request, format=format),
        'districts': reverse('api-v1:geography:district-list', request=request, format=format),
        'villages': reverse('api-v1:geography:village-list', request=request, format=format),
        'islands': reverse('api-v1:geography:island-list', request=request, format=format),
    })


api_v1_patterns = [
    path('', api_root, name='api-root'),
    path('', include('geography.urls', namespace='geography')),
]

urlpatterns = [
    path('admin/', admin.site.urls),

    # Versioned API
    path('api/v1/', include((api_v1_patterns, 'api-v1'))),
]
