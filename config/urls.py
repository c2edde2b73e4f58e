"""
URL configuration for the PiggyBank API.

Routes mirror the public contract: no /api prefix and no trailing slashes.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import health_check

urlpatterns = [
    # Liveness probe
    path('health', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication
    path('auth/', include('apps.accounts.urls')),

    # API endpoints
    path('couples/', include('apps.couples.urls')),
    path('', include('apps.piggybanks.urls')),
    path('', include('apps.vouchers.urls')),
    path('', include('apps.actions.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
