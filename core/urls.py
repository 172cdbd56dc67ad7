"""
URL configuration for the site backend.

Public endpoints live under /api/contact and /api/analytics/, the
token-protected admin API under /api/admin/.
"""
from django.contrib import admin
from django.urls import path, include

from core.views import ApiInfoView, HealthView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('health', HealthView.as_view(), name='health'),
    path('api', ApiInfoView.as_view(), name='api-info'),
    path('api/contact', include('contact.urls')),
    path('api/analytics/', include('analytics.urls')),
    path('api/admin/', include('contact.admin_urls')),
    path('api/admin/', include('dashboards.urls')),
]
