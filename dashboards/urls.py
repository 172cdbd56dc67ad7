"""
Admin Dashboard URL Configuration

Mounted under ``/api/admin/`` next to the contact admin URLs.
"""
from django.urls import path
from .views import DashboardView, AdminAnalyticsView, AdminSettingsView
from .exports import ExportContactsCsvView

app_name = 'dashboards'

urlpatterns = [
    path('dashboard', DashboardView.as_view(), name='dashboard'),
    path('analytics', AdminAnalyticsView.as_view(), name='analytics'),
    path('export/contacts', ExportContactsCsvView.as_view(), name='export-contacts'),
    path('settings', AdminSettingsView.as_view(), name='settings'),
]
