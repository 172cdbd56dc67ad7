"""
Dashboard services module
"""

from .admin_dashboard import AdminDashboardService

__all__ = [
    'AdminDashboardService',
]
