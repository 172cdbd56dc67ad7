"""
Admin Dashboard App

Reporting endpoints for site administrators: dashboard overview,
analytics report, CSV export and settings.
"""
