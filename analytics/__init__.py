"""
Site Analytics App

Records page views and interaction events sent by the marketing site and
aggregates them for the admin dashboard.
"""
