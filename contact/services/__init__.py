"""
Contact services: tag classification, admin queries and notifications.
"""
