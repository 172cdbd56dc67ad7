"""
Analytics services: event aggregation for reporting.
"""
