"""
Model Utilities

This module contains utility functions for the models package.
"""


def isoformat_or_none(value):
    """Render a datetime as ISO-8601, passing None through"""
    return value.isoformat() if value else None
