"""
Utilities Package

This package contains utility functions and helper modules.
"""

from . import query_params
from . import error_handlers
from . import prom_metrics

__all__ = [
    'query_params',
    'error_handlers',
    'prom_metrics'
]
