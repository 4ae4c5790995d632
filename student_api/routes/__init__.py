"""
Routes Package

This package contains all Flask route blueprints.
"""

from .main import main_bp
from .students import students_bp

__all__ = [
    'main_bp',
    'students_bp'
]
