"""
Database Models Package

FLOW OVERVIEW
- Centralizes SQLAlchemy DB instance and model imports for convenient usage.
- Exposes: db, Student, Course, enrollments.
"""

from .database import db
from .course import Course, enrollments
from .student import Student

__all__ = [
    'db',
    'Student',
    'Course',
    'enrollments'
]
