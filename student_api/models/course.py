"""
Course Model

This module contains the Course model and the `enrollments` association
table linking students to courses.
"""

from datetime import datetime
from .database import db
from .utils import isoformat_or_none


enrollments = db.Table(
    'enrollments',
    db.Column('student_id', db.Integer, db.ForeignKey('students.id', ondelete='CASCADE'), primary_key=True),
    db.Column('course_id', db.Integer, db.ForeignKey('courses.id', ondelete='CASCADE'), primary_key=True),
    db.Column('created_at', db.DateTime, default=datetime.utcnow),
)


class Course(db.Model):
    """A course students can be enrolled in"""
    __tablename__ = 'courses'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    code = db.Column(db.String(50), unique=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    students = db.relationship('Student', secondary=enrollments, back_populates='courses')

    def __repr__(self):
        return f'<Course {self.title}>'

    def to_dict(self):
        """Convert model to dictionary."""
        return {
            'id': self.id,
            'title': self.title,
            'code': self.code,
            'createdAt': isoformat_or_none(self.created_at),
            'updatedAt': isoformat_or_none(self.updated_at)
        }
