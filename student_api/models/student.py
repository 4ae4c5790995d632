"""
Student Model

FLOW OVERVIEW
- Student rows carry name/email plus ORM-maintained timestamps.
- create(data) / update_fields(data): copy the writable attributes from a request body and commit.
- find_by_id(id, relations): fetch one student, eager-loading the named relations.
- get_page(page, limit, sort, relations): one page ordered by creation time, plus the total count.
- to_dict(relations): serialize, embedding populated relations only.
"""

from datetime import datetime
from sqlalchemy.orm import selectinload
from .database import db
from .course import enrollments
from .utils import isoformat_or_none


class Student(db.Model):
    """Student record"""
    __tablename__ = 'students'

    # Attributes a request body may set
    WRITABLE_FIELDS = ('name', 'email')

    # Relations that can be populated, by query token
    RELATIONS = ('courses',)

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    courses = db.relationship(
        'Course',
        secondary=enrollments,
        back_populates='students',
        order_by='Course.id'
    )

    def __repr__(self):
        return f'<Student {self.name} ({self.email})>'

    def to_dict(self, relations=()):
        """Convert model to dictionary, embedding the given populated relations."""
        data = {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'createdAt': isoformat_or_none(self.created_at),
            'updatedAt': isoformat_or_none(self.updated_at)
        }
        if 'courses' in relations:
            data['courses'] = [course.to_dict() for course in self.courses]
        return data

    def update_fields(self, data):
        """Apply the supplied writable fields and commit; absent fields are left untouched."""
        for field in self.WRITABLE_FIELDS:
            if field in data:
                setattr(self, field, data[field])
        db.session.commit()
        return self

    def delete(self):
        """Delete the student; enrollment rows go with it"""
        db.session.delete(self)
        db.session.commit()

    @classmethod
    def create(cls, data):
        """Create a student from a request body, ignoring non-writable keys."""
        student = cls(**{field: data[field] for field in cls.WRITABLE_FIELDS if field in data})
        db.session.add(student)
        db.session.commit()
        return student

    @classmethod
    def loader_options(cls, relations):
        """Eager-load options for the named relations."""
        return [selectinload(getattr(cls, relation)) for relation in relations]

    @classmethod
    def find_by_id(cls, student_id, relations=()):
        """Get a student by primary key, or None."""
        return cls.query.options(*cls.loader_options(relations)).filter_by(id=student_id).first()

    @classmethod
    def get_page(cls, page, limit, sort='desc', relations=()):
        """Return (total, students) for one page ordered by creation time."""
        if sort == 'asc':
            order = (cls.created_at.asc(), cls.id.asc())
        else:
            order = (cls.created_at.desc(), cls.id.desc())

        total = cls.query.count()
        students = (
            cls.query
            .options(*cls.loader_options(relations))
            .order_by(*order)
            .limit(limit)
            .offset((page - 1) * limit)
            .all()
        )
        return total, students
