"""
Test configuration and shared fixtures for Student API tests.

This file contains:
- Centralized test configuration
- Shared fixtures used across multiple test files
- Common test data builders
"""

import pytest
from datetime import datetime, timedelta
from student_api import create_app
from student_api.models import db, Student, Course


# Centralized test configuration
TEST_CONFIG = {
    'TESTING': True,
    'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
    'SECRET_KEY': 'test-secret-key',
    'DEFAULT_PAGE_LIMIT': 10,
    'LOG_LEVEL': 'DEBUG'
}

BASE_TIME = datetime(2024, 1, 1, 9, 0, 0)


@pytest.fixture
def app():
    """Create and configure a new app instance for each test."""
    app = create_app(TEST_CONFIG)
    return app


@pytest.fixture
def client(app):
    """Create a test client for the app."""
    return app.test_client()


@pytest.fixture
def app_context(app):
    """Create an application context for database operations."""
    with app.app_context():
        yield


@pytest.fixture
def db_session(app_context):
    """Create a database session and clean up after tests."""
    db.create_all()
    yield db.session
    db.session.remove()
    db.drop_all()


def make_student(session, index, **overrides):
    """Add a student whose creation time is `index` minutes after BASE_TIME."""
    fields = {
        'name': f'Student {index:02d}',
        'email': f'student{index:02d}@example.com',
        'created_at': BASE_TIME + timedelta(minutes=index),
        'updated_at': BASE_TIME + timedelta(minutes=index)
    }
    fields.update(overrides)
    student = Student(**fields)
    session.add(student)
    session.commit()
    return student


@pytest.fixture
def student_factory(db_session):
    """Build students on demand: student_factory(index, **overrides)."""
    def factory(index, **overrides):
        return make_student(db_session, index, **overrides)
    return factory


@pytest.fixture
def test_student(db_session):
    """Create a single student for testing."""
    return make_student(db_session, 0, name='Ada Lovelace', email='ada@example.com')


@pytest.fixture
def many_students(db_session):
    """Create twelve students with strictly increasing creation times."""
    return [make_student(db_session, i) for i in range(12)]


@pytest.fixture
def test_courses(db_session):
    """Create two courses for testing."""
    courses = [
        Course(title='Algebra', code='MATH-101'),
        Course(title='Mechanics', code='PHYS-110')
    ]
    db_session.add_all(courses)
    db_session.commit()
    return courses


@pytest.fixture
def enrolled_student(db_session, test_student, test_courses):
    """A student enrolled in both test courses."""
    test_student.courses.extend(test_courses)
    db_session.commit()
    return test_student
