"""
Database management commands, available through the `flask` CLI.

- flask init-db                      → create all tables
- flask seed-courses TITLE [TITLE…]  → add courses by title
- flask enroll STUDENT_ID COURSE_ID  → enroll a student in a course
"""

import click
from flask.cli import with_appcontext
from .models import db, Student, Course


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create all database tables"""
    db.create_all()
    click.echo('✅ Database initialized successfully!')


@click.command('seed-courses')
@click.argument('titles', nargs=-1, required=True)
@with_appcontext
def seed_courses_command(titles):
    """Create one course per TITLE"""
    for title in titles:
        course = Course(title=title)
        db.session.add(course)
        db.session.flush()
        click.echo(f"📚 Course {course.id}: {course.title}")
    db.session.commit()


@click.command('enroll')
@click.argument('student_id', type=int)
@click.argument('course_id', type=int)
@with_appcontext
def enroll_command(student_id, course_id):
    """Enroll STUDENT_ID in COURSE_ID"""
    student = db.session.get(Student, student_id)
    if not student:
        raise click.ClickException(f"Student {student_id} not found!")
    course = db.session.get(Course, course_id)
    if not course:
        raise click.ClickException(f"Course {course_id} not found!")

    if course not in student.courses:
        student.courses.append(course)
        db.session.commit()
    click.echo(f"✅ {student.name} enrolled in {course.title}")


def register_commands(app):
    """Attach the management commands to the app's CLI"""
    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_courses_command)
    app.cli.add_command(enroll_command)
