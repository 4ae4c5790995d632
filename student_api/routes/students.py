"""
Student Routes

FLOW OVERVIEW
- /students [POST]
  • Create a student from {name, email}; 201 with the record.
- /students [GET]
  • Paginated, sorted list with optional ?populate=courses; {meta, data} envelope.
- /students/<id> [GET]
  • Single student; all relations are populated unless ?populate narrows them.
- /students/<id> [PUT]
  • Partial update of the supplied fields.
- /students/<id> [DELETE]
  • Remove the student; {"message": "Deleted"}.

A missing record answers 404 {"message": "Not found"}. Any ORM failure rolls
back and answers 500 {"error": "<raw message>"}.
"""

from flask import Blueprint, jsonify, request, current_app
from ..models import Student
from ..utils.query_params import ListQuery, resolve_relations
from ..utils.error_handlers import not_found_response, orm_error_response

students_bp = Blueprint('students', __name__)


def _json_body(missing_ok=False):
    """Request body as a dict; anything else is an error reported as 500."""
    data = request.get_json(silent=True)
    if data is None and missing_ok:
        # No JSON body: nothing supplied, nothing to change
        return {}
    if not isinstance(data, dict):
        raise ValueError('Request body must be a JSON object')
    return data


@students_bp.route('', methods=['POST'])
def create_student():
    """Create a new student"""
    try:
        student = Student.create(_json_body())
        current_app.logger.info(f"Created student {student.id}")
        return jsonify(student.to_dict()), 201
    except Exception as e:
        return orm_error_response(e, 'creating student')


@students_bp.route('', methods=['GET'])
def list_students():
    """
    List students one page at a time.

    Query parameters:
    - page: page number (default 1)
    - limit: items per page (default 10)
    - sort: asc or desc by creation time (default desc)
    - populate: comma-separated relations to include (courses)
    """
    query = ListQuery.from_args(request.args, current_app.config.get('DEFAULT_PAGE_LIMIT', 10))

    try:
        total, students = Student.get_page(query.page, query.limit, query.sort, query.relations)
    except Exception as e:
        return orm_error_response(e, 'listing students')

    return jsonify({
        'meta': {
            'totalItems': total,
            'page': query.page,
            'totalPages': query.total_pages(total),
            'sort': query.sort,
            'populate': query.populate
        },
        'data': [student.to_dict(query.relations) for student in students]
    })


@students_bp.route('/<int:student_id>', methods=['GET'])
def get_student(student_id):
    """Get a student by ID"""
    relations = resolve_relations(request.args.get('populate'), default_all=True)

    try:
        student = Student.find_by_id(student_id, relations)
    except Exception as e:
        return orm_error_response(e, f'fetching student {student_id}')

    if not student:
        return not_found_response()
    return jsonify(student.to_dict(relations))


@students_bp.route('/<int:student_id>', methods=['PUT'])
def update_student(student_id):
    """Update the supplied fields of a student"""
    try:
        student = Student.find_by_id(student_id)
        if not student:
            return not_found_response()
        student.update_fields(_json_body(missing_ok=True))
        current_app.logger.info(f"Updated student {student_id}")
        return jsonify(student.to_dict())
    except Exception as e:
        return orm_error_response(e, f'updating student {student_id}')


@students_bp.route('/<int:student_id>', methods=['DELETE'])
def delete_student(student_id):
    """Delete a student"""
    try:
        student = Student.find_by_id(student_id)
        if not student:
            return not_found_response()
        student.delete()
        current_app.logger.info(f"Deleted student {student_id}")
        return jsonify({'message': 'Deleted'})
    except Exception as e:
        return orm_error_response(e, f'deleting student {student_id}')
