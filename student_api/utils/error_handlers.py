"""
Error Handlers

This module contains error handling utilities and functions.
"""

from flask import current_app, jsonify
from ..models import db

NOT_FOUND_MESSAGE = 'Not found'


def not_found_response():
    """The fixed 404 body returned when a record does not exist"""
    return jsonify({'message': NOT_FOUND_MESSAGE}), 404


def orm_error_response(error, action):
    """Roll back, log, and report an ORM failure with its raw message."""
    db.session.rollback()
    current_app.logger.error(f"Error while {action}: {str(error)}", exc_info=True)
    return jsonify({'error': str(error)}), 500


def register_error_handlers(app):
    """Register error handlers with the Flask app"""

    @app.errorhandler(404)
    def not_found(error):
        return not_found_response()

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'message': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        return jsonify({'error': 'Internal server error'}), 500
