#!/usr/bin/env python3
"""
Student API application entry point.

This module selects configuration based on environment variables, creates the
Flask application via `create_app`, and eagerly initializes an in-memory
database, since such a database only lives as long as the process. When
executed directly, it runs the development server. In production, a WSGI
server should import `app` from this module.

Environment variables of interest:
- FLASK_ENV: if set to 'testing', enables in-memory DB and testing flags.
- DATABASE_URL: if set to 'sqlite:///:memory:' forces in-memory DB init.
- SECRET_KEY, LOG_LEVEL, DEFAULT_PAGE_LIMIT: consumed by `create_app`.
"""

import os
from student_api import create_app
from student_api.models import db

# Create app instance
if os.getenv('FLASK_ENV') == 'testing':
    # Use test configuration for testing environment
    test_config = {
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': os.getenv('DATABASE_URL', 'sqlite:///:memory:'),
        'SECRET_KEY': os.getenv('SECRET_KEY', 'test-secret-key'),
        'DEFAULT_PAGE_LIMIT': int(os.getenv('DEFAULT_PAGE_LIMIT', 10)),
        'LOG_LEVEL': os.getenv('LOG_LEVEL', 'DEBUG')
    }
    app = create_app(test_config)
else:
    app = create_app()

print("🚀 Starting Student API server...")
if os.getenv('FLASK_ENV') == 'testing':
    print("🧪 Running in TESTING mode with in-memory database")
    with app.app_context():
        db.create_all()
        print("📊 Test database initialized")
elif app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite:///:memory:':
    print("💾 Running with in-memory database")
    with app.app_context():
        db.create_all()
        print("📊 In-memory database initialized")
else:
    print("📊 Run `flask --app app init-db` to create the tables")

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
