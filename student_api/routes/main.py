"""
Main site routes.

Serves the service descriptor, health and Prometheus metrics endpoints.
"""

from datetime import datetime
from flask import Blueprint, jsonify, Response, url_for
from ..utils.prom_metrics import metrics_latest, CONTENT_TYPE_LATEST

main_bp = Blueprint('main', __name__)

SERVICE_NAME = 'student-api'
SERVICE_VERSION = '1.0.0'


@main_bp.route('/')
def home():
    """Service descriptor"""
    return jsonify({
        'service': SERVICE_NAME,
        'version': SERVICE_VERSION,
        'links': {
            'students': url_for('students.list_students'),
            'health': url_for('main.health'),
            'metrics': url_for('main.metrics')
        }
    })


@main_bp.route('/health')
def health():
    """Health check endpoint"""
    return jsonify({'status': 'healthy', 'timestamp': datetime.utcnow().isoformat()})


@main_bp.route('/metrics')
def metrics():
    """Prometheus metrics endpoint."""
    output = metrics_latest()
    return Response(output, mimetype=CONTENT_TYPE_LATEST)
