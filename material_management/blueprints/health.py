"""
Health check endpoint.
"""
from datetime import datetime, timezone
from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError
from ..extensions import db
from ..utils.logging_utils import get_logger, performance_logger

bp = Blueprint('health', __name__, url_prefix='/api')
logger = get_logger('health')


@bp.route('/health', methods=['GET'])
def health_check():
    """Simple health check endpoint."""
    start_time = datetime.now(timezone.utc)

    try:
        db.session.execute(db.text('SELECT 1'))
        database_status = 'healthy'
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        database_status = 'unhealthy'

    response_time = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000
    status_code = 200 if database_status == 'healthy' else 503

    health_status = {
        'status': 'healthy' if database_status == 'healthy' else 'unhealthy',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'services': {
            'database': database_status,
            'application': 'healthy'
        },
        'response_time_ms': round(response_time, 2)
    }

    performance_logger.log_request_timing('/api/health', 'GET', response_time, status_code)
    return jsonify(health_status), status_code
