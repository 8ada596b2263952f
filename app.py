"""Quizmatch — Flask application entry point."""
import logging
import logging.handlers
import traceback

from flask import Flask, jsonify, request as flask_request
from werkzeug.exceptions import HTTPException

from config.settings import LOG_FILE, LOG_LEVEL, SECRET_KEY
from routes.answers import answers_bp

# --- File logging with daily rotation, 3-day retention ---
file_handler = logging.handlers.TimedRotatingFileHandler(
    LOG_FILE, when='midnight', backupCount=3, encoding='utf-8', delay=True,
)
file_handler.setLevel(logging.DEBUG)
file_handler.setFormatter(logging.Formatter(
    '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
))

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    handlers=[logging.StreamHandler(), file_handler],
)


def create_app():
    app = Flask(__name__)
    app.secret_key = SECRET_KEY

    app.register_blueprint(answers_bp, url_prefix='/answers')

    # --- Request/response logging ---
    req_logger = logging.getLogger('quizmatch.requests')

    @app.before_request
    def log_request():
        req_logger.info('>>> %s %s', flask_request.method,
                        flask_request.full_path.rstrip('?'))

    @app.after_request
    def log_response(response):
        req_logger.info('<<< %s %s  status=%d',
                        flask_request.method,
                        flask_request.full_path.rstrip('?'),
                        response.status_code)
        response.headers['X-Content-Type-Options'] = 'nosniff'
        return response

    @app.errorhandler(Exception)
    def log_error(error):
        if isinstance(error, HTTPException):
            return error
        req_logger.error('!!! %s %s  EXCEPTION:\n%s',
                         flask_request.method,
                         flask_request.full_path.rstrip('?'),
                         traceback.format_exc())
        return jsonify({'error': 'Internal Server Error'}), 500

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=True, host='0.0.0.0', port=5002, threaded=True)
