# contacts_api/cors.py
from flask import request

def init_cors(app):
    """Adds permissive cross-origin headers and answers preflight requests before routing."""

    @app.before_request
    def short_circuit_preflight():
        if request.method == 'OPTIONS':
            return app.response_class(status=200)

    @app.after_request
    def add_cors_headers(response):
        response.headers['Access-Control-Allow-Origin'] = app.config['CORS_ALLOW_ORIGIN']
        response.headers['Access-Control-Allow-Headers'] = app.config['CORS_ALLOW_HEADERS']
        response.headers['Access-Control-Allow-Methods'] = app.config['CORS_ALLOW_METHODS']
        return response
