# task_tracker/errors.py
from functools import wraps

from flask import current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from task_tracker import db


class ApiError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    status_code = 400


class ConflictError(ApiError):
    # Duplicate email answers 400, existing clients rely on it.
    status_code = 400


class NotFoundError(ApiError):
    status_code = 404


class StorageError(ApiError):
    status_code = 500


def error_response(message, status_code):
    return jsonify({'success': False, 'error': message}), status_code


def storage_guard(action):
    """Turn storage failures inside a view into a generic 500 response.

    The underlying exception is logged with its traceback; the client only
    sees ``Server Error: Unable to <action>``.
    """
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except (StorageError, SQLAlchemyError):
                current_app.logger.exception('Error trying to %s', action)
                db.session.rollback()
                return error_response(f'Server Error: Unable to {action}', 500)
        return wrapper
    return decorator


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code == 404:
            app.logger.warning('%s %s - %s', request.method, request.path, error.message)
        return error_response(error.message, error.status_code)

    @app.errorhandler(404)
    def handle_not_found(error):
        return error_response(f'Route {request.full_path.rstrip("?")} not found', 404)

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        return error_response(f'Method {request.method} not allowed for {request.path}', 405)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return error_response(error.description, error.code)
        app.logger.exception('Server Error: %s', error)
        return error_response('Internal Server Error', 500)
