import logging

from flask import jsonify, request
from pymongo.errors import PyMongoError
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)

ALL_FIELDS_REQUIRED = "Vsa polja so obvezna"


class EvidencaError(Exception):
    """Osnovna napaka aplikacije; vedno se vrne kot 4xx z {"message": ...}."""

    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ExpenseValidationError(EvidencaError):
    pass


class EmployeeValidationError(EvidencaError):
    def __init__(self, message=ALL_FIELDS_REQUIRED):
        super().__init__(message)


class ReportValidationError(EvidencaError):
    pass


def register_error_handlers(app):
    """Vse napake (tudi 404) vrača kot JSON."""

    @app.errorhandler(EvidencaError)
    def handle_evidenca_error(e):
        return jsonify({"message": e.message}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        if e.code == 404:
            return jsonify({"message": "Not found", "path": request.path}), 404
        return jsonify({"message": e.name}), e.code

    @app.errorhandler(PyMongoError)
    def handle_store_error(e):
        logger.exception("napaka baze pri %s %s", request.method, request.path)
        return jsonify({"message": "Database error"}), 500

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception("neobravnavana napaka pri %s %s", request.method, request.path)
        return jsonify({"message": "Internal server error"}), 500
