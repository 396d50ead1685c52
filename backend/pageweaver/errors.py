from flask import current_app, jsonify
from pageweaver.application.editor.exceptions import PersistenceError
from pageweaver.domain.invariants.exceptions import InvariantViolation

def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": "InvariantViolation",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(PersistenceError)
    def handle_persistence_error(error):
        current_app.logger.error(f"Persistence failure: {error}")
        response = jsonify({
            "error": "PersistenceError",
            "message": "The document could not be saved; in-memory edits are kept."
        })
        response.status_code = 503
        return response
