from flask import current_app, g


def session_middleware(app):
    @app.before_request
    def attach_editor_session():
        # Attach the process-wide editing session to the request context
        g.editor_session = current_app.extensions["editor_session"]
