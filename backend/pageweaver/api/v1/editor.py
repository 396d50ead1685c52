# pageweaver/api/v1/editor.py
from flask import current_app, g, jsonify, request
from pageweaver.application.editor.autosave import autosave
from pageweaver.application.editor.persistence import load_document, save_document
from pageweaver.domain.defaults import (
    new_element,
    new_footer_section,
    new_header_section,
    new_navigation_entry,
    new_page,
    new_section,
)
from pageweaver.normalizers.element import normalize_element
from pageweaver.normalizers.navigation import normalize_navigation_entry
from pageweaver.normalizers.page import normalize_page
from pageweaver.normalizers.section import normalize_section
from pageweaver.normalizers.state import normalize_selection, normalize_state
from .payloads import command_from_payload
from . import v1_bp


def _storage_keys():
    return {
        "pages_key": current_app.config["PAGES_STORAGE_KEY"],
        "navigation_key": current_app.config["NAVIGATION_STORAGE_KEY"],
    }

# ------------------------
# Read surface
# ------------------------

@v1_bp.route("/editor/state", methods=["GET"])
def get_state():
    return jsonify(normalize_state(g.editor_session.state))


@v1_bp.route("/editor/selection", methods=["GET"])
def get_selection():
    return jsonify({"selection": normalize_selection(g.editor_session.selection)})


@v1_bp.route("/editor/pages/resolve", methods=["GET"])
def resolve_page():
    path = request.args.get("path", "/")
    page = g.editor_session.page_for_path(path)

    if not page:
        return jsonify({"error": f"No page for path '{path}'"}), 404

    return jsonify(normalize_page(page, include_sections=False))


@v1_bp.route("/editor/templates/<kind>", methods=["GET"])
def get_template(kind):
    """
    Fresh building blocks for the editor toolbar. Every call mints new ids.

    ``element`` takes ``?type=heading|text|image|button``, ``page`` takes
    ``?index=N`` and ``navigation`` takes ``?order=N``.
    """
    try:
        if kind == "page":
            body = normalize_page(new_page(request.args.get("index", 1, type=int)))
        elif kind == "section":
            body = normalize_section(new_section())
        elif kind == "header":
            body = normalize_section(new_header_section())
        elif kind == "footer":
            body = normalize_section(new_footer_section())
        elif kind == "element":
            body = normalize_element(new_element(request.args.get("type", "text")))
        elif kind == "navigation":
            body = normalize_navigation_entry(new_navigation_entry(request.args.get("order", 0, type=int)))
        else:
            return jsonify({"error": f"Unknown template '{kind}'"}), 404
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    return jsonify(body)


# ------------------------
# Write surface
# ------------------------

@v1_bp.route("/editor/commands", methods=["POST"])
def run_command():
    data = request.get_json(silent=True)

    try:
        command = command_from_payload(data)
        result = g.editor_session.dispatch(command)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    body = {
        "command": command.name,
        "status": result.status.value,
        "reason": result.reason,
        "state": normalize_state(result.state),
    }
    return jsonify(body), 403 if result.denied else 200

# ------------------------
# Persistence
# ------------------------

@v1_bp.route("/editor/save", methods=["POST"])
def save():
    state = g.editor_session.state
    save_document(pages=state.pages, navigation=state.navigation, **_storage_keys())

    return jsonify({"message": "Document saved"}), 200


@v1_bp.route("/editor/load", methods=["POST"])
def load():
    document = load_document(**_storage_keys())
    g.editor_session.replace_document(document.pages, document.navigation)

    return jsonify({
        "pages_restored": document.pages_restored,
        "navigation_restored": document.navigation_restored,
        "state": normalize_state(g.editor_session.state),
    }), 200


@v1_bp.route("/editor/visibility", methods=["POST"])
def visibility_changed():
    data = request.get_json(silent=True) or {}

    # Losing visibility triggers an autosave
    if data.get("visible", True):
        return jsonify({"autosaved": False}), 200

    return jsonify({"autosaved": autosave(g.editor_session, **_storage_keys())}), 200
