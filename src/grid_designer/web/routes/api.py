from __future__ import annotations

from flask import Blueprint, Response, current_app, jsonify, request

from grid_designer.errors import PreconditionError, UnknownEntryError, ValidationError
from grid_designer.location import parse_grid_system
from grid_designer.model.enums import LayoutTool, coerce
from grid_designer.model.grid_system import GridSystem

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, OPTIONS"
    return response


@api_bp.errorhandler(ValidationError)
def validation_failed(exc: ValidationError):
    return jsonify({
        "error": str(exc),
        "diagnostics": [d.to_json() for d in exc.diagnostics],
    }), 422


@api_bp.errorhandler(PreconditionError)
def precondition_failed(exc: PreconditionError):
    status = 404 if isinstance(exc, UnknownEntryError) else 400
    return jsonify({"error": str(exc)}), status


def _store():
    return current_app.extensions["store"]


def _state_response():
    """The current grid system with its diagnostics and shareable query."""
    grid_system = _store().state
    return jsonify({
        "gridSystem": grid_system.to_json(),
        "diagnostics": [d.to_json() for d in grid_system.diagnostics()],
        "query": current_app.extensions["location"].query,
    })


def _width_arg() -> int | None:
    return request.args.get("width", type=int)


@api_bp.route("/grid-system")
def get_grid_system():
    """Return the current grid system."""
    return _state_response()


@api_bp.route("/grid-system", methods=["PUT"])
def load_grid_system():
    """Replace the grid system with a snapshot or a shared query string."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "JSON object required"}), 400
    if "query" in data:
        if not isinstance(data["query"], str):
            return jsonify({"error": "query must be a string"}), 400
        key = current_app.extensions["designer_config"].query_key
        grid_system = parse_grid_system(data["query"], key)
        if grid_system is None:
            return jsonify({"error": f"query has no {key!r} parameter"}), 400
    elif "gridSystem" in data:
        grid_system = GridSystem.from_json(data["gridSystem"])
    else:
        return jsonify({"error": "gridSystem or query required"}), 400
    _store().load(grid_system)
    return _state_response()


@api_bp.route("/grid-system/edits", methods=["POST"])
def apply_edit():
    """Apply one edit, e.g. ``{"op": "add_breakpoint"}``."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "op" not in data:
        return jsonify({"error": "op required"}), 400
    _store().apply_edit(data)
    return _state_response()


@api_bp.route("/grid-system/reset", methods=["POST"])
def reset():
    """Restore the default grid system."""
    _store().reset()
    return _state_response()


@api_bp.route("/grid-system/scss")
def scss():
    """Return the generated SCSS."""
    return Response(_store().state.to_scss(), mimetype="text/x-scss")


@api_bp.route("/grid-system/match")
def match():
    """Return the entry whose range contains ``width``."""
    width = _width_arg()
    if width is None or width < 0:
        return jsonify({"error": "non-negative integer width required"}), 400
    preferences = _store().state.match_for(width)
    if preferences is None:
        return jsonify({"error": "not found"}), 404
    return jsonify(preferences.to_json())


@api_bp.route("/grid-system/layout/<tool>")
def layout(tool: str):
    """Return the design tool layout grid for an artboard ``width`` wide."""
    tool = coerce(LayoutTool, tool)
    width = _width_arg()
    if width is None or width < 0:
        return jsonify({"error": "non-negative integer width required"}), 400
    result = _store().state.compute_external_layout(width, tool)
    if result is None:
        return jsonify({"error": "not found"}), 404
    return jsonify(result.to_json())
