"""
Migration API

HTTP mirror of the converter: POST the raw vercel.json and .env text, get
every generated Netlify document back as JSON.
"""

import os
from typing import Optional

from flask import Blueprint, Flask, jsonify, request
from flask_cors import CORS

from vercel_to_netlify.converter.checklist import DEFAULT_FRAMEWORK
from vercel_to_netlify.converter.processor import process_migration
from vercel_to_netlify.wizard.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_PORT = 3001
DEFAULT_HOST = "127.0.0.1"
MAX_REQUEST_BYTES = 10 * 1024 * 1024

migrate_bp = Blueprint("migrate", __name__)


def _optional_text(payload: dict, key: str) -> Optional[str]:
    value = payload.get(key)
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


@migrate_bp.route("/api/migrate", methods=["POST"])
def migrate():
    """Convert the posted Vercel inputs.

    Body: {"vercelJson": str, "envVars": str, "framework": str,
    "generateChecklist": bool}; every field is optional.
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({
            "error": "Invalid request",
            "message": "Request body must be a JSON object"
        }), 400

    try:
        result = process_migration(
            vercel_json=_optional_text(payload, "vercelJson"),
            env_text=_optional_text(payload, "envVars"),
            framework=_optional_text(payload, "framework") or DEFAULT_FRAMEWORK,
            include_checklist=payload.get("generateChecklist") is True,
        )
        return jsonify(result.to_dict())

    except Exception as e:
        logger.error(f"Migration error: {e}", exc_info=True)
        return jsonify({"error": "Migration failed", "message": str(e)}), 500


def create_app() -> Flask:
    """Create the migration API application."""
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = MAX_REQUEST_BYTES
    app.json.sort_keys = False

    CORS(app)
    app.register_blueprint(migrate_bp)

    return app


def get_bind_address() -> tuple:
    """Host and port from V2N_HOST and PORT."""
    host = os.environ.get("V2N_HOST", DEFAULT_HOST)
    try:
        port = int(os.environ.get("PORT", DEFAULT_PORT))
    except ValueError:
        logger.warning("Ignoring invalid PORT value, using %d", DEFAULT_PORT)
        port = DEFAULT_PORT
    return host, port


def run_server(host: Optional[str] = None, port: Optional[int] = None, debug: bool = False):
    """Run the development server."""
    default_host, default_port = get_bind_address()
    host = host or default_host
    port = port or default_port

    app = create_app()
    logger.info(f"Migration API server running on http://{host}:{port}")
    app.run(host=host, port=port, debug=debug)
