from flask import Flask, jsonify
from flask.typing import ResponseReturnValue
from flask_cors import CORS

from scanner_bridge.api.routes import build_blueprint
from scanner_bridge.processor.archiver import DocumentArchiver
from scanner_bridge.processor.scan_processor import ScanProcessor

MAX_BODY_BYTES = 50 * 1024 * 1024


def create_app(scan_processor: ScanProcessor, archiver: DocumentArchiver) -> Flask:
    """Build the Flask app around already-constructed services."""
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = MAX_BODY_BYTES

    CORS(
        app,
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
        send_wildcard=True,
    )
    app.register_blueprint(build_blueprint(scan_processor, archiver))

    @app.errorhandler(404)
    def not_found(_e: Exception) -> ResponseReturnValue:
        return jsonify({"success": False, "message": "Resource not found"}), 404

    @app.errorhandler(413)
    def too_large(_e: Exception) -> ResponseReturnValue:
        return jsonify({"success": False, "message": "Request body too large"}), 413

    @app.errorhandler(500)
    def server_error(_e: Exception) -> ResponseReturnValue:
        return jsonify({"success": False, "message": "Internal server error"}), 500

    return app
