from pathlib import Path
from typing import Any

import psycopg
from flask import Blueprint, jsonify, request, send_from_directory
from flask.typing import ResponseReturnValue
from pydantic import ValidationError

from scanner_bridge.api.schemas import SaveRequestBody
from scanner_bridge.capture.exceptions import CaptureError
from scanner_bridge.capture.models import PagePair
from scanner_bridge.logging.logger import Log
from scanner_bridge.pdf.exceptions import AssemblyError, InvalidImageDataError
from scanner_bridge.processor.archiver import DocumentArchiver
from scanner_bridge.processor.exceptions import ConflictError, InvalidSaveRequestError
from scanner_bridge.processor.scan_processor import ScanProcessor
from scanner_bridge.profiles.exceptions import ProfileError

FILES_PREFIX = "/files"


def _failure(message: str, status: int) -> ResponseReturnValue:
    return jsonify({"success": False, "message": message}), status


def _pair_to_json(pair: PagePair[str]) -> dict[str, str]:
    item = {"front": pair.front}
    if pair.back is not None:
        item["back"] = pair.back
    return item


def build_blueprint(
    scan_processor: ScanProcessor,
    archiver: DocumentArchiver,
) -> Blueprint:
    """Routes for capture, profile listing, saving and stored-file serving."""
    bp = Blueprint("bridge", __name__)

    @bp.get("/health")
    def health() -> ResponseReturnValue:
        return jsonify({"status": "ok"})

    @bp.get("/scan")
    def scan() -> ResponseReturnValue:
        profile = request.args.get("profile")
        Log.info("Scan request received", profile=profile)
        try:
            result = scan_processor.capture(profile)
        except CaptureError as exc:
            Log.error(f"Scan failed: {exc}")
            return _failure(str(exc), 500)

        body: dict[str, Any] = {
            "success": True,
            "data": [_pair_to_json(pair) for pair in result.pairs],
        }
        if result.warnings:
            body["message"] = "; ".join(result.warnings)
        return jsonify(body)

    @bp.get("/profiles")
    def profiles() -> ResponseReturnValue:
        try:
            names = scan_processor.list_profiles()
        except ProfileError as exc:
            Log.error(f"Listing profiles failed: {exc}")
            return _failure(str(exc), 500)
        return jsonify({"success": True, "profiles": names})

    @bp.post("/save")
    def save() -> ResponseReturnValue:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return _failure("Request body must be a JSON object", 400)

        try:
            archive_request = SaveRequestBody.model_validate(payload).to_archive_request()
        except ValidationError as exc:
            return _failure(f"Invalid request: {exc.errors(include_url=False)}", 400)
        except InvalidImageDataError as exc:
            return _failure(str(exc), 400)

        try:
            record = archiver.archive(archive_request)
        except InvalidSaveRequestError as exc:
            return _failure(str(exc), 400)
        except ConflictError as exc:
            Log.warning(f"Save rejected: {exc}")
            return _failure(f"Not saved: {exc}", 409)
        except AssemblyError as exc:
            Log.error(f"PDF assembly failed: {exc}")
            return _failure("Failed to build the PDF", 500)
        except psycopg.Error as exc:
            Log.error(f"Database error while saving: {exc}")
            return _failure("Failed to store the record", 500)

        return jsonify(
            {
                "success": True,
                "message": "Document merged into a PDF and saved",
                "path": f"{FILES_PREFIX}/{Path(record.path).name}",
            }
        )

    @bp.get(f"{FILES_PREFIX}/<path:filename>")
    def stored_file(filename: str) -> ResponseReturnValue:
        return send_from_directory(archiver.storage_dir.resolve(), filename)

    return bp
