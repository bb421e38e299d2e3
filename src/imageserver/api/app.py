from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from flask import Flask, jsonify, request, send_from_directory
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge

from imageserver.container import build_services
from imageserver.domain.errors import (
    ImageServerError,
    MissingInputError,
    RenameFailedError,
    UnsupportedImageError,
)
from imageserver.domain.models import ReorderResult
from imageserver.settings import ServerConfig

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "image"


def create_app(config: ServerConfig, services: dict[str, Any] | None = None) -> Flask:
    if services is None:
        services = build_services(config)
    gallery = services["gallery_service"]
    reorder = services["reorder_service"]
    image_root = str(config.image_root_path)

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = config.max_upload_mb * 1024 * 1024
    CORS(app)
    _register_error_handlers(app)

    @app.get("/")
    def index():
        return jsonify(
            {
                "message": "Image Server API",
                "endpoints": {
                    "images": "/images/:filename - Access images directly",
                    "list": "/api/images - List all images",
                    "reorder": "/api/reorder-images - Rename images into sequential order",
                    "upload": "/api/upload-image - Upload an image (fields: image, name)",
                },
            }
        )

    @app.get("/images/<path:filename>")
    def serve_image(filename: str):
        return send_from_directory(image_root, filename)

    @app.get("/api/images")
    def list_images():
        images = gallery.list_images()
        return jsonify({"total": len(images), "images": [asdict(image) for image in images]})

    @app.get("/api/reorder-images")
    def reorder_images():
        result: ReorderResult = reorder.reorder()
        if result.count == 0:
            return jsonify({"message": result.message})
        return jsonify(
            {
                "message": result.message,
                "count": result.count,
                "changes": [asdict(change) for change in result.changes],
            }
        )

    @app.post("/api/upload-image")
    def upload_image():
        upload = request.files.get(UPLOAD_FIELD)
        data = upload.read() if upload is not None else None
        original_filename = upload.filename if upload is not None else None
        result = gallery.upload_image(request.form.get("name"), original_filename, data)
        return jsonify(asdict(result))

    return app


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(MissingInputError)
    @app.errorhandler(UnsupportedImageError)
    def handle_bad_request(exc: ImageServerError):
        return jsonify({"error": exc.message, "details": exc.details}), 400

    @app.errorhandler(RenameFailedError)
    def handle_rename_failed(exc: RenameFailedError):
        return (
            jsonify(
                {
                    "error": exc.message,
                    "details": exc.details,
                    "changes": [asdict(change) for change in exc.changes],
                    "stranded": [asdict(item) for item in exc.stranded],
                }
            ),
            500,
        )

    @app.errorhandler(ImageServerError)
    def handle_server_error(exc: ImageServerError):
        logger.error("%s: %s", exc.message, exc.details)
        return jsonify({"error": exc.message, "details": exc.details}), 500

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(exc: RequestEntityTooLarge):
        return jsonify({"error": "Upload too large", "details": exc.description}), 413
