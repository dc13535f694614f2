"""HTTP entrypoint serving the contractor directory to the presentation layer."""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, request

from contractor_directory.core.config import get_settings
from contractor_directory.core.contractors import QueryError, get_contractor_by_id, get_service_types
from contractor_directory.core.search import handle_search, initial_page

# ---------- Logging ----------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ---------- App ----------
app = Flask(__name__)

# ---------- Routes ----------


@app.get("/")
def root() -> Any:
    """Simple root to avoid 404 on GET /"""
    return "ok", 200


@app.get("/healthz")
def healthcheck() -> Any:
    settings = get_settings()
    return jsonify({"status": "ok", "api_base": settings.wordpress_api_url}), 200


@app.get("/contractors")
def list_contractors() -> Any:
    """Initial render: the directory stays empty until the first search."""
    return jsonify({"data": initial_page().to_dict()}), 200


@app.post("/contractors")
def search_contractors() -> Any:
    """
    Search contractors from a submitted filter form.
    Fields: zip, state, services (repeated), certifications (repeated), page-number
    """
    try:
        result = handle_search(request.form)
    except QueryError as exc:
        logger.error("Contractor search failed: %s", exc)
        return jsonify({"error": "failed to load contractors"}), 502
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error during contractor search: %s", exc)
        return jsonify({"error": "internal error"}), 500

    return jsonify({"data": result.to_dict()}), 200


@app.get("/contractors/<contractor_id>")
def contractor_detail(contractor_id: str) -> Any:
    try:
        contractor = get_contractor_by_id(contractor_id)
    except QueryError as exc:
        logger.error("Contractor lookup failed for %s: %s", contractor_id, exc)
        return jsonify({"error": "failed to load contractor"}), 502

    return jsonify({"data": contractor.to_dict()}), 200


@app.get("/service-types")
def service_types() -> Any:
    try:
        terms = get_service_types()
    except QueryError as exc:
        logger.error("Service type lookup failed: %s", exc)
        return jsonify({"error": "failed to load service types"}), 502

    return jsonify({"data": [term.to_dict() for term in terms]}), 200


def main() -> None:
    port = get_settings().port
    logger.info("[BOOT] Binding on 0.0.0.0:%d", port)
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
