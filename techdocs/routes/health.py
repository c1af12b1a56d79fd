"""Health check endpoint for the Tech Docs server."""

import time

from flask import Blueprint, current_app, jsonify

import config

health_bp = Blueprint("health", __name__)

# Recorded at module load — used for uptime calculation.
_start_time = time.time()


@health_bp.route("/api/health", methods=["GET"])
def health():
    """Return server health status."""
    registry = current_app.config["PLATFORM_REGISTRY"]
    return jsonify(
        {
            "status": "operational",
            "uptime_seconds": round(time.time() - _start_time, 1),
            "version": config.VERSION,
            "platforms_total": len(registry),
            "platforms": list(registry.ids),
        }
    )
