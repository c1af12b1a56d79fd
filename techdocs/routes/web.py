"""Browsing pages.

Endpoints:
    GET /                      → list of all platforms
    GET /docs                  → redirect to /
    GET /platform/{platform}   → schema, workflows and microservices of a platform
"""

from flask import Blueprint, current_app, jsonify, redirect, render_template, url_for

from techdocs.services import discovery
from techdocs.services.registry import display_name

web_bp = Blueprint("web", __name__)


def _registry():
    return current_app.config["PLATFORM_REGISTRY"]


@web_bp.route("/", methods=["GET"])
def index():
    """Render the platform listing."""
    return render_template(
        "index.html",
        title=current_app.config["SITE_TITLE"],
        platforms=_registry().all(),
    )


@web_bp.route("/docs", methods=["GET"])
def docs_root():
    return redirect(url_for("web.index"))


@web_bp.route("/platform/<platform>", methods=["GET"])
def platform_detail(platform):
    """Render a platform page with its workflows and microservices."""
    entry = _registry().get(platform)
    if entry is None:
        return jsonify({"error": "Platform not found"}), 404

    docs_dir = current_app.config["DOCS_DIR"]
    workflows = [
        {"id": name, "name": display_name(name)}
        for name in discovery.list_workflows(docs_dir, platform)
    ]
    microservices = [
        {"id": name, "name": display_name(name)}
        for name in discovery.list_microservices(docs_dir, platform)
    ]

    return render_template(
        "platform.html",
        platform=platform,
        platform_name=entry["name"],
        workflows=workflows,
        microservices=microservices,
    )
