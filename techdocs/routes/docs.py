"""Rendered documentation routes.

Endpoints:
    GET /docs/{platform}/schema                   → rendered schema.md
    GET /docs/{platform}/schema/raw               → schema.md as text/markdown
    GET /docs/{platform}/workflows/{workflow}     → rendered workflow document
    GET /docs/{platform}/microservices/{service}  → rendered service README

The platform is checked against the registry before any file is opened.
"""

import logging

from flask import Blueprint, Response, current_app, jsonify, render_template

from techdocs.services import documents, renderer
from techdocs.services.registry import display_name

log = logging.getLogger(__name__)

docs_bp = Blueprint("docs", __name__, url_prefix="/docs")

# Missing-document errors; anything else from a read is a 500.
_MISSING = (FileNotFoundError, IsADirectoryError, NotADirectoryError)


def _registry():
    return current_app.config["PLATFORM_REGISTRY"]


def _docs_dir():
    return current_app.config["DOCS_DIR"]


def _platform_not_found():
    return jsonify({"error": "Platform not found"}), 404


def _render_page(template, platform, markdown_text, **context):
    registry = _registry()
    return render_template(
        template,
        platform=platform,
        platform_name=registry.display_name(platform),
        content=renderer.render(markdown_text),
        **context,
    )


# ── Schema ─────────────────────────────────────────────────────────────────

@docs_bp.route("/<platform>/schema", methods=["GET"])
def schema(platform):
    """Render the platform's schema.md."""
    if not _registry().is_known(platform):
        return _platform_not_found()

    path = documents.schema_path(_docs_dir(), platform)
    try:
        text = documents.read_document(path)
        return _render_page("document.html", platform, text,
                            title=f"{_registry().display_name(platform)} Schema Documentation")
    except (OSError, ValueError) as exc:
        log.warning("Failed to render schema for %s: %s", platform, exc)
        return jsonify({"error": "Failed to read schema file"}), 500


@docs_bp.route("/<platform>/schema/raw", methods=["GET"])
def schema_raw(platform):
    """Return schema.md byte-for-byte, whatever its encoding."""
    if not _registry().is_known(platform):
        return _platform_not_found()

    path = documents.schema_path(_docs_dir(), platform)
    try:
        body = documents.read_raw(path)
    except OSError as exc:
        log.warning("Failed to read schema for %s: %s", platform, exc)
        return jsonify({"error": "Failed to read schema file"}), 500
    return Response(body, content_type="text/markdown")


# ── Workflows ──────────────────────────────────────────────────────────────

@docs_bp.route("/<platform>/workflows/<workflow>", methods=["GET"])
def workflow(platform, workflow):
    """Render one workflow document."""
    if not _registry().is_known(platform):
        return _platform_not_found()

    path = documents.workflow_path(_docs_dir(), platform, workflow)
    try:
        text = documents.read_document(path)
        return _render_page(
            "document.html", platform, text,
            title=f"{display_name(workflow)} - {_registry().display_name(platform)}",
            show_schema_link=True,
        )
    except _MISSING:
        return jsonify({"error": "Workflow documentation not found"}), 404
    except (OSError, ValueError) as exc:
        log.warning("Failed to render workflow %s/%s: %s", platform, workflow, exc)
        return jsonify({"error": "Failed to read workflow file"}), 500


# ── Microservices ──────────────────────────────────────────────────────────

@docs_bp.route("/<platform>/microservices/<service>", methods=["GET"])
def microservice(platform, service):
    """Render a microservice README."""
    if not _registry().is_known(platform):
        return _platform_not_found()

    path = documents.readme_path(_docs_dir(), platform, service)
    try:
        text = documents.read_document(path)
        return _render_page(
            "document.html", platform, text,
            title=f"{display_name(service)} - {_registry().display_name(platform)}",
            show_schema_link=True,
        )
    except _MISSING:
        return jsonify({"error": "Microservice documentation not found"}), 404
    except (OSError, ValueError) as exc:
        log.warning("Failed to render README for %s/%s: %s", platform, service, exc)
        return jsonify({"error": "Failed to read microservice file"}), 500
