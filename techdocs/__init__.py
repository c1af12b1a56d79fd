"""Tech Docs — internal platform documentation server.

Flask application factory lives here so the ``techdocs`` package is
directly importable: ``from techdocs import create_app``.
"""

import logging
from pathlib import Path

from flask import Flask
from flask_cors import CORS

import config
from techdocs.services.registry import PlatformRegistry


def create_app(registry_path=None, docs_dir=None):
    """Create and configure the Flask application.

    Args:
        registry_path: YAML file listing the known platforms.  Defaults
            to ``config.REGISTRY_PATH``.
        docs_dir: Root of the per-platform documentation tree.  Defaults
            to ``config.DOCS_DIR``.
    """
    package_dir = Path(__file__).resolve().parent
    application = Flask(
        __name__,
        template_folder=str(package_dir / "templates"),
        static_folder=str(package_dir / "static"),
    )

    # CORS — lets other internal tools pull raw schemas.
    CORS(application)

    # Logging
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # Platform registry — immutable after load
    application.config["PLATFORM_REGISTRY"] = PlatformRegistry(registry_path)
    application.config["DOCS_DIR"] = Path(docs_dir or config.DOCS_DIR)
    application.config["SITE_TITLE"] = config.SITE_TITLE

    # Register blueprints
    from techdocs.routes.health import health_bp
    from techdocs.routes.web import web_bp
    from techdocs.routes.docs import docs_bp

    application.register_blueprint(health_bp)
    application.register_blueprint(web_bp)
    application.register_blueprint(docs_bp)

    return application
