"""Filesystem discovery — what a platform has documented.

Both listings are total: a missing or unreadable directory yields an
empty list, never an exception.
"""

import logging
from pathlib import Path

log = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def platform_dir(docs_dir, platform):
    return Path(docs_dir) / platform


def list_microservices(docs_dir, platform):
    """Return the names of subdirectories under ``<platform>/microservices``."""
    path = platform_dir(docs_dir, platform) / "microservices"
    try:
        return sorted(entry.name for entry in path.iterdir() if entry.is_dir())
    except OSError as exc:
        log.debug("No microservices for %s: %s", platform, exc)
        return []


def list_workflows(docs_dir, platform):
    """Return workflow names (``.md`` files, suffix stripped) for *platform*."""
    path = platform_dir(docs_dir, platform) / "workflows"
    try:
        return sorted(
            entry.name[: -len(MARKDOWN_SUFFIX)]
            for entry in path.iterdir()
            if entry.is_file() and entry.name.endswith(MARKDOWN_SUFFIX)
        )
    except OSError as exc:
        log.debug("No workflows for %s: %s", platform, exc)
        return []
