"""Document store — locates and reads a platform's markdown files.

Layout under the docs root::

    <platform>/schema.md
    <platform>/workflows/<workflow>.md
    <platform>/microservices/<service>/README.md

Names taken from the URL are joined with ``safe_join``; a name that
would climb out of its directory resolves to ``None``.
"""

from werkzeug.utils import safe_join

from techdocs.services.discovery import MARKDOWN_SUFFIX, platform_dir

SCHEMA_FILE = "schema.md"
README_FILE = "README.md"


def schema_path(docs_dir, platform):
    return platform_dir(docs_dir, platform) / SCHEMA_FILE


def workflow_path(docs_dir, platform, workflow):
    base = platform_dir(docs_dir, platform) / "workflows"
    return safe_join(str(base), workflow + MARKDOWN_SUFFIX)


def readme_path(docs_dir, platform, service):
    base = platform_dir(docs_dir, platform) / "microservices"
    return safe_join(str(base), service, README_FILE)


def read_document(path):
    """Read a markdown document as UTF-8 text.

    Raises:
        FileNotFoundError: *path* is ``None`` or does not exist.
        OSError: any other filesystem failure.
        UnicodeDecodeError: the file is not valid UTF-8.
    """
    if path is None:
        raise FileNotFoundError("Document path escapes its directory")
    with open(path, "r", encoding="utf-8", newline="") as fh:
        return fh.read()


def read_raw(path):
    """Read a document's bytes exactly as stored on disk."""
    if path is None:
        raise FileNotFoundError("Document path escapes its directory")
    with open(path, "rb") as fh:
        return fh.read()
