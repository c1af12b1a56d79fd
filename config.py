"""Tech Docs configuration — loads from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Paths
BASE_DIR = Path(__file__).resolve().parent
DOCS_DIR = Path(os.getenv("TECHDOCS_DOCS_DIR", str(BASE_DIR / "docs" / "platforms")))
REGISTRY_PATH = Path(os.getenv("TECHDOCS_REGISTRY", str(BASE_DIR / "registry.yaml")))

# Server
PORT = int(os.getenv("PORT", "3000"))
HOST = os.getenv("TECHDOCS_HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("TECHDOCS_LOG_LEVEL", "INFO")

# Presentation
SITE_TITLE = os.getenv("TECHDOCS_SITE_TITLE", "IQOL's Tech Documentation")

# Version
VERSION = "1.0.0"
