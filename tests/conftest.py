import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from techdocs import create_app  # noqa: E402


@pytest.fixture
def docs_root(tmp_path):
    """A docs tree with one fully documented and one bare platform."""
    root = tmp_path / "platforms"
    truestate = root / "truestate"
    (truestate / "workflows").mkdir(parents=True)
    (truestate / "microservices" / "search").mkdir(parents=True)
    (truestate / "microservices" / "billing").mkdir(parents=True)

    (truestate / "schema.md").write_text("# Title", encoding="utf-8")
    (truestate / "workflows" / "lead-onboarding.md").write_text(
        "# Lead Onboarding\n\nStep one.\n", encoding="utf-8"
    )
    (truestate / "workflows" / "notes.txt").write_text("ignored", encoding="utf-8")
    (truestate / "microservices" / "search" / "README.md").write_text(
        "# Search\n\nFinds things.\n", encoding="utf-8"
    )
    (truestate / "microservices" / "stray.md").write_text("ignored", encoding="utf-8")

    (root / "acn").mkdir()
    return root


@pytest.fixture
def registry_file(tmp_path):
    path = tmp_path / "registry.yaml"
    path.write_text("platforms:\n  - truestate\n  - acn\n", encoding="utf-8")
    return path


@pytest.fixture
def application(registry_file, docs_root):
    application = create_app(registry_path=registry_file, docs_dir=docs_root)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(application):
    with application.test_client() as c:
        yield c
