"""Root test configuration: isolate tests from a developer's config.yaml and DOCSTORE_* env"""

import pytest

from docstore.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop DOCSTORE_<FIELD> env vars so each test starts from defaults."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"DOCSTORE_{name.upper()}", raising=False)
