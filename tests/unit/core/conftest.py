"""Shared fixtures for core unit tests"""

import pytest


DOCS_YAML = """\
documents:
  - title: Report A
    content: alpha
    author: {id: a1, name: Ada}
  - title: Report B
    content: beta
    author: {id: a2}
  - title: Report A (rev)
    content: alpha
    author: {id: a3}
"""


@pytest.fixture(name="docs_yaml")
def docs_yaml_fixture(tmp_path):
    """A YAML documents file whose third entry duplicates the first one's content."""
    p = tmp_path / "documents.yaml"
    p.write_text(DOCS_YAML)
    return p
