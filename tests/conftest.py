"""Root test configuration: paths to the sample post corpus"""

import os
from pathlib import Path

import pytest


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(name="posts_dir")
def posts_dir_fixture() -> Path:
    """Directory of sample posts in Jekyll's `_posts` layout."""
    return FIXTURES_DIR / "_posts"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep POSTMATTER_* variables from the host out of every test."""
    for name in list(os.environ):
        if name.startswith("POSTMATTER_"):
            monkeypatch.delenv(name)
