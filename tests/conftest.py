"""
Pytest configuration and shared fixtures for HTML Redactor tests.

Builds throwaway HTML trees under tmp_path so folder tests never touch real
files, and clears the server's environment settings before each test.
"""

import os
import sys

import pytest

# Add parent directory to path for server imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def clear_redactor_env(monkeypatch):
    """
    Remove REDACTOR_* settings so a developer's .env cannot leak into tests.
    This runs automatically before each test.
    """
    for name in ("REDACTOR_BASE_DIR", "REDACTOR_OUTPUT_SUFFIX", "REDACTOR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def html_tree(tmp_path):
    """
    Create a nested folder of HTML and non-HTML files.

    site/
        index.html          email + phone
        about.HTML          ssn
        notes.txt           email (not HTML, must be ignored)
        blog/
            post.html       nothing sensitive
            deep/
                card.html   credit card
                image.png
    """
    root = tmp_path / "site"
    deep = root / "blog" / "deep"
    deep.mkdir(parents=True)

    (root / "index.html").write_text(
        "<p>Contact me at a@b.com or 555-123-4567</p>\n", encoding="utf-8"
    )
    (root / "about.HTML").write_text(
        "<p>SSN: 123-45-6789</p>\n", encoding="utf-8"
    )
    (root / "notes.txt").write_text("hidden@example.com\n", encoding="utf-8")
    (root / "blog" / "post.html").write_text(
        "<h1>Nothing to see here</h1>\n", encoding="utf-8"
    )
    (deep / "card.html").write_text(
        "<td>4111 1111 1111 1111</td>\n", encoding="utf-8"
    )
    (deep / "image.png").write_bytes(b"\x89PNG\r\n")

    return root
