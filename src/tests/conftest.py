"""
Test configuration for BlogWare unit tests.

Ensures the project root is on sys.path so modules under src can be imported
without relying on external environment variables, and provides a throwaway
content directory.
"""

import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


POSTS = {
    "hello-world.md": '---\ntitle: "Hello"\ndate: "2021-01-01"\n---\n# Hi\n',
    "second-post.md": "---\ntitle: Second\ndate: 2021-03-05\ntags: [misc]\n---\nLinks to [[hello-world]].\n",
    "no-front-matter.md": "Just a body.\n",
    "broken.md": "---\ntitle: [unterminated\n---\nbody\n",
}


@pytest.fixture
def content_dir(tmp_path):
    """Content directory with a few posts and a secret file next to it."""
    blog_dir = tmp_path / "blog"
    blog_dir.mkdir()
    for name, text in POSTS.items():
        (blog_dir / name).write_text(text, encoding="utf-8")
    (tmp_path / "secret.md").write_text('---\ntitle: "Secret"\n---\nhidden\n', encoding="utf-8")
    return blog_dir


@pytest.fixture
def failures():
    """Collects LoadFailure records passed to a diagnostic sink."""
    return []
