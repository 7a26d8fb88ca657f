import os
import tempfile

import pytest

# Keep the module-level app in backend.main away from the real data directory
os.environ.setdefault("LINKSHELF_DATA_DIR", tempfile.mkdtemp(prefix="linkshelf-test-"))

from backend.models import LinkItem
from backend.storage import MemoryStore


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def sample_links():
    """Newest first, as the collection is kept."""
    return [
        LinkItem(id="a", title="Docs", url="https://docs.python.org", category="Work"),
        LinkItem(id="b", title="Example", url="https://example.com", category="work"),
        LinkItem(id="c", title="Daily news", url="https://news.example.com", category="News"),
        LinkItem(id="d", title="Old thing", url="https://old.example.com", category="  "),
    ]
