import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Sequence

from .config import DEFAULT_CATEGORY, STORAGE_KEY
from .models import LinkItem, new_link_id

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Dict-backed store, handy for tests and throwaway sessions."""

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


class FileStore:
    """
    One file per key under a data directory.
    Writes go through a temp file in the same directory and os.replace,
    so a reader never sees a half-written blob.
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def path_for(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s: %s", path, exc)
            return None

    def set_item(self, key: str, value: str) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


def _coerce_entry(raw: dict, seen_ids: set) -> LinkItem:
    link_id = raw.get("id")
    if not isinstance(link_id, str) or not link_id or link_id in seen_ids:
        link_id = new_link_id()
    category = raw.get("category")
    if not isinstance(category, str):
        category = DEFAULT_CATEGORY
    seen_ids.add(link_id)
    return LinkItem(id=link_id, title=raw["title"], url=raw["url"], category=category)


def load_links(store: KeyValueStore, key: str = STORAGE_KEY) -> List[LinkItem]:
    """
    Read the whole collection from the store.
    Missing, unparsable or non-list blobs yield an empty list; entries that
    are not objects with string title and url are dropped.
    """
    raw = store.get_item(key)
    if not raw:
        return []
    try:
        parsed = json.loads(raw)
    except ValueError:
        logger.warning("Stored links under %r are not valid JSON; starting empty", key)
        return []
    if not isinstance(parsed, list):
        logger.warning("Stored links under %r are not a list; starting empty", key)
        return []

    links: List[LinkItem] = []
    seen_ids: set = set()
    for entry in parsed:
        if not isinstance(entry, dict):
            continue
        if not isinstance(entry.get("title"), str) or not isinstance(entry.get("url"), str):
            continue
        links.append(_coerce_entry(entry, seen_ids))

    dropped = len(parsed) - len(links)
    if dropped:
        logger.info("Dropped %d malformed stored link(s)", dropped)
    return links


def save_links(store: KeyValueStore, links: Sequence[LinkItem], key: str = STORAGE_KEY) -> None:
    store.set_item(
        key,
        json.dumps([link.model_dump(mode="json") for link in links], indent=2),
    )
