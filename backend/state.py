import logging
import threading
from typing import Callable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .config import STORAGE_KEY
from .controls import sync_category_controls
from .models import LinkItem, LinkView, new_link_id
from .query import search as search_links
from .storage import KeyValueStore, load_links, save_links
from .validation import validate_link_input

logger = logging.getLogger(__name__)


class LinkState(BaseModel):
    model_config = ConfigDict(frozen=True)

    links: Tuple[LinkItem, ...] = ()


def add_link(
    state: LinkState,
    title: str,
    url: str,
    category: Optional[str] = None,
    id_factory: Callable[[], str] = new_link_id,
) -> Tuple[LinkState, LinkItem]:
    """Validate and prepend a new link. Raises LinkValidationError, leaving state untouched."""
    fields = validate_link_input(title, url, category)
    item = LinkItem(id=id_factory(), **fields)
    return state.model_copy(update={"links": (item,) + state.links}), item


def delete_link(state: LinkState, link_id: str) -> LinkState:
    return state.model_copy(update={"links": tuple(l for l in state.links if l.id != link_id)})


def build_view(state: LinkState, search: str = "", category: str = "") -> LinkView:
    controls = sync_category_controls(state.links, category)
    return LinkView(
        search=search,
        total=len(state.links),
        result=search_links(state.links, search, controls.selected),
        controls=controls,
    )


class LinkStoreController:
    """
    Owns the store and the current LinkState.
    Every mutation is written through before the new state is kept.
    """

    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY):
        self.store = store
        self.key = key
        self._lock = threading.Lock()
        self.state = LinkState(links=tuple(load_links(store, key)))
        logger.info("Loaded %d link(s) from %r", len(self.state.links), key)

    @property
    def links(self) -> List[LinkItem]:
        return list(self.state.links)

    def _commit(self, state: LinkState) -> None:
        save_links(self.store, state.links, self.key)
        self.state = state

    def add(self, title: str, url: str, category: Optional[str] = None) -> LinkItem:
        with self._lock:
            state, item = add_link(self.state, title, url, category)
            self._commit(state)
        logger.info("Added link %s (%s)", item.id, item.url)
        return item

    def delete(self, link_id: str) -> bool:
        with self._lock:
            state = delete_link(self.state, link_id)
            if len(state.links) == len(self.state.links):
                return False
            self._commit(state)
        logger.info("Deleted link %s", link_id)
        return True

    def view(self, search: str = "", category: str = "") -> LinkView:
        return build_view(self.state, search, category)
