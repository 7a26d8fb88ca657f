import unicodedata
from typing import Dict, List, Sequence, Tuple

from .config import DEFAULT_CATEGORY
from .models import LinkGroup, LinkItem, SearchResult

EMPTY_PLACEHOLDER = 'No links yet. Click "New link" to add one.'


def collation_key(value: str) -> Tuple[str, str, str]:
    """
    Locale-style sort key: base letters compare first, then accents,
    then case with lowercase first, so ordering stays total.
    """
    decomposed = unicodedata.normalize("NFKD", value.casefold())
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base, decomposed, value.swapcase()


def category_key(link: LinkItem) -> str:
    return (link.category or "").strip() or DEFAULT_CATEGORY


def filter_links(links: Sequence[LinkItem], text: str = "", category: str = "") -> List[LinkItem]:
    query = (text or "").strip().lower()
    filtered = [l for l in links if query in l.title.lower()] if query else list(links)

    if category:
        wanted = category.lower()
        filtered = [l for l in filtered if category_key(l).lower() == wanted]
    return filtered


def group_by_category(links: Sequence[LinkItem]) -> List[LinkGroup]:
    groups: Dict[str, List[LinkItem]] = {}
    for link in links:
        groups.setdefault(category_key(link), []).append(link)
    return [
        LinkGroup(category=name, links=groups[name])
        for name in sorted(groups, key=collation_key)
    ]


def search(links: Sequence[LinkItem], text: str = "", category: str = "") -> SearchResult:
    filtered = filter_links(links, text, category)
    if not filtered:
        return SearchResult(count=0, groups=[], empty=True, placeholder=EMPTY_PLACEHOLDER)
    return SearchResult(count=len(filtered), groups=group_by_category(filtered), empty=False)
