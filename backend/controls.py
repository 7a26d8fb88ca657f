from typing import List, Sequence

from .models import CategoryControls, LinkItem
from .query import category_key, collation_key

ALL_CATEGORIES_LABEL = "All categories"


def derive_categories(links: Sequence[LinkItem]) -> List[str]:
    return sorted({category_key(l) for l in links}, key=collation_key)


def sync_category_controls(links: Sequence[LinkItem], current: str = "") -> CategoryControls:
    """
    Rebuild the autocomplete list and filter dropdown from the collection.
    The current filter survives only if it is still one of the categories.
    """
    categories = derive_categories(links)
    options = [("", ALL_CATEGORIES_LABEL)] + [(c, c) for c in categories]
    return CategoryControls(
        suggestions=categories,
        filter_options=options,
        selected=current if current in categories else "",
    )
