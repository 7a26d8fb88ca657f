import re
from typing import Dict, Optional

from pydantic import AnyUrl, TypeAdapter, ValidationError

from .config import DEFAULT_CATEGORY

SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)

TITLE_REQUIRED = "Enter a title."
URL_REQUIRED = "Enter a URL."
URL_INVALID = "Invalid URL."

_url_adapter = TypeAdapter(AnyUrl)


class LinkValidationError(ValueError):
    """Raised when a submitted link fails validation; errors are keyed by field."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__("; ".join(f"{field}: {msg}" for field, msg in errors.items()))
        self.errors = errors


def normalize_url(raw: str) -> str:
    """
    Make sure the URL carries a scheme:
    - trim surrounding whitespace
    - leave http:// and https:// (any case) untouched
    - otherwise prefix https://
    """
    trimmed = (raw or "").strip()
    if not trimmed:
        return trimmed
    if SCHEME_RE.match(trimmed):
        return trimmed
    return f"https://{trimmed}"


def is_valid_url(candidate: str) -> bool:
    try:
        _url_adapter.validate_python(candidate)
    except ValidationError:
        return False
    return True


def normalize_category(raw: Optional[str]) -> str:
    return (raw or "").strip() or DEFAULT_CATEGORY


def validate_link_input(title: str, url: str, category: Optional[str] = None) -> Dict[str, str]:
    """
    Check a submission and return the cleaned fields.
    Title and URL are checked independently so both errors surface together.
    """
    errors: Dict[str, str] = {}

    clean_title = (title or "").strip()
    if not clean_title:
        errors["title"] = TITLE_REQUIRED

    clean_url = normalize_url(url)
    if not clean_url:
        errors["url"] = URL_REQUIRED
    elif not is_valid_url(clean_url):
        errors["url"] = URL_INVALID

    if errors:
        raise LinkValidationError(errors)

    return {
        "title": clean_title,
        "url": clean_url,
        "category": normalize_category(category),
    }
