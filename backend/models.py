import uuid
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from .config import DEFAULT_CATEGORY


def new_link_id() -> str:
    return str(uuid.uuid4())


class LinkItem(BaseModel):
    id: str = Field(default_factory=new_link_id)
    title: str
    url: str
    category: str = DEFAULT_CATEGORY


class LinkIn(BaseModel):
    title: str = ""
    url: str = ""
    category: Optional[str] = None


class LinkGroup(BaseModel):
    category: str
    links: List[LinkItem] = Field(default_factory=list)


class SearchResult(BaseModel):
    count: int = 0
    groups: List[LinkGroup] = Field(default_factory=list)
    empty: bool = True
    placeholder: Optional[str] = None


class CategoryControls(BaseModel):
    suggestions: List[str] = Field(default_factory=list)
    filter_options: List[Tuple[str, str]] = Field(default_factory=list)
    selected: str = ""


class LinkView(BaseModel):
    search: str = ""
    total: int = 0
    result: SearchResult = Field(default_factory=SearchResult)
    controls: CategoryControls = Field(default_factory=CategoryControls)
