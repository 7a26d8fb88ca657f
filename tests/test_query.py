from backend.models import LinkItem
from backend.query import EMPTY_PLACEHOLDER, category_key, collation_key, filter_links, search


def test_title_substring_is_case_insensitive(sample_links):
    result = filter_links(sample_links, "do")
    titles = [l.title for l in result]
    assert "Docs" in titles
    assert "Example" not in titles


def test_search_ignores_url_and_category(sample_links):
    assert filter_links(sample_links, "python") == []
    assert filter_links(sample_links, "news") == [sample_links[2]]
    assert filter_links(sample_links, "work") == []


def test_empty_filters_return_everything(sample_links):
    assert filter_links(sample_links, "", "") == sample_links
    assert filter_links(sample_links, "   ") == sample_links


def test_category_filter_is_exact_case_insensitive(sample_links):
    assert [l.id for l in filter_links(sample_links, category="WORK")] == ["a", "b"]
    assert filter_links(sample_links, category="Wor") == []


def test_blank_category_matches_default(sample_links):
    assert [l.id for l in filter_links(sample_links, category="Uncategorized")] == ["d"]


def test_text_and_category_combine(sample_links):
    assert [l.id for l in filter_links(sample_links, "e", "work")] == ["b"]


def test_groups_sorted_and_keep_order(sample_links):
    result = search(sample_links)
    assert result.count == 4
    assert not result.empty
    assert [g.category for g in result.groups] == ["News", "Uncategorized", "work", "Work"]


def test_group_preserves_collection_order():
    links = [
        LinkItem(id="3", title="Newest", url="https://c.com", category="Tools"),
        LinkItem(id="2", title="Middle", url="https://b.com", category="Misc"),
        LinkItem(id="1", title="Oldest", url="https://a.com", category="Tools"),
    ]
    tools = [g for g in search(links).groups if g.category == "Tools"][0]
    assert [l.id for l in tools.links] == ["3", "1"]


def test_count_is_filtered_length(sample_links):
    result = search(sample_links, "do")
    assert result.count == 1
    assert result.count == sum(len(g.links) for g in result.groups)


def test_zero_results_give_placeholder(sample_links):
    result = search(sample_links, "nothing matches this")
    assert result.empty
    assert result.count == 0
    assert result.groups == []
    assert result.placeholder == EMPTY_PLACEHOLDER


def test_collation_ignores_case_and_accents():
    names = ["beta", "Émile", "alpha", "Zeta", "emu"]
    assert sorted(names, key=collation_key) == ["alpha", "beta", "Émile", "emu", "Zeta"]


def test_category_key():
    assert category_key(LinkItem(title="t", url="u", category=" Work ")) == "Work"
    assert category_key(LinkItem(title="t", url="u", category="")) == "Uncategorized"


def test_collation_puts_lowercase_before_uppercase():
    assert sorted(["Work", "News", "work"], key=collation_key) == ["News", "work", "Work"]
    assert sorted(["B", "a", "b", "A"], key=collation_key) == ["a", "A", "b", "B"]
