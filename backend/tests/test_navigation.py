from pageweaver.domain.document import NavigationEntry, Page
from pageweaver.engine.navigation import move_navigation_entry, sync_navigation_entry, update_navigation


def test_update_navigation_sorts_by_order(navigation):
    entries = (
        NavigationEntry(id="b", title="B", url="/b", order=2),
        NavigationEntry(id="a", title="A", url="/a", order=0),
        NavigationEntry(id="c", title="C", url="/c", order=1),
    )

    result = update_navigation(navigation, entries)
    assert [n.id for n in result] == ["a", "c", "b"]


def test_update_navigation_with_same_list_is_identity(navigation):
    assert update_navigation(navigation, list(navigation)) is navigation


def test_move_entry_renumbers_orders(navigation):
    result = move_navigation_entry(navigation, 2, 0)

    assert [n.id for n in result] == ["nav-blog", "nav-home", "nav-about"]
    assert [n.order for n in result] == [0, 1, 2]


def test_move_entry_out_of_range_is_identity(navigation):
    assert move_navigation_entry(navigation, 0, 5) is navigation
    assert move_navigation_entry(navigation, -1, 0) is navigation
    assert move_navigation_entry(navigation, 1, 1) is navigation


def test_sync_entry_copies_page_title_and_slug(navigation):
    page = Page(id="about", title="About us", slug="/company")

    result = sync_navigation_entry(navigation, "nav-about", page)
    entry = next(n for n in result if n.id == "nav-about")

    assert entry.title == "About us"
    assert entry.url == "/company"


def test_sync_unknown_entry_or_page_is_identity(navigation):
    page = Page(id="about", title="About", slug="/about")

    assert sync_navigation_entry(navigation, "missing", page) is navigation
    assert sync_navigation_entry(navigation, "nav-about", None) is navigation
    assert sync_navigation_entry(navigation, "nav-about", page) is navigation
