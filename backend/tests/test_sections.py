from dataclasses import replace

from pageweaver.domain.document import Section, SectionType, find_page, find_section
from pageweaver.domain.layout import GridGap
from pageweaver.engine.sections import (
    add_section,
    duplicate_section,
    move_section_down,
    move_section_up,
    remove_section,
    replace_footer_section,
    replace_header_section,
    update_section,
)


def _section_ids(pages, page_id="home"):
    return [s.id for s in find_page(pages, page_id).sections]


def test_add_section_appends(pages):
    result = add_section(pages, "about", Section(id="extra"))
    assert _section_ids(result, "about") == ["about-main", "extra"]


def test_add_section_to_unknown_page_is_identity(pages):
    assert add_section(pages, "missing", Section(id="extra")) is pages


def test_update_section_merges_property_fields(pages):
    result = update_section(
        pages,
        "home",
        "intro",
        {"properties": {"background_color": "bg-gray-100", "grid_gap": "gap-8"}},
    )

    props = find_section(find_page(result, "home"), "intro").properties
    assert props.background_color == "bg-gray-100"
    assert props.grid_gap == GridGap.LARGE
    assert props.padding_y == "py-12"


def test_update_section_without_changes_is_identity(pages):
    assert update_section(pages, "home", "intro", {"properties": {"padding_x": "px-4"}}) is pages


def test_remove_section(pages):
    result = remove_section(pages, "home", "features")
    assert _section_ids(result) == ["header", "intro", "outro", "footer"]


def test_remove_unknown_section_is_identity(pages):
    assert remove_section(pages, "home", "missing") is pages


def test_duplicate_inserts_copy_after_original(pages):
    result = duplicate_section(pages, "home", "features")
    ids = _section_ids(result)

    assert len(ids) == 6
    assert ids[2] == "features"
    assert ids[3] != "features"

    home = find_page(result, "home")
    original, copy = home.sections[2], home.sections[3]
    original_ids = {e.id for e in original.elements}
    copy_ids = {e.id for e in copy.elements}
    assert original_ids.isdisjoint(copy_ids)
    assert [e.content for e in copy.elements] == [e.content for e in original.elements]
    assert copy.properties == original.properties


def test_duplicate_banner_is_identity(pages):
    assert duplicate_section(pages, "home", "header") is pages
    assert duplicate_section(pages, "home", "footer") is pages


def test_move_up_swaps_with_previous_content_section(pages):
    result = move_section_up(pages, "home", "features")
    assert _section_ids(result) == ["header", "features", "intro", "outro", "footer"]


def test_move_down_swaps_with_next_content_section(pages):
    result = move_section_down(pages, "home", "features")
    assert _section_ids(result) == ["header", "intro", "outro", "features", "footer"]


def test_move_at_boundaries_is_identity(pages):
    assert move_section_up(pages, "home", "intro") is pages
    assert move_section_down(pages, "home", "outro") is pages


def test_banners_do_not_move(pages):
    assert move_section_up(pages, "home", "footer") is pages
    assert move_section_down(pages, "home", "header") is pages


def test_replace_header_overwrites_in_place(pages):
    new_header = Section(id="new-header")
    result = replace_header_section(pages, "home", new_header)

    home = find_page(result, "home")
    assert home.sections[0].id == "new-header"
    assert home.sections[0].type == SectionType.HEADER
    assert len(home.sections) == 5


def test_replace_footer_appends_when_missing(pages):
    result = replace_footer_section(pages, "about", Section(id="about-footer"))

    about = find_page(result, "about")
    assert [s.id for s in about.sections] == ["about-main", "about-footer"]
    assert about.sections[-1].type == SectionType.FOOTER


def test_replace_header_prepends_when_missing(pages):
    result = replace_header_section(pages, "about", Section(id="about-header"))
    assert _section_ids(result, "about") == ["about-header", "about-main"]


def test_replace_with_identical_banner_is_identity(pages):
    header = find_section(find_page(pages, "home"), "header")
    assert replace_header_section(pages, "home", replace(header)) is pages


def test_update_section_expands_grid_preset(pages):
    result = update_section(
        pages, "home", "features", {"properties": {"is_grid_layout": True, "grid_preset": "3x2"}}
    )

    props = find_section(find_page(result, "home"), "features").properties
    assert props.is_grid_layout is True
    assert (props.grid_columns, props.grid_rows) == ("grid-cols-3", "grid-rows-2")
