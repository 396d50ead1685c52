import pytest

from pageweaver.domain.document import Element, ElementType, GridPosition, find_element, find_page, find_section
from pageweaver.domain.styles import FontSize, TextAlign, TextColor
from pageweaver.engine.elements import (
    add_element,
    remove_element,
    set_element_style,
    toggle_element_style,
    update_element,
)


def _element(pages, section_id, element_id, page_id="home"):
    section = find_section(find_page(pages, page_id), section_id)
    return next(e for e in section.elements if e.id == element_id)


def test_add_element_appends(pages):
    result = add_element(pages, "home", "outro", Element(id="cta", type=ElementType.BUTTON, content="Go"))

    section = find_section(find_page(result, "home"), "outro")
    assert [e.id for e in section.elements] == ["outro-text", "cta"]


def test_add_element_to_unknown_section_is_identity(pages):
    assert add_element(pages, "home", "missing", Element(id="x", type=ElementType.TEXT)) is pages


def test_update_element_content(pages):
    result = update_element(pages, "home", "intro", "intro-title", {"content": "Welcome"})
    assert _element(result, "intro", "intro-title").content == "Welcome"


def test_update_element_style_mapping_merges(pages):
    once = update_element(pages, "home", "intro", "intro-title", {"style": {"font_size": "text-4xl"}})
    twice = update_element(once, "home", "intro", "intro-title", {"style": {"text_align": "center"}})

    style = _element(twice, "intro", "intro-title").style
    assert style.font_size == FontSize.XL4
    assert style.text_align == TextAlign.CENTER


def test_update_element_grid_position_mapping(pages):
    result = update_element(pages, "home", "intro", "intro-text", {"grid_position": {"column": 2}})
    assert _element(result, "intro", "intro-text").grid_position == GridPosition(column=2, row=1)


def test_update_element_rejects_unknown_style_token(pages):
    with pytest.raises(ValueError):
        update_element(pages, "home", "intro", "intro-title", {"style": {"font_size": "huge"}})


def test_remove_element(pages):
    result = remove_element(pages, "home", "features", "feature-a")

    section = find_section(find_page(result, "home"), "features")
    assert [e.id for e in section.elements] == ["feature-b"]
    assert find_element(section, "feature-a") is None


def test_remove_unknown_element_is_identity(pages):
    assert remove_element(pages, "home", "features", "missing") is pages


def test_set_style_replaces_only_that_attribute(pages):
    colored = set_element_style(pages, "home", "intro", "intro-title", "text_color", "text-editor-blue")
    resized = set_element_style(colored, "home", "intro", "intro-title", "font_size", FontSize.LG)

    style = _element(resized, "intro", "intro-title").style
    assert style.text_color == TextColor.BLUE
    assert style.font_size == FontSize.LG


def test_set_same_style_is_identity(pages):
    styled = set_element_style(pages, "home", "intro", "intro-title", "text_align", "right")
    assert set_element_style(styled, "home", "intro", "intro-title", "text_align", "right") is styled


def test_toggle_flag_twice_restores(pages):
    bold = toggle_element_style(pages, "home", "intro", "intro-text", "bold")
    assert _element(bold, "intro", "intro-text").style.bold is True

    plain = toggle_element_style(bold, "home", "intro", "intro-text", "bold")
    assert _element(plain, "intro", "intro-text").style.bold is False


def test_toggle_unknown_flag_raises(pages):
    with pytest.raises(ValueError):
        toggle_element_style(pages, "home", "intro", "intro-text", "strikethrough")
