"""
Seed document and templates for new pages, sections, elements and links.

Used when no persisted document exists and by callers that need a fresh
building block with sensible defaults.
"""
from typing import Tuple

from pageweaver.utils.ids import new_id
from .document import (
    Element,
    ElementStyle,
    ElementType,
    NavigationEntry,
    Page,
    Section,
    SectionProperties,
    SectionType,
)
from .styles import FontSize, TextAlign, TextColor

PLACEHOLDER_IMAGE = "/placeholder.svg"

HOME_PAGE_ID = "home-page"

_ELEMENT_DEFAULTS = {
    ElementType.HEADING: (
        "New Heading",
        ElementStyle(font_size=FontSize.XL2, bold=True, custom_class="mb-4"),
    ),
    ElementType.TEXT: ("New paragraph text", ElementStyle(custom_class="mb-4")),
    ElementType.BUTTON: (
        "Click Me",
        ElementStyle(text_color=TextColor.WHITE, custom_class="bg-editor-blue px-4 py-2 rounded-md"),
    ),
    ElementType.IMAGE: (PLACEHOLDER_IMAGE, ElementStyle(custom_class="w-full max-w-md mx-auto mb-4")),
}


def new_element(element_type) -> Element:
    element_type = ElementType(element_type)
    content, style = _ELEMENT_DEFAULTS[element_type]
    return Element(
        id=new_id(f"element-{element_type.value}"),
        type=element_type,
        content=content,
        style=style,
    )


def new_section(title: str = "New Section") -> Section:
    return Section(
        id=new_id("section"),
        type=SectionType.CONTENT,
        properties=SectionProperties(),
        elements=(
            Element(
                id=new_id("element-heading"),
                type=ElementType.HEADING,
                content=title,
                style=ElementStyle(font_size=FontSize.XL2, bold=True, text_align=TextAlign.CENTER, custom_class="mb-4"),
            ),
            Element(
                id=new_id("element-text"),
                type=ElementType.TEXT,
                content="This is a new section. Add elements and customize as needed.",
                style=ElementStyle(text_align=TextAlign.CENTER, custom_class="max-w-2xl mx-auto"),
            ),
        ),
    )


def new_page(index: int) -> Page:
    """Page "New Page <index>" with a single starter section."""
    title = f"New Page {index}"
    slug = "/" + "-".join(title.lower().split())
    return Page(
        id=new_id("page"),
        title=title,
        slug=slug,
        sections=(new_section(title),),
    )


def new_header_section(site_title: str = "PageWeaver") -> Section:
    return Section(
        id=new_id("header"),
        type=SectionType.HEADER,
        properties=SectionProperties(padding_y="py-4"),
        elements=(
            Element(
                id=new_id("element-heading"),
                type=ElementType.HEADING,
                content=site_title,
                style=ElementStyle(font_size=FontSize.XL, bold=True, text_color=TextColor.BLUE),
            ),
        ),
    )


def new_footer_section(text: str = "All rights reserved.") -> Section:
    return Section(
        id=new_id("footer"),
        type=SectionType.FOOTER,
        properties=SectionProperties(background_color="bg-gray-900", padding_y="py-8"),
        elements=(
            Element(
                id=new_id("element-text"),
                type=ElementType.TEXT,
                content=text,
                style=ElementStyle(text_align=TextAlign.CENTER, text_color=TextColor.WHITE),
            ),
        ),
    )


def new_navigation_entry(order: int) -> NavigationEntry:
    return NavigationEntry(id=new_id("menu-item"), title="New Link", url="#", order=order)


def default_pages() -> Tuple[Page, ...]:
    hero = Section(
        id="hero-section",
        properties=SectionProperties(
            background_color="bg-gradient-to-r from-editor-blue to-editor-purple",
            padding_y="py-20",
        ),
        elements=(
            Element(
                id="hero-heading",
                type=ElementType.HEADING,
                content="Build the website you want with a visual editor",
                style=ElementStyle(
                    font_size=FontSize.XL5,
                    bold=True,
                    text_color=TextColor.WHITE,
                    text_align=TextAlign.CENTER,
                    custom_class="mb-6",
                ),
            ),
            Element(
                id="hero-text",
                type=ElementType.TEXT,
                content="Edit content, images and layout without writing code.",
                style=ElementStyle(
                    font_size=FontSize.LG,
                    text_color=TextColor.WHITE,
                    text_align=TextAlign.CENTER,
                    custom_class="max-w-3xl mx-auto mb-8",
                ),
            ),
            Element(
                id="hero-button",
                type=ElementType.BUTTON,
                content="Try it now",
                style=ElementStyle(text_color=TextColor.BLUE, custom_class="bg-white px-6 py-3 rounded-lg mx-auto block"),
            ),
        ),
    )

    features = Section(
        id="features-section",
        properties=SectionProperties(padding_y="py-16"),
        elements=(
            Element(
                id="features-heading",
                type=ElementType.HEADING,
                content="Features",
                style=ElementStyle(font_size=FontSize.XL3, bold=True, text_align=TextAlign.CENTER, custom_class="mb-12"),
            ),
            *_feature("feature-1", "Visual editor", "Edit the page in place and see the result immediately."),
            *_feature("feature-2", "Section builder", "Add, reorder and duplicate sections in a click."),
            *_feature("feature-3", "Multi-page sites", "Create several pages linked by a navigation menu."),
        ),
    )

    cta = Section(
        id="cta-section",
        properties=SectionProperties(background_color="bg-editor-indigo", padding_y="py-16"),
        elements=(
            Element(
                id="cta-heading",
                type=ElementType.HEADING,
                content="Ready to build your website?",
                style=ElementStyle(
                    font_size=FontSize.XL3,
                    bold=True,
                    text_color=TextColor.WHITE,
                    text_align=TextAlign.CENTER,
                    custom_class="mb-6",
                ),
            ),
            Element(
                id="cta-button",
                type=ElementType.BUTTON,
                content="Sign up for free",
                style=ElementStyle(text_color=TextColor.INDIGO, custom_class="bg-white px-6 py-3 rounded-lg mx-auto block"),
            ),
        ),
    )

    header = Section(
        id="header-section",
        type=SectionType.HEADER,
        properties=SectionProperties(padding_y="py-4"),
        elements=(
            Element(
                id="header-title",
                type=ElementType.HEADING,
                content="PageWeaver",
                style=ElementStyle(font_size=FontSize.XL, bold=True, text_color=TextColor.BLUE),
            ),
        ),
    )

    footer = Section(
        id="footer-section",
        type=SectionType.FOOTER,
        properties=SectionProperties(background_color="bg-gray-900", padding_y="py-8"),
        elements=(
            Element(
                id="footer-text",
                type=ElementType.TEXT,
                content="All rights reserved.",
                style=ElementStyle(text_align=TextAlign.CENTER, text_color=TextColor.WHITE),
            ),
        ),
    )

    home = Page(
        id=HOME_PAGE_ID,
        title="Home",
        slug="/",
        sections=(header, hero, features, cta, footer),
    )
    return (home,)


def default_navigation() -> Tuple[NavigationEntry, ...]:
    return (NavigationEntry(id="menu-home", title="Home", url="/", order=0),)


def _feature(prefix: str, title: str, text: str) -> Tuple[Element, ...]:
    return (
        Element(
            id=f"{prefix}-image",
            type=ElementType.IMAGE,
            content=PLACEHOLDER_IMAGE,
            style=ElementStyle(custom_class="w-16 h-16 mx-auto mb-4"),
        ),
        Element(
            id=f"{prefix}-heading",
            type=ElementType.HEADING,
            content=title,
            style=ElementStyle(font_size=FontSize.XL, bold=True, text_align=TextAlign.CENTER, custom_class="mb-2"),
        ),
        Element(
            id=f"{prefix}-text",
            type=ElementType.TEXT,
            content=text,
            style=ElementStyle(text_color=TextColor.GRAY, text_align=TextAlign.CENTER, custom_class="max-w-md mx-auto mb-12"),
        ),
    )
