import pytest

from pageweaver import create_app
from pageweaver.domain.document import (
    Element,
    ElementType,
    GridPosition,
    NavigationEntry,
    Page,
    Section,
    SectionProperties,
    SectionType,
)
from pageweaver.domain.roles import Role
from pageweaver.engine.state import initial_state


def make_element(element_id, element_type=ElementType.TEXT, content="Text", **kwargs):
    return Element(id=element_id, type=element_type, content=content, **kwargs)


def make_section(section_id, *element_ids, section_type=SectionType.CONTENT, properties=None):
    return Section(
        id=section_id,
        type=section_type,
        elements=tuple(make_element(e) for e in element_ids),
        properties=properties or SectionProperties(),
    )


@pytest.fixture
def pages():
    home = Page(
        id="home",
        title="Home",
        slug="/",
        sections=(
            make_section("header", "logo", section_type=SectionType.HEADER),
            make_section("intro", "intro-title", "intro-text"),
            make_section("features", "feature-a", "feature-b"),
            make_section("outro", "outro-text"),
            make_section("footer", "copyright", section_type=SectionType.FOOTER),
        ),
    )
    about = Page(
        id="about",
        title="About",
        slug="/about",
        sections=(make_section("about-main", "about-text"),),
    )
    return (home, about)


@pytest.fixture
def grid_pages():
    gallery = Section(
        id="gallery",
        properties=SectionProperties(
            is_grid_layout=True,
            is_draggable_grid=True,
            grid_columns="grid-cols-3",
            grid_rows="grid-rows-2",
        ),
        elements=(
            make_element("photo", ElementType.IMAGE, "/a.png", grid_position=GridPosition(1, 1, 2, 1)),
            make_element("caption"),
        ),
    )
    return (Page(id="home", title="Home", slug="/", sections=(gallery,)),)


@pytest.fixture
def navigation():
    return (
        NavigationEntry(id="nav-home", title="Home", url="/", order=0),
        NavigationEntry(id="nav-about", title="About", url="/about", order=1),
        NavigationEntry(id="nav-blog", title="Blog", url="https://blog.example.com", order=2),
    )


@pytest.fixture
def admin_state(pages, navigation):
    return initial_state(pages, navigation, Role.ADMIN)


@pytest.fixture
def editor_state(pages, navigation):
    return initial_state(pages, navigation, Role.EDITOR)


@pytest.fixture
def viewer_state(pages, navigation):
    return initial_state(pages, navigation, Role.VIEWER)


@pytest.fixture
def app():
    app = create_app("testing")
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
