from pageweaver.domain.document import Element, ElementType
from .exceptions import InvariantViolation


def assert_element_content(element: Element) -> None:
    if element.type == ElementType.IMAGE and not element.content:
        raise InvariantViolation("image element must have a source URI set.")
