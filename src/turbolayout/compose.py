"""HEAD and BODY merge policies.

Both functions take the decorator's <html> element and the matching element
located in the content page (or None), and edit the decorator tree in place.
Page nodes are moved, not copied, into the decorator.
"""

from turbolayout.constants import (
    HTML_ELEMENT_BODY,
    HTML_ELEMENT_HEAD,
    HTML_ELEMENT_TITLE,
    LINE_SEPARATOR,
)
from turbolayout.node import Text
from turbolayout.utils import find_element, merge_attributes


def decorate_head(decorator_html, page_head, line_separator=LINE_SEPARATOR):
    """Merge the page's HEAD into the decorator's HEAD.

    The page TITLE replaces the decorator TITLE in place (or becomes the
    first child of the decorator HEAD when the decorator has no title). All
    other page HEAD children are appended after the decorator's own, in their
    original order. HEAD attributes are merged with the page taking
    precedence.

    Returns the HEAD element present in the decorator afterwards.
    """
    if page_head is None:
        return find_element(decorator_html, HTML_ELEMENT_HEAD)

    decorator_head = find_element(decorator_html, HTML_ELEMENT_HEAD)
    if decorator_head is None:
        decorator_html.insert_child_at(0, Text(line_separator))
        decorator_html.insert_child_at(1, page_head)
        return page_head

    page_title = find_element(page_head, HTML_ELEMENT_TITLE)
    if page_title is not None:
        page_title.parent.remove_child(page_title)
        decorator_title = find_element(decorator_head, HTML_ELEMENT_TITLE)
        if decorator_title is not None:
            # Title may sit below a wrapper inside the decorator head
            decorator_title.parent.replace_child(page_title, decorator_title)
        else:
            decorator_head.insert_child_at(0, Text(line_separator))
            decorator_head.insert_child_at(1, page_title)

    for child in list(page_head.children):
        decorator_head.append_child(child)

    merge_attributes(page_head, decorator_head)
    return decorator_head


def decorate_body(decorator_html, page_body, line_separator=LINE_SEPARATOR):
    """Merge the page's BODY attributes into the decorator's BODY.

    BODY children are left alone; content is pulled in later through
    fragment replacement. When the decorator has no BODY the page BODY is
    moved over whole.

    Returns the BODY element present in the decorator afterwards.
    """
    if page_body is None:
        return find_element(decorator_html, HTML_ELEMENT_BODY)

    decorator_body = find_element(decorator_html, HTML_ELEMENT_BODY)
    if decorator_body is None:
        decorator_html.append_child(page_body)
        decorator_html.append_child(Text(line_separator))
        return page_body

    merge_attributes(page_body, decorator_body)
    return decorator_body
