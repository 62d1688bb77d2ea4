import os

# Element names the decorator merge cares about
HTML_ELEMENT_HTML = "html"
HTML_ELEMENT_HEAD = "head"
HTML_ELEMENT_TITLE = "title"
HTML_ELEMENT_BODY = "body"

DEFAULT_PREFIX = "layout"
ATTRIBUTE_NAME_DECORATOR = "decorator"
ATTRIBUTE_NAME_FRAGMENT = "fragment"

LINE_SEPARATOR = os.linesep

# Separates a template name from an optional fragment selector in a
# decoration attribute value, e.g. "layouts/base :: content"
TEMPLATE_SPEC_SEPARATOR = "::"

# HTML5 void elements (no closing tag)
VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})
