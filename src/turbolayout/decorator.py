"""Decorate a content page with the layout page named by its decoration attribute.

The page identified by the ``layout:decorator`` attribute is resolved through
the resolver handed to the Decorator, so decorator pages are located the same
way as any other template.
"""

import os

from turbolayout.compose import decorate_body, decorate_head
from turbolayout.constants import (
    ATTRIBUTE_NAME_DECORATOR,
    ATTRIBUTE_NAME_FRAGMENT,
    DEFAULT_PREFIX,
    HTML_ELEMENT_BODY,
    HTML_ELEMENT_HEAD,
    HTML_ELEMENT_HTML,
    LINE_SEPARATOR,
)
from turbolayout.errors import DecoratorPlacementError, DecoratorShapeError, MissingDecoratorAttributeError
from turbolayout.fragments import FragmentReplacer, ScopeTable, find_fragments, pull_target_content
from turbolayout.node import DOCTYPE
from turbolayout.resolver import parse_template_spec
from turbolayout.utils import find_element, merge_attributes, prefixed


class DecorationResult:
    __slots__ = ("decorator_html", "document", "fragments", "scopes", "template_name")

    def __init__(self, document, decorator_html, fragments, scopes, template_name):
        self.document = document
        self.decorator_html = decorator_html
        self.fragments = fragments
        self.scopes = scopes
        self.template_name = template_name

    def __repr__(self):
        return f"DecorationResult({self.template_name}, fragments={sorted(self.fragments)})"


class Decorator:
    """Merges a content page into its decorator page.

    - resolver: TemplateResolver returning a fresh document per call
    - prefix: dialect prefix for the decorator/fragment attributes
    - line_separator: text inserted where the merge adds line breaks
    - debug: print merge trace lines (also enabled by TURBOLAYOUT_DEBUG=1)
    """

    __slots__ = ("decorator_attribute", "env_debug", "fragment_attribute", "line_separator", "prefix", "resolver")

    def __init__(self, resolver, *, prefix=DEFAULT_PREFIX, line_separator=LINE_SEPARATOR, debug=False):
        self.resolver = resolver
        self.prefix = prefix
        self.decorator_attribute = prefixed(prefix, ATTRIBUTE_NAME_DECORATOR)
        self.fragment_attribute = prefixed(prefix, ATTRIBUTE_NAME_FRAGMENT)
        self.line_separator = line_separator
        self.env_debug = bool(debug) or os.environ.get("TURBOLAYOUT_DEBUG", "0") == "1"

    def debug(self, message, indent=2):
        if self.env_debug:
            print(f"{' ' * indent}{self.__class__.__name__}: {message}")

    def find_decorated_root(self, document):
        """Locate the element carrying the decoration attribute, if any."""
        for element in document.iter_elements():
            if self.decorator_attribute in element.attributes:
                return element
        return None

    def decorate(self, element, context=None):
        """Compose the content page rooted at element with its decorator.

        element must be the root element of its document and carry the
        decoration attribute. The content document is edited in place: after
        this call its root element is the composed decorator <html> element.
        """
        parent = element.parent
        if parent is None or not parent.is_document:
            raise DecoratorPlacementError(self.decorator_attribute)
        attribute_value = element.attributes.get(self.decorator_attribute)
        if attribute_value is None:
            raise MissingDecoratorAttributeError(self.decorator_attribute)
        content_document = parent
        for other in content_document.iter_elements():
            if other is not element and self.decorator_attribute in other.attributes:
                raise DecoratorPlacementError(self.decorator_attribute)

        # Locate the decorator page, ensure it has an HTML root element
        template_name = parse_template_spec(attribute_value).template_name
        decorator_document = self.resolver.resolve(attribute_value, context)
        decorator_html = decorator_document.root_element if decorator_document is not None else None
        if decorator_html is None or decorator_html.tag_name != HTML_ELEMENT_HTML:
            raise DecoratorShapeError(template_name)
        self.debug(f"decorating <{element.tag_name}> with '{template_name}'")

        element.remove_attribute(self.decorator_attribute)
        decorate_head(decorator_html, find_element(element, HTML_ELEMENT_HEAD), self.line_separator)
        decorate_body(decorator_html, find_element(element, HTML_ELEMENT_BODY), self.line_separator)

        # Gather fragments from this page and scope them to the decorator's
        # HTML element; placeholders anywhere below it can see them.
        scopes = ScopeTable()
        fragments = find_fragments(content_document.element_children, self.fragment_attribute)
        if fragments:
            scopes.set_all(decorator_html, fragments)
            self.debug(f"scoped fragments {sorted(fragments)}")

        if element.tag_name == HTML_ELEMENT_HTML:
            merge_attributes(element, decorator_html)

        decorator_doctype = decorator_document.doctype
        if decorator_doctype is not None and content_document.doctype is None:
            content_document.insert_child_at(0, decorator_doctype)

        # Nodes ahead of the decorator's <html> (comments, processing
        # instructions) go ahead of the content root, keeping their order.
        for node in list(decorator_document.children):
            if node is decorator_html:
                break
            if node.tag_name == DOCTYPE:
                continue
            content_document.insert_before(node, content_document.first_element_child)

        pull_target_content(element, decorator_html)
        return DecorationResult(content_document, decorator_html, fragments, scopes, template_name)

    def process(self, document, context=None):
        """Decorate document if its root carries the decoration attribute, then fill fragments.

        Returns the DecorationResult, or None when the document is not decorated.
        """
        element = self.find_decorated_root(document)
        if element is None:
            return None
        result = self.decorate(element, context)
        FragmentReplacer(self.prefix, debug=self.env_debug).apply(result.decorator_html, result.scopes)
        return result


def decorate(document, resolver, context=None, **options):
    """Decorate and fragment-fill document in place with a fresh Decorator."""
    return Decorator(resolver, **options).process(document, context)
