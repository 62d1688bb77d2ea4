"""HTML serialization utilities for TurboLayout DOM nodes."""

from turbolayout.constants import VOID_ELEMENTS
from turbolayout.node import COMMENT, DOCTYPE, DOCUMENT, PROCESSING_INSTRUCTION, TEXT


def _escape_text(text):
    if not text:
        return ""
    return str(text).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_attr_value(value):
    return str(value).replace("&", "&amp;").replace('"', "&quot;")


def serialize_start_tag(name, attrs):
    parts = ["<", name]
    for key, value in (attrs or {}).items():
        if value is None or value == "":
            parts.extend([" ", key])
        else:
            parts.extend([" ", key, '="', _escape_attr_value(value), '"'])
    parts.append(">")
    return "".join(parts)


def to_html(node, indent=0, indent_size=2, *, pretty=False):
    """Convert node to an HTML string.

    With pretty=False the tree is written out exactly, text nodes included.
    With pretty=True whitespace-only text is dropped and elements are
    indented one per line.
    """
    if not pretty:
        return _node_to_compact_html(node)
    if node.tag_name == DOCUMENT:
        parts = []
        for child in node.children:
            child_html = _node_to_html(child, indent, indent_size)
            if child_html:
                parts.append(child_html)
        return "\n".join(parts)
    return _node_to_html(node, indent, indent_size)


def _node_to_compact_html(node):
    name = node.tag_name
    if name == DOCUMENT:
        return "".join(_node_to_compact_html(child) for child in node.children)
    if name == TEXT:
        return _escape_text(node.text_content)
    if name == COMMENT:
        return f"<!--{node.text_content}-->"
    if name == PROCESSING_INSTRUCTION:
        return f"<?{node.text_content}?>"
    if name == DOCTYPE:
        return f"<!DOCTYPE {node.text_content or 'html'}>"

    start = serialize_start_tag(name, node.attributes)
    if name in VOID_ELEMENTS:
        return start
    inner = "".join(_node_to_compact_html(child) for child in node.children)
    return f"{start}{inner}</{name}>"


def _node_to_html(node, indent=0, indent_size=2):
    """Helper to convert a node to indented HTML."""
    prefix = " " * (indent * indent_size)
    name = node.tag_name

    if name == TEXT:
        text = node.text_content.strip()
        if text:
            return f"{prefix}{_escape_text(text)}"
        return ""

    if name in (COMMENT, PROCESSING_INSTRUCTION, DOCTYPE):
        return f"{prefix}{_node_to_compact_html(node)}"

    start = serialize_start_tag(name, node.attributes)
    if name in VOID_ELEMENTS:
        return f"{prefix}{start}"

    children = node.children
    if not children:
        return f"{prefix}{start}</{name}>"

    # Text-only children render inline
    if all(c.tag_name == TEXT for c in children):
        text = "".join(c.text_content for c in children).strip()
        return f"{prefix}{start}{_escape_text(text)}</{name}>"

    parts = [f"{prefix}{start}"]
    for child in children:
        child_html = _node_to_html(child, indent + 1, indent_size)
        if child_html:
            parts.append(child_html)
    parts.append(f"{prefix}</{name}>")
    return "\n".join(parts)
