"""Template resolution contract.

The decorator never loads templates itself. It asks a resolver for a
document, and the resolver must hand back a tree nobody else holds: each
decoration run edits its copy in place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from turbolayout.constants import TEMPLATE_SPEC_SEPARATOR
from turbolayout.errors import TemplateNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from turbolayout.node import Node


class TemplateSpec:
    __slots__ = ("fragment", "template_name")

    def __init__(self, template_name, fragment=None):
        self.template_name = template_name
        self.fragment = fragment

    def __repr__(self):
        if self.fragment:
            return f"TemplateSpec({self.template_name} :: {self.fragment})"
        return f"TemplateSpec({self.template_name})"


def parse_template_spec(value: str) -> TemplateSpec:
    """Split 'name :: selector' into its template name and fragment selector."""
    value = (value or "").strip()
    if TEMPLATE_SPEC_SEPARATOR in value:
        name, fragment = value.split(TEMPLATE_SPEC_SEPARATOR, 1)
        return TemplateSpec(name.strip(), fragment.strip() or None)
    return TemplateSpec(value)


class TemplateResolver:
    """Resolves a decoration attribute value to a fresh document tree."""

    def resolve(self, name: str, context: object | None = None) -> Node:
        raise NotImplementedError


class DictTemplateResolver(TemplateResolver):
    """In-memory resolver over a mapping of template name to document.

    Values may be documents or zero-argument callables returning documents.
    Stored documents are never handed out directly; every call returns a
    deep copy.
    """

    __slots__ = ("templates",)

    def __init__(self, templates: Mapping[str, Node | Callable[[], Node]] | None = None) -> None:
        self.templates = dict(templates or {})

    def add(self, name: str, document: Node | Callable[[], Node]) -> None:
        self.templates[name] = document

    def resolve(self, name: str, context: object | None = None) -> Node:
        spec = parse_template_spec(name)
        source = self.templates.get(spec.template_name)
        if source is None:
            raise TemplateNotFoundError(spec.template_name)
        if callable(source):
            source = source()
        return source.clone()
