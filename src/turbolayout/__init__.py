from .compose import decorate_body, decorate_head
from .decorator import DecorationResult, Decorator, decorate
from .errors import (
    DecoratorPlacementError,
    DecoratorShapeError,
    LayoutError,
    MissingDecoratorAttributeError,
    TemplateNotFoundError,
)
from .fragments import FragmentReplacer, ScopeTable, find_fragments, pull_target_content
from .node import Comment, Doctype, Document, Element, Node, ProcessingInstruction, Text
from .resolver import DictTemplateResolver, TemplateResolver, TemplateSpec, parse_template_spec
from .serialize import to_html
from .utils import find_element, merge_attributes

__all__ = [
    "Comment",
    "DecorationResult",
    "Decorator",
    "DecoratorPlacementError",
    "DecoratorShapeError",
    "DictTemplateResolver",
    "Doctype",
    "Document",
    "Element",
    "FragmentReplacer",
    "LayoutError",
    "MissingDecoratorAttributeError",
    "Node",
    "ProcessingInstruction",
    "ScopeTable",
    "TemplateNotFoundError",
    "TemplateResolver",
    "TemplateSpec",
    "Text",
    "decorate",
    "decorate_body",
    "decorate_head",
    "find_element",
    "find_fragments",
    "merge_attributes",
    "parse_template_spec",
    "pull_target_content",
    "to_html",
]
