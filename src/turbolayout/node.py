DOCUMENT = "document"
TEXT = "#text"
COMMENT = "#comment"
PROCESSING_INSTRUCTION = "#pi"
DOCTYPE = "!doctype"

NON_ELEMENT_TAGS = frozenset({DOCUMENT, TEXT, COMMENT, PROCESSING_INSTRUCTION, DOCTYPE})


class Node:
    """Represents a DOM-like node.
    - tag_name: e.g., 'div', 'p', etc. Use '#text' for text nodes.
    - attributes: dict of tag attributes, in insertion order
    - children: list of child Nodes owned by this node
    - parent: reference to the owning Node (or None for root)
    """

    __slots__ = (
        "attributes",
        "children",
        "parent",
        "tag_name",
        "text_content",
    )

    def __init__(self, tag_name, attributes=None, text_content=None):
        if tag_name is None or tag_name == "":
            msg = "Empty tag_name passed to Node constructor"
            raise ValueError(msg)

        self.tag_name = tag_name
        if attributes:
            # Prefixed names (layout:decorator) keep their case, plain HTML
            # names are lowercased. First occurrence wins.
            normalized = {}
            for k, v in attributes.items():
                key = k if ":" in k else k.lower()
                if key not in normalized:
                    normalized[key] = v
            self.attributes = normalized
        else:
            self.attributes = {}
        self.children = []
        self.parent = None
        # For text, comment, pi and doctype nodes store inline text
        self.text_content = text_content if text_content is not None else ""

    @property
    def is_element(self):
        return self.tag_name not in NON_ELEMENT_TAGS

    @property
    def is_document(self):
        return self.tag_name == DOCUMENT

    @property
    def element_children(self):
        return [child for child in self.children if child.is_element]

    @property
    def first_element_child(self):
        for child in self.children:
            if child.is_element:
                return child
        return None

    # Document accessors
    @property
    def root_element(self):
        return self.first_element_child

    @property
    def doctype(self):
        for child in self.children:
            if child.tag_name == DOCTYPE:
                return child
        return None

    def iter_elements(self):
        """Yield this node (if an element) and every descendant element, pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_element:
                yield node
            stack.extend(reversed(node.children))

    def has_attribute(self, name):
        return name in self.attributes

    def get_attribute(self, name, default=None):
        return self.attributes.get(name, default)

    def set_attribute(self, name, value):
        self.attributes[name] = value

    def remove_attribute(self, name):
        self.attributes.pop(name, None)

    def _detach(self, child):
        old_parent = child.parent
        if old_parent is not None:
            old_parent.children.remove(child)
            child.parent = None

    def append_child(self, child):
        if self._would_create_circular_reference(child):
            msg = f"Adding {child.tag_name} as child of {self.tag_name} would create circular reference"
            raise ValueError(msg)

        self._detach(child)
        child.parent = self
        self.children.append(child)

    def _would_create_circular_reference(self, child):
        """Check if adding child would create a circular reference."""
        current = self
        while current is not None:
            if current is child:
                return True
            current = current.parent
        return False

    def insert_child_at(self, index, child):
        """Insert a child at the specified index."""
        if self._would_create_circular_reference(child):
            msg = f"Adding {child.tag_name} as child of {self.tag_name} would create circular reference"
            raise ValueError(msg)

        self._detach(child)

        # Append at end if index is out of bounds
        if index < 0 or index >= len(self.children):
            self.append_child(child)
            return

        child.parent = self
        self.children.insert(index, child)

    def insert_before(self, new_node, reference_node):
        if reference_node is None:
            self.append_child(new_node)
            return
        if reference_node.parent is not self:
            msg = f"{reference_node!r} is not a child of {self!r}"
            raise ValueError(msg)
        if new_node is reference_node:
            return

        if self._would_create_circular_reference(new_node):
            msg = f"Adding {new_node.tag_name} as child of {self.tag_name} would create circular reference"
            raise ValueError(msg)

        self._detach(new_node)
        idx = self.children.index(reference_node)
        new_node.parent = self
        self.children.insert(idx, new_node)

    def remove_child(self, child):
        """Remove a child node and clear its parent.

        Args:
            child: The Node to remove

        """
        if child.parent is not self:
            return
        self.children.remove(child)
        child.parent = None

    def replace_child(self, new_node, old_node):
        """Put new_node where old_node is and detach old_node."""
        self.insert_before(new_node, old_node)
        self.remove_child(old_node)

    def clone(self):
        """Deep copy of this subtree. The copy has no parent."""
        copy = Node(self.tag_name, text_content=self.text_content)
        copy.attributes = dict(self.attributes)
        for child in self.children:
            child_copy = child.clone()
            child_copy.parent = copy
            copy.children.append(child_copy)
        return copy

    def __repr__(self):
        if self.tag_name == TEXT:
            return f"Node(#text='{self.text_content[:30]}')"
        if self.tag_name == COMMENT:
            return f"Node(#comment='{self.text_content[:30]}')"
        return f"Node(<{self.tag_name}>, children={len(self.children)})"


def Document(*children):
    doc = Node(DOCUMENT)
    for child in children:
        doc.append_child(child)
    return doc


def Element(tag_name, attributes=None, *children):
    element = Node(tag_name.lower(), attributes)
    for child in children:
        if isinstance(child, str):
            child = Text(child)
        element.append_child(child)
    return element


def Text(data):
    return Node(TEXT, text_content=data)


def Comment(data):
    return Node(COMMENT, text_content=data)


def ProcessingInstruction(data):
    return Node(PROCESSING_INSTRUCTION, text_content=data)


def Doctype(name="html"):
    return Node(DOCTYPE, text_content=name)
