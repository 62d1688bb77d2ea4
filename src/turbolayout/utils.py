"""Tree helpers shared by the composer and the decorator.

Small, read-mostly functions that don't belong to any single merge step.
"""


def find_element(root, tag_name):
    """Find the first element named tag_name in root's subtree.

    The search is depth-first and pre-order, so root itself is checked before
    its children and the first match in document order wins. Nodes outside
    root's subtree are never visited.

    Args:
        root: Node to initiate the search from
        tag_name: Name of the element to look for
    Returns:
        The matching Node or None if not found

    """
    if root is None:
        return None
    for element in root.iter_elements():
        if element.tag_name == tag_name:
            return element
    return None


def merge_attributes(source, target):
    """Copy every attribute of source onto target; source values win on collisions."""
    if source is None or target is None:
        return
    for name, value in source.attributes.items():
        target.attributes[name] = value


def prefixed(prefix, name):
    """Build a dialect attribute name, e.g. prefixed("layout", "decorator")."""
    if not prefix:
        return name
    return f"{prefix}:{name}"
