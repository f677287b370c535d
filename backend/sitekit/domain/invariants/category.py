from .exceptions import InvariantViolation

def assert_category_parent(category, parent):
    """
    A category may not be its own ancestor.
    Walks up from the proposed parent; the tree is shallow in practice.
    """
    if parent is None:
        return

    seen = set()
    node = parent
    while node is not None:
        if node.id == category.id:
            raise InvariantViolation(
                f"Category '{category.slug}' cannot be nested under its own descendant '{parent.slug}'."
            )
        if node.id in seen:
            raise InvariantViolation("Category tree already contains a cycle.")
        seen.add(node.id)
        node = node.parent
