from .node import Node


def filter_tree(nodes: list[Node], term: str | None) -> list[Node]:
    """
    Prune *nodes* down to the entries whose name contains *term*.

    A matching node is kept with its children emptied. A node that does not
    match itself is kept only when some descendant matches, with its
    children replaced by the filtered ones. The input is left untouched.
    An empty or missing *term* returns *nodes* as is.
    """
    if not term:
        return nodes

    needle = term.lower()

    def _filter(items: list[Node]) -> list[Node]:
        kept: list[Node] = []
        for item in items:
            if needle in item.name.lower():
                kept.append(item.model_copy(update={"children": []}))
            elif item.children:
                matches = _filter(item.children)
                if matches:
                    kept.append(item.model_copy(update={"children": matches}))
        return kept

    return _filter(nodes)
