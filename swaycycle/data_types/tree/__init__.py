from swaycycle.data_types.tree.nodes import (
    Con,
    MalformedTreeError,
    Node,
    Output,
    Root,
    Workspace,
    parse_tree,
)

__all__ = [
    "Con",
    "MalformedTreeError",
    "Node",
    "Output",
    "Root",
    "Workspace",
    "parse_tree",
]
