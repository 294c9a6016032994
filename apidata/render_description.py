"""Logic for rendering remark description trees as inline HTML fragments."""

from typing import Any

LINK_NODE_TYPES = {"link", "linkReference"}


def render_description(tree: Any) -> str:
    """Render the first paragraph of a description tree as an HTML fragment.

    Text nodes are emitted verbatim, links become anchors and every other inline
    node is dropped. Newlines turn into ``<br>``. Anything that is not a tree
    with children renders as an empty string.
    """
    if not isinstance(tree, dict):
        return ""
    children = tree.get("children") or []
    if not children or not isinstance(children[0], dict):
        return ""

    inline = children[0].get("children") or []
    return "".join(_render_inline(node).replace("\n", "<br>") for node in inline)


def _render_inline(node: Any) -> str:
    if not isinstance(node, dict):
        return ""
    node_type = node.get("type")
    if node_type == "text":
        return str(node.get("value") or "")
    if node_type in LINK_NODE_TYPES:
        label_nodes = node.get("children") or [{}]
        first = label_nodes[0] if isinstance(label_nodes[0], dict) else {}
        label = first.get("value") or ""
        return f'<a href="{node.get("url") or ""}">{label}</a>'
    return ""
