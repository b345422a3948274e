"""Markdown parsing into the markup tree consumed by the delta converter."""

from md2delta.markdown.models import Element, Node, Text, count_nodes
from md2delta.markdown.parser import parse_markdown, to_markup_tree

__all__ = [
    # Parser
    "parse_markdown",
    "to_markup_tree",
    # Models
    "Node",
    "Element",
    "Text",
    "count_nodes",
]
