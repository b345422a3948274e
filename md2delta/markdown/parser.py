"""Markdown parsing using markdown-it-py.

Configures markdown-it with the plugins we need:
- CommonMark base
- GFM tables and strikethrough

and turns the resulting SyntaxTreeNode AST into the element/text tree the
delta converter walks (HTML tag names, string attributes).
"""

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from md2delta.markdown.models import Element, Node, Text


def create_parser() -> MarkdownIt:
    """Create configured markdown-it parser."""
    md = MarkdownIt("commonmark")
    md.enable("table")
    md.enable("strikethrough")
    return md


# Singleton parser instance
_parser: MarkdownIt | None = None


def get_parser() -> MarkdownIt:
    """Get or create the singleton parser instance."""
    global _parser
    if _parser is None:
        _parser = create_parser()
    return _parser


def parse_markdown(text: str) -> list[Node]:
    """Parse markdown text into the top-level nodes of a markup tree.

    Args:
        text: Markdown text to parse

    Returns:
        Ordered top-level nodes
    """
    parser = get_parser()
    tokens = parser.parse(text)
    return to_markup_tree(SyntaxTreeNode(tokens))


def to_markup_tree(ast: SyntaxTreeNode) -> list[Node]:
    """Convert a markdown-it AST root into markup tree nodes."""
    return _convert_children(ast)


CELL_SEPARATOR = "\t"

# Node types whose tag markdown-it already spells the HTML way
_PASSTHROUGH_TYPES = {
    "heading",
    "blockquote",
    "bullet_list",
    "ordered_list",
    "list_item",
    "em",
    "strong",
    "s",
    "table",
    "thead",
    "tbody",
    "th",
    "td",
}


def _convert_children(node: SyntaxTreeNode) -> list[Node]:
    nodes: list[Node] = []
    for child in node.children:
        nodes.extend(_convert_node(child))
    return _merge_text(nodes)


def _convert_node(node: SyntaxTreeNode) -> list[Node]:
    """Convert a single AST node.

    Returns a list because some nodes unwrap into their children (inline
    containers, hidden paragraphs of tight lists) and some vanish.
    """
    match node.type:
        case "inline":
            return _convert_children(node)
        case "paragraph":
            if node.hidden:
                return _convert_children(node)
            return [Element(tag="p", children=_convert_children(node))]
        case "text" | "text_special" | "html_inline" | "html_block":
            return [Text(content=node.content)] if node.content else []
        case "softbreak":
            return [Text(content="\n")]
        case "hardbreak":
            return [Element.empty("br")]
        case "hr":
            return [Element.empty("hr")]
        case "code_inline":
            return [Element.text("code", node.content)]
        case "fence" | "code_block":
            return [_convert_code(node)]
        case "tr":
            return [_convert_row(node)]
        case "link":
            return [Element(tag="a", attributes=_string_attrs(node, "href", "title"), children=_convert_children(node))]
        case "image":
            attributes = _string_attrs(node, "src", "title")
            attributes["alt"] = node.content or ""
            return [Element(tag="img", attributes=attributes)]
        case _ if node.type in _PASSTHROUGH_TYPES:
            return [Element(tag=_tag_for(node), attributes=_string_attrs(node), children=_convert_children(node))]
        case _:
            # Unknown node types fall back to their text
            return [Text(content=node.content)] if node.content else _convert_children(node)


def _tag_for(node: SyntaxTreeNode) -> str:
    if node.type == "s":
        return "del"
    return node.tag


def _convert_code(node: SyntaxTreeNode) -> Element:
    """Fenced and indented code become <pre><code>…</code></pre>."""
    attributes: dict[str, str] = {}
    info = (node.info or "").strip()
    if info:
        attributes["class"] = f"language-{info.split()[0]}"
    code = Element(tag="code", attributes=attributes, children=[Text(content=node.content)])
    return Element(tag="pre", children=[code])


def _convert_row(node: SyntaxTreeNode) -> Element:
    """Table row with its cells separated by tabs; the converter ends each row with a line terminator."""
    children: list[Node] = []
    for cell in _convert_children(node):
        if children:
            children.append(Text(content=CELL_SEPARATOR))
        children.append(cell)
    return Element(tag="tr", children=children)


def _string_attrs(node: SyntaxTreeNode, *names: str) -> dict[str, str]:
    """Collect node attributes as strings (all of them when no names are given)."""
    attrs = node.attrs
    keys = names or tuple(attrs)
    result = {key: str(attrs[key]) for key in keys if attrs.get(key) is not None}
    if node.type == "ordered_list" and result.get("start") == "1":
        del result["start"]
    return result


def _merge_text(nodes: list[Node]) -> list[Node]:
    """Merge adjacent text leaves so soft-wrapped lines form one leaf."""
    merged: list[Node] = []
    for node in nodes:
        if isinstance(node, Text) and merged and isinstance(merged[-1], Text):
            merged[-1] = Text(content=merged[-1].content + node.content)
        else:
            merged.append(node)
    return merged
