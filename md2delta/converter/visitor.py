"""Convert a markup tree into a flat rich-text delta.

Walks the tree once, depth first. Entering an element may push block and
inline attributes, leaving it pops them again; text leaves are inserted with
the attributes active at that point and block exits terminate lines.
"""

from collections.abc import Mapping, Sequence

from loguru import logger

from md2delta.converter import newlines
from md2delta.converter.context import ConversionContext
from md2delta.converter.mappings import AttributeConverter, EmbedConverter, MappingResolver
from md2delta.converter.text import normalize_text, split_lines
from md2delta.delta.builder import Delta
from md2delta.exceptions import ConversionError
from md2delta.markdown.models import Element, Node, Text
from md2delta.markdown.parser import parse_markdown

LINE_BREAK_TAG = "br"


class _ElementFrame:
    """What entering an element changed, so leaving it can undo exactly that."""

    __slots__ = ("pushed_block", "pushed_inline", "top_level")

    def __init__(self, pushed_block: bool, pushed_inline: bool, top_level: bool):
        self.pushed_block = pushed_block
        self.pushed_inline = pushed_inline
        self.top_level = top_level


class MarkdownToDelta:
    """Converts markup trees (or markdown text) into deltas."""

    def __init__(
        self,
        custom_inline_attributes: Mapping[str, AttributeConverter] | None = None,
        custom_block_attributes: Mapping[str, AttributeConverter] | None = None,
        custom_embeds: Mapping[str, EmbedConverter] | None = None,
        collapse_soft_line_breaks: bool = True,
    ):
        self.resolver = MappingResolver(
            custom_inline_attributes=custom_inline_attributes,
            custom_block_attributes=custom_block_attributes,
            custom_embeds=custom_embeds,
        )
        self.collapse_soft_line_breaks = collapse_soft_line_breaks

    def convert_markdown(self, text: str) -> Delta:
        """Parse markdown text and convert it."""
        return self.convert(parse_markdown(text))

    def convert(self, nodes: Sequence[Node]) -> Delta:
        """Convert the top-level nodes of a markup tree."""
        context = ConversionContext()
        try:
            for node in nodes:
                self._visit(node, context, depth=0)
        except ConversionError as exc:
            logger.error(f"Conversion aborted: {exc}")
            raise

        # Ensure the delta ends with a newline.
        context.delta.ensure_trailing_newline(context.effective_block_attributes())
        logger.debug(f"Converted {len(nodes)} top-level nodes into {len(context.delta)} ops")
        return context.delta

    def _visit(self, node: Node, context: ConversionContext, depth: int) -> None:
        if isinstance(node, Text):
            self._visit_text(node, context)
            return

        frame = self._visit_element_before(node, context, top_level=depth == 0)
        for child in node.children:
            self._visit(child, context, depth + 1)
        self._visit_element_after(node, context, frame)

    def _visit_text(self, text: Text, context: ConversionContext) -> None:
        rendered = normalize_text(text.content, context, self.collapse_soft_line_breaks)

        if "\n" in rendered:
            lines = split_lines(rendered)
            for i, line in enumerate(lines):
                context.insert_text(line)
                if i < len(lines) - 1:
                    context.insert_newline()
        else:
            context.insert_text(rendered)

        context.last_tag = None
        context.just_exited_block = False

    def _visit_element_before(self, element: Element, context: ConversionContext, top_level: bool) -> _ElementFrame:
        newlines.insert_newline_before(context, element)

        tag = element.tag
        if context.current_block_tag is None:
            context.current_block_tag = tag
        context.last_tag = tag

        pushed_block = self.resolver.has_block_attribute(element)
        if pushed_block:
            context.block_attributes.append(self.resolver.to_block_attribute(element))

        pushed_inline = self.resolver.has_inline_attribute(element, context.in_code_block)
        if pushed_inline:
            context.inline_attributes.append(self.resolver.to_inline_attribute(element, context.in_code_block))

        if tag == newlines.BLOCKQUOTE_TAG:
            context.in_blockquote = True
        elif tag == newlines.CODE_BLOCK_TAG:
            context.in_code_block = True
        elif tag == newlines.LIST_ITEM_TAG:
            context.list_depth += 1

        return _ElementFrame(pushed_block=pushed_block, pushed_inline=pushed_inline, top_level=top_level)

    def _visit_element_after(self, element: Element, context: ConversionContext, frame: _ElementFrame) -> None:
        tag = element.tag

        if self.resolver.is_embed(element):
            context.delta.insert(self.resolver.to_embed(element))

        if tag == LINE_BREAK_TAG:
            context.delta.insert("\n")

        # Exit block with new line; hr needs to be followed by new line
        newlines.insert_newline_after(
            context,
            element,
            top_level=frame.top_level,
            has_block_attribute=frame.pushed_block,
        )

        if tag == newlines.BLOCKQUOTE_TAG:
            context.in_blockquote = False
        elif tag == newlines.CODE_BLOCK_TAG:
            context.in_code_block = False
        elif tag == newlines.LIST_ITEM_TAG:
            context.list_depth -= 1

        if frame.pushed_block:
            context.block_attributes.pop()
        if frame.pushed_inline:
            context.inline_attributes.pop()

        if context.current_block_tag == tag:
            context.current_block_tag = None
        context.last_tag = tag


def convert(
    nodes: Sequence[Node],
    *,
    custom_inline_attributes: Mapping[str, AttributeConverter] | None = None,
    custom_block_attributes: Mapping[str, AttributeConverter] | None = None,
    custom_embeds: Mapping[str, EmbedConverter] | None = None,
    collapse_soft_line_breaks: bool = True,
) -> Delta:
    """Convert markup tree nodes to a Delta."""
    return MarkdownToDelta(
        custom_inline_attributes=custom_inline_attributes,
        custom_block_attributes=custom_block_attributes,
        custom_embeds=custom_embeds,
        collapse_soft_line_breaks=collapse_soft_line_breaks,
    ).convert(nodes)


def markdown_to_delta(
    text: str,
    *,
    custom_inline_attributes: Mapping[str, AttributeConverter] | None = None,
    custom_block_attributes: Mapping[str, AttributeConverter] | None = None,
    custom_embeds: Mapping[str, EmbedConverter] | None = None,
    collapse_soft_line_breaks: bool = True,
) -> Delta:
    """Parse markdown text and convert it to a Delta."""
    return convert(
        parse_markdown(text),
        custom_inline_attributes=custom_inline_attributes,
        custom_block_attributes=custom_block_attributes,
        custom_embeds=custom_embeds,
        collapse_soft_line_breaks=collapse_soft_line_breaks,
    )
