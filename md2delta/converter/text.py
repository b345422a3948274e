"""Markdown whitespace rules applied to text leaves before insertion."""

import re

from md2delta.converter.context import ConversionContext

_LEADING_SPACES = re.compile(r"^ *")
# Trailing space of a line, the line break and the next line's indentation
_SOFT_LINE_BREAK = re.compile(r" ?\n *")

# Leading spaces following a hard line break are ignored.
# https://github.github.com/gfm/#example-657
HARD_BREAK_TAGS = frozenset({"p", "ol", "li", "br"})


def trim_text_to_markdown_spec(text: str, last_tag: str | None, collapse_soft_line_breaks: bool = True) -> str:
    """Apply leading-space stripping and soft line break collapsing."""
    result = text
    if last_tag in HARD_BREAK_TAGS:
        result = _LEADING_SPACES.sub("", result, count=1)

    if not collapse_soft_line_breaks:
        return result
    return _SOFT_LINE_BREAK.sub(" ", result)


def normalize_text(text: str, context: ConversionContext, collapse_soft_line_breaks: bool = True) -> str:
    """Text as it should be inserted in the current context.

    Quoted text keeps its line breaks so every quoted line stays a line, and
    code keeps everything but its final line break.
    """
    if context.in_blockquote:
        return text
    if context.in_code_block:
        return text.removesuffix("\n")
    return trim_text_to_markdown_spec(text, context.last_tag, collapse_soft_line_breaks)


def split_lines(text: str) -> list[str]:
    """Split on line terminators.

    A terminator at the very end yields a trailing empty line, so the break
    survives when inline content follows in a sibling node.
    """
    return text.split("\n")
