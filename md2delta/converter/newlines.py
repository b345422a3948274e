"""Line terminators emitted at block boundaries."""

from md2delta.converter.context import ConversionContext
from md2delta.markdown.models import Element

BLOCKQUOTE_TAG = "blockquote"
CODE_BLOCK_TAG = "pre"
LIST_ITEM_TAG = "li"
TABLE_ROW_TAG = "tr"
HORIZONTAL_RULE_TAG = "hr"
LIST_TAGS = frozenset({"ul", "ol"})
# Elements that always end a line of their own
LINE_TAGS = frozenset({LIST_ITEM_TAG, TABLE_ROW_TAG})


def insert_newline_before(context: ConversionContext, element: Element) -> None:
    """Separate the element from what precedes it, if needed.

    Two sibling blockquotes (or code blocks) would otherwise read as one, and
    a list nested in a list item starts on a fresh line.
    """
    tag = element.tag
    if not context.in_blockquote and context.last_tag == BLOCKQUOTE_TAG and tag == BLOCKQUOTE_TAG:
        context.insert_newline()
        return

    if not context.in_code_block and context.last_tag == CODE_BLOCK_TAG and tag == CODE_BLOCK_TAG:
        context.insert_newline()
        return

    if context.list_depth >= 0 and tag in LIST_TAGS:
        context.insert_newline()
        return


def insert_newline_after(
    context: ConversionContext,
    element: Element,
    *,
    top_level: bool,
    has_block_attribute: bool,
) -> None:
    """Close the line of a block element on exit.

    List items and table rows end their line even without a block attribute.
    Consecutive block exits without text in between share one terminator.
    """
    if element.tag == HORIZONTAL_RULE_TAG:
        # Always add new line after divider
        context.just_exited_block = True
        context.insert_newline()
        return

    if context.just_exited_block:
        return

    if top_level or has_block_attribute or element.tag in LINE_TAGS:
        context.just_exited_block = True
        context.insert_newline()
