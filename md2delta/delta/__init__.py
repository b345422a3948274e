"""Rich-text delta representation: attributes, embeds, insert operations."""

from md2delta.delta.builder import NEWLINE, Delta
from md2delta.delta.models import (
    BLOCKQUOTE,
    BOLD,
    BULLET_LIST,
    CODE_BLOCK,
    H1,
    H2,
    H3,
    HORIZONTAL_RULE,
    INLINE_CODE,
    ITALIC,
    LINE_FORMAT_GROUP,
    ORDERED_LIST,
    STRIKE,
    Attribute,
    Embed,
    InsertOperation,
    header,
    image,
    indent,
    link,
)

__all__ = [
    # Builder
    "Delta",
    "NEWLINE",
    # Models
    "Attribute",
    "Embed",
    "InsertOperation",
    "LINE_FORMAT_GROUP",
    # Attributes
    "BOLD",
    "ITALIC",
    "STRIKE",
    "INLINE_CODE",
    "BULLET_LIST",
    "ORDERED_LIST",
    "CODE_BLOCK",
    "BLOCKQUOTE",
    "H1",
    "H2",
    "H3",
    "header",
    "indent",
    "link",
    # Embeds
    "HORIZONTAL_RULE",
    "image",
]
