"""Markup tree to rich-text delta conversion."""

from md2delta.converter.context import ConversionContext
from md2delta.converter.mappings import (
    DEFAULT_BLOCK_ATTRIBUTES,
    DEFAULT_EMBEDS,
    DEFAULT_INLINE_ATTRIBUTES,
    AttributeConverter,
    EmbedConverter,
    MappingResolver,
)
from md2delta.converter.visitor import MarkdownToDelta, convert, markdown_to_delta

__all__ = [
    # Converter
    "MarkdownToDelta",
    "convert",
    "markdown_to_delta",
    "ConversionContext",
    # Mappings
    "MappingResolver",
    "AttributeConverter",
    "EmbedConverter",
    "DEFAULT_INLINE_ATTRIBUTES",
    "DEFAULT_BLOCK_ATTRIBUTES",
    "DEFAULT_EMBEDS",
]
