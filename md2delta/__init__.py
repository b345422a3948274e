"""Convert markdown into rich-text editor deltas."""

from md2delta.converter import MarkdownToDelta, convert, markdown_to_delta
from md2delta.delta import Attribute, Delta, Embed, InsertOperation
from md2delta.exceptions import ConversionError, UnmappedConversionError
from md2delta.markdown import Element, Node, Text, parse_markdown

__all__ = [
    "MarkdownToDelta",
    "convert",
    "markdown_to_delta",
    "parse_markdown",
    "Delta",
    "InsertOperation",
    "Attribute",
    "Embed",
    "Node",
    "Element",
    "Text",
    "ConversionError",
    "UnmappedConversionError",
]
