"""Tag-keyed tables mapping markup elements to delta attributes and embeds.

Custom tables shadow the defaults per tag. The merge happens on every lookup,
so a resolver always reflects the tables it was given and the defaults stay
untouched.
"""

from collections.abc import Callable, Mapping

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
    ORDERED_LIST,
    STRIKE,
    Attribute,
    Embed,
    image,
    link,
)
from md2delta.exceptions import UnmappedConversionError
from md2delta.markdown.models import Element

AttributeConverter = Callable[[Mapping[str, str]], Attribute]
EmbedConverter = Callable[[Mapping[str, str]], Embed]

DEFAULT_INLINE_ATTRIBUTES: Mapping[str, AttributeConverter] = {
    "em": lambda _: ITALIC,
    "strong": lambda _: BOLD,
    "del": lambda _: STRIKE,
    "a": lambda attrs: link(attrs.get("href")),
    "code": lambda _: INLINE_CODE,
}

DEFAULT_BLOCK_ATTRIBUTES: Mapping[str, AttributeConverter] = {
    "ul": lambda _: BULLET_LIST,
    "ol": lambda _: ORDERED_LIST,
    "pre": lambda _: CODE_BLOCK,
    "blockquote": lambda _: BLOCKQUOTE,
    "h1": lambda _: H1,
    "h2": lambda _: H2,
    "h3": lambda _: H3,
}

DEFAULT_EMBEDS: Mapping[str, EmbedConverter] = {
    "hr": lambda _: HORIZONTAL_RULE,
    "img": lambda attrs: image(attrs.get("src", "")),
}

INLINE_CODE_TAG = "code"


class MappingResolver:
    """Resolves elements to inline attributes, block attributes and embeds."""

    def __init__(
        self,
        custom_inline_attributes: Mapping[str, AttributeConverter] | None = None,
        custom_block_attributes: Mapping[str, AttributeConverter] | None = None,
        custom_embeds: Mapping[str, EmbedConverter] | None = None,
    ):
        self.custom_inline_attributes = dict(custom_inline_attributes or {})
        self.custom_block_attributes = dict(custom_block_attributes or {})
        self.custom_embeds = dict(custom_embeds or {})

    def inline_attributes(self) -> dict[str, AttributeConverter]:
        return {**DEFAULT_INLINE_ATTRIBUTES, **self.custom_inline_attributes}

    def block_attributes(self) -> dict[str, AttributeConverter]:
        return {**DEFAULT_BLOCK_ATTRIBUTES, **self.custom_block_attributes}

    def embeds(self) -> dict[str, EmbedConverter]:
        return {**DEFAULT_EMBEDS, **self.custom_embeds}

    # === LOOKUPS (existence checks) ===

    def lookup_inline_attribute(self, element: Element, in_code_block: bool = False) -> AttributeConverter | None:
        """Converter for the element's inline attribute, or None.

        Inline code inside a code block has no inline attribute; the block
        already styles it.
        """
        if in_code_block and element.tag == INLINE_CODE_TAG:
            return None
        return self.inline_attributes().get(element.tag)

    def lookup_block_attribute(self, element: Element) -> AttributeConverter | None:
        return self.block_attributes().get(element.tag)

    def lookup_embed(self, element: Element) -> EmbedConverter | None:
        return self.embeds().get(element.tag)

    def has_inline_attribute(self, element: Element, in_code_block: bool = False) -> bool:
        return self.lookup_inline_attribute(element, in_code_block) is not None

    def has_block_attribute(self, element: Element) -> bool:
        return self.lookup_block_attribute(element) is not None

    def is_embed(self, element: Element) -> bool:
        return self.lookup_embed(element) is not None

    # === CONVERSIONS ===

    def to_inline_attribute(self, element: Element, in_code_block: bool = False) -> Attribute:
        converter = self.lookup_inline_attribute(element, in_code_block)
        if converter is None:
            raise UnmappedConversionError(element.tag, "inline", element)
        return converter(element.attributes)

    def to_block_attribute(self, element: Element) -> Attribute:
        converter = self.lookup_block_attribute(element)
        if converter is None:
            raise UnmappedConversionError(element.tag, "block", element)
        return converter(element.attributes)

    def to_embed(self, element: Element) -> Embed:
        converter = self.lookup_embed(element)
        if converter is None:
            raise UnmappedConversionError(element.tag, "embed", element)
        return converter(element.attributes)
