"""Mutable per-conversion state threaded through the traversal."""

from typing import Any

from md2delta.delta.builder import Delta
from md2delta.delta.models import Attribute, indent


class ConversionContext:
    """State of a single conversion run. Created fresh for every call."""

    def __init__(self) -> None:
        self.delta = Delta()
        # Outermost first
        self.block_attributes: list[Attribute] = []
        self.inline_attributes: list[Attribute] = []
        # -1 means "not inside a list item"
        self.list_depth = -1
        self.in_blockquote = False
        self.in_code_block = False
        self.last_tag: str | None = None
        self.current_block_tag: str | None = None
        self.just_exited_block = False

    def effective_inline_attributes(self) -> dict[str, Any] | None:
        """Merge of all active inline attributes; inner ones win on the same key."""
        if not self.inline_attributes:
            return None
        merged: dict[str, Any] = {}
        for attr in self.inline_attributes:
            merged.update(attr.to_json())
        return merged

    def effective_block_attributes(self) -> dict[str, Any] | None:
        """Line attributes for the next line terminator.

        Nested list items get an indent of their depth. Of several active
        attributes from the same exclusivity group only the outermost one
        applies to the line.
        """
        if not self.block_attributes:
            return None
        line_attributes: list[Attribute] = []
        if self.list_depth > 0:
            line_attributes.append(indent(self.list_depth))

        seen_groups: set[str] = set()
        for attr in self.block_attributes:
            if attr.group is not None:
                if attr.group in seen_groups:
                    continue
                seen_groups.add(attr.group)
            line_attributes.append(attr)

        merged: dict[str, Any] = {}
        for attr in line_attributes:
            merged.update(attr.to_json())
        return merged

    def insert_text(self, text: str) -> None:
        self.delta.insert(text, self.effective_inline_attributes())

    def insert_newline(self) -> None:
        """Terminate the current line with the effective block attributes."""
        self.delta.insert("\n", self.effective_block_attributes())
