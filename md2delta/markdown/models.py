"""Markup tree consumed by the delta converter.

Mirrors the shape of an HTML-ish element tree: every node is either a text
leaf or an element with a tag name, a string attribute bag and ordered
children. The converter never mutates a tree.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class Text(BaseModel):
    type: Literal["text"] = "text"
    content: str

    @property
    def text_content(self) -> str:
        return self.content

    def count_nodes(self) -> int:
        return 1


class Element(BaseModel):
    type: Literal["element"] = "element"
    tag: str
    attributes: dict[str, str] = Field(default_factory=dict)
    children: list["Node"] = Field(default_factory=list)

    @classmethod
    def empty(cls, tag: str, **attributes: str) -> "Element":
        """Element without children, e.g. <hr> or <img>."""
        return cls(tag=tag, attributes=attributes)

    @classmethod
    def text(cls, tag: str, content: str) -> "Element":
        """Element wrapping a single text leaf, e.g. inline <code>."""
        return cls(tag=tag, children=[Text(content=content)])

    @property
    def text_content(self) -> str:
        """Concatenated text of all descendant leaves."""
        return "".join(child.text_content for child in self.children)

    def __str__(self) -> str:
        return f"<{self.tag}>"

    def count_nodes(self) -> int:
        """Number of nodes in this subtree, the element included."""
        return 1 + count_nodes(self.children)


Node = Annotated[Text | Element, Field(discriminator="type")]

# Update forward references
Element.model_rebuild()


def count_nodes(nodes: list[Node]) -> int:
    """Total number of nodes in a forest of markup trees."""
    return sum(node.count_nodes() for node in nodes)
