"""Formatting attributes, embeds and insert operations of a rich-text delta."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

# Block attributes sharing this group are mutually exclusive on one line
LINE_FORMAT_GROUP = "line-format"


class Attribute(BaseModel):
    """A single formatting attribute, serialized as {key: value}."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: Any = True
    scope: Literal["inline", "block"] = "inline"
    group: str | None = None  # exclusivity group, block attributes only

    def to_json(self) -> dict[str, Any]:
        return {self.key: self.value}


class Embed(BaseModel):
    """A non-text unit of the document, serialized as {type: data}."""

    model_config = ConfigDict(frozen=True)

    type: str
    data: Any = True

    def to_json(self) -> dict[str, Any]:
        return {self.type: self.data}


class InsertOperation(BaseModel):
    insert: str | dict[str, Any]
    attributes: dict[str, Any] | None = None

    @property
    def is_text(self) -> bool:
        return isinstance(self.insert, str)

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"insert": self.insert}
        if self.attributes:
            data["attributes"] = dict(self.attributes)
        return data


# === INLINE ATTRIBUTES ===

BOLD = Attribute(key="bold")
ITALIC = Attribute(key="italic")
STRIKE = Attribute(key="strike")
INLINE_CODE = Attribute(key="code")


def link(href: str | None) -> Attribute:
    return Attribute(key="link", value=href)


# === BLOCK ATTRIBUTES ===

BULLET_LIST = Attribute(key="list", value="bullet", scope="block", group=LINE_FORMAT_GROUP)
ORDERED_LIST = Attribute(key="list", value="ordered", scope="block", group=LINE_FORMAT_GROUP)
CODE_BLOCK = Attribute(key="code-block", scope="block", group=LINE_FORMAT_GROUP)
BLOCKQUOTE = Attribute(key="blockquote", scope="block", group=LINE_FORMAT_GROUP)


def header(level: int) -> Attribute:
    return Attribute(key="header", value=level, scope="block", group=LINE_FORMAT_GROUP)


def indent(level: int) -> Attribute:
    return Attribute(key="indent", value=level, scope="block")


H1 = header(1)
H2 = header(2)
H3 = header(3)


# === EMBEDS ===

HORIZONTAL_RULE = Embed(type="hr")


def image(src: str) -> Embed:
    return Embed(type="image", data=src)
