"""Append-only delta builder.

Follows the editor's own delta semantics for inserts: empty text is dropped,
and a text insert carrying the same attributes as the previous text insert is
merged into it. Embeds are never merged.
"""

from collections.abc import Iterator
from typing import Any

from md2delta.delta.models import Embed, InsertOperation

NEWLINE = "\n"
# Stands in for one embed in plain_text()
EMBED_PLACEHOLDER = "￼"


class Delta:
    def __init__(self) -> None:
        self.ops: list[InsertOperation] = []

    def insert(self, value: str | Embed | dict[str, Any], attributes: dict[str, Any] | None = None) -> "Delta":
        if isinstance(value, str) and not value:
            return self
        if isinstance(value, Embed):
            value = value.to_json()
        attributes = dict(attributes) if attributes else None

        last = self.ops[-1] if self.ops else None
        if isinstance(value, str) and last is not None and last.is_text and last.attributes == attributes:
            self.ops[-1] = InsertOperation(insert=last.insert + value, attributes=attributes)  # type: ignore[operator]
            return self

        self.ops.append(InsertOperation(insert=value, attributes=attributes))
        return self

    def ensure_trailing_newline(self, attributes: dict[str, Any] | None = None) -> "Delta":
        """Terminate the last line unless the delta is empty or already terminated."""
        if self.is_empty:
            return self
        last = self.ops[-1].insert
        if not (isinstance(last, str) and last.endswith(NEWLINE)):
            self.insert(NEWLINE, attributes)
        return self

    @property
    def is_empty(self) -> bool:
        return not self.ops

    @property
    def last(self) -> InsertOperation | None:
        return self.ops[-1] if self.ops else None

    def plain_text(self) -> str:
        return "".join(op.insert if isinstance(op.insert, str) else EMBED_PLACEHOLDER for op in self.ops)

    def to_json(self) -> list[dict[str, Any]]:
        return [op.to_json() for op in self.ops]

    def __len__(self) -> int:
        return len(self.ops)

    def __iter__(self) -> Iterator[InsertOperation]:
        return iter(self.ops)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Delta):
            return self.ops == other.ops
        return NotImplemented

    def __repr__(self) -> str:
        return f"Delta({self.to_json()!r})"
