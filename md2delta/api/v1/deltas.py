from typing import Any

from fastapi import APIRouter
from loguru import logger
from pydantic import BaseModel

from md2delta.converter import MarkdownToDelta
from md2delta.delta import Delta
from md2delta.deps import ConverterDep, SettingsDep
from md2delta.exceptions import MarkdownTooLargeError, TreeTooLargeError
from md2delta.markdown import Node, count_nodes, parse_markdown

router = APIRouter(prefix="/v1/deltas", tags=["Deltas"])


class MarkdownDeltaRequest(BaseModel):
    """Request to convert markdown text.

    Args:
        markdown (str): Markdown source.
        collapse_soft_line_breaks (bool | None): Overrides the server default when set.
    """

    markdown: str
    collapse_soft_line_breaks: bool | None = None


class TreeDeltaRequest(BaseModel):
    """Request to convert an already parsed markup tree."""

    nodes: list[Node]
    collapse_soft_line_breaks: bool | None = None


class DeltaResponse(BaseModel):
    ops: list[dict[str, Any]]
    length: int  # number of ops

    @classmethod
    def from_delta(cls, delta: Delta) -> "DeltaResponse":
        return cls(ops=delta.to_json(), length=len(delta))


def _with_line_breaks(converter: MarkdownToDelta, collapse_soft_line_breaks: bool | None) -> MarkdownToDelta:
    if collapse_soft_line_breaks is None or collapse_soft_line_breaks == converter.collapse_soft_line_breaks:
        return converter
    return MarkdownToDelta(collapse_soft_line_breaks=collapse_soft_line_breaks)


@router.post("", response_model=DeltaResponse)
def create_delta(
    req: MarkdownDeltaRequest,
    converter: ConverterDep,
    settings: SettingsDep,
) -> DeltaResponse:
    """Convert markdown text into a delta."""
    if len(req.markdown) > settings.max_markdown_chars:
        raise MarkdownTooLargeError(len(req.markdown), settings.max_markdown_chars)

    nodes = parse_markdown(req.markdown)
    delta = _with_line_breaks(converter, req.collapse_soft_line_breaks).convert(nodes)
    logger.info(f"Converted {len(req.markdown)} chars of markdown into {len(delta)} ops")
    return DeltaResponse.from_delta(delta)


@router.post("/tree", response_model=DeltaResponse)
def create_delta_from_tree(
    req: TreeDeltaRequest,
    converter: ConverterDep,
    settings: SettingsDep,
) -> DeltaResponse:
    """Convert a caller-supplied markup tree into a delta.

    Trees with more than `max_tree_nodes` nodes (elements and text leaves) are rejected.
    """
    size = count_nodes(req.nodes)
    if size > settings.max_tree_nodes:
        raise TreeTooLargeError(size, settings.max_tree_nodes)

    delta = _with_line_breaks(converter, req.collapse_soft_line_breaks).convert(req.nodes)
    logger.info(f"Converted markup tree of {len(req.nodes)} top-level nodes into {len(delta)} ops")
    return DeltaResponse.from_delta(delta)
