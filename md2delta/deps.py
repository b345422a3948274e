from typing import Annotated

from fastapi import Depends

from md2delta.config import Settings, get_settings
from md2delta.converter import MarkdownToDelta

SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_converter(settings: SettingsDep) -> MarkdownToDelta:
    return MarkdownToDelta(collapse_soft_line_breaks=settings.collapse_soft_line_breaks)


ConverterDep = Annotated[MarkdownToDelta, Depends(get_converter)]
