"""Data models for Xpdf output."""

from .geometry import Box, PageSize
from .document_info import DocumentInfo
from .page import PageText, PageImage
from .validators import (
    to_str,
    empty_to_none,
    normalize,
    yes_no,
)

__all__ = [
    "Box",
    "PageSize",
    "DocumentInfo",
    "PageText",
    "PageImage",
    "to_str",
    "empty_to_none",
    "normalize",
    "yes_no",
]
