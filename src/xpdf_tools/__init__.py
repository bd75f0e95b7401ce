"""Xpdf Tools - structured access to the Xpdf pdfinfo, pdftotext and pdftopng utilities."""

from .config import XpdfConfig
from .core.models import Box, PageSize, DocumentInfo, PageText, PageImage
from .core.extractors import (
    ExtractorFactory, BaseExtractor, ExtractResult, InfoExtractor, TextExtractor, PngExtractor
)
from .core.parsers import PdfInfoParser
from .xpdf import (
    XpdfClient,
    XpdfError,
    MissingArgumentError,
    ExecutableNotFoundError,
    XpdfToolError,
    TemporaryFileError,
    ImageDecodeError,
    find_executable,
)
from .pipelines.extraction import xpdf_info, xpdf_text, xpdf_png

__version__ = "0.1.0"

__all__ = [
    "XpdfConfig",
    "Box",
    "PageSize",
    "DocumentInfo",
    "PageText",
    "PageImage",
    "ExtractorFactory",
    "BaseExtractor",
    "ExtractResult",
    "InfoExtractor",
    "TextExtractor",
    "PngExtractor",
    "PdfInfoParser",
    "XpdfClient",
    "XpdfError",
    "MissingArgumentError",
    "ExecutableNotFoundError",
    "XpdfToolError",
    "TemporaryFileError",
    "ImageDecodeError",
    "find_executable",
    "xpdf_info",
    "xpdf_text",
    "xpdf_png",
]
