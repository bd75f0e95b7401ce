"""
Xpdf Extractors Module

Contains the pdfinfo, pdftotext and pdftopng extractors and their factory.
"""

from .base import BaseExtractor, ExtractResult
from .info import InfoExtractor
from .text import TextExtractor
from .png import PngExtractor
from .factory import ExtractorFactory

__all__ = [
    "BaseExtractor",
    "ExtractResult",
    "InfoExtractor",
    "TextExtractor",
    "PngExtractor",
    "ExtractorFactory"
]
