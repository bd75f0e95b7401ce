"""
Base classes for Xpdf-backed extractors.
"""

import os
from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional

from ..models import DocumentInfo, PageImage, PageText
from ...xpdf.client import MissingArgumentError, XpdfClient, XpdfError


class ExtractResult(NamedTuple):
    """Unified result return format for Xpdf extraction."""
    info: DocumentInfo
    text: Optional[List[PageText]] = None
    images: Optional[List[PageImage]] = None


class BaseExtractor(ABC):
    """Abstract base class for Xpdf-backed extractors."""

    name = "base"

    def __init__(self, client: Optional[XpdfClient] = None):
        """Initialize the extractor.

        Args:
            client: Xpdf client holding the resolved executables
        """
        self.client = client or XpdfClient()

    @abstractmethod
    def extract(self, filepath: str = None, save_dir: str = None, **kwargs) -> ExtractResult:
        """Extract content from a PDF file.

        Args:
            filepath: Path to the PDF file
            save_dir: Optional directory to save extracted content
            **kwargs: Additional extraction parameters

        Returns:
            ExtractResult containing the extracted content
        """
        pass

    def _page_numbers(self, info: DocumentInfo) -> range:
        """Page numbers 1..N from the pdfinfo page count.

        Raises:
            XpdfError: If pdfinfo did not report a page count
        """
        if info.pages is None:
            raise XpdfError("pdfinfo did not report a page count")
        return range(1, info.pages + 1)

    def _check_file(self, filepath: Optional[str]) -> str:
        """Validate the input path before any tool is run.

        Raises:
            MissingArgumentError: If no path was given
            FileNotFoundError: If the file does not exist
        """
        if filepath is None or str(filepath) == "":
            raise MissingArgumentError(f"{type(self).__name__} requires an input file")
        filepath = os.fspath(filepath)
        if not os.path.isfile(filepath):
            raise FileNotFoundError(f"The file {filepath} was not found")
        return filepath
