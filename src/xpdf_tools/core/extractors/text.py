"""
pdftotext-based per-page text extractor.
"""

import logging
import tempfile
import time
from pathlib import Path
from typing import List

from .base import BaseExtractor, ExtractResult
from .info import InfoExtractor
from ..models import PageText
from ...xpdf.client import TemporaryFileError

logger = logging.getLogger(__name__)


class TextExtractor(BaseExtractor):
    """Extracts text page by page with ``pdftotext -table``.

    One pdftotext process is run per page, in order. Any failure aborts the
    whole extraction.
    """

    name = "text"

    def __init__(self, client=None):
        super().__init__(client)
        self.info_extractor = InfoExtractor(self.client)

    def extract(self, filepath: str = None, save_dir: str = None, **kwargs) -> ExtractResult:
        """Extract the text lines of every page.

        Args:
            filepath: Path to the PDF file
            save_dir: Optional directory to save the extracted text

        Returns:
            ExtractResult with one PageText per page

        Raises:
            XpdfToolError: If pdfinfo or pdftotext fails for any page
            XpdfError: If pdfinfo did not report a page count
            TemporaryFileError: If a page output file cannot be read
        """
        filepath = self._check_file(filepath)
        logger.info(f"Extracting pdf text from {filepath}")
        start = time.perf_counter()

        info = self.info_extractor.document_info(filepath)
        page_numbers = self._page_numbers(info)
        pages: List[PageText] = []
        with tempfile.TemporaryDirectory(prefix="pdftotext-") as tmp_dir:
            for page_number in page_numbers:
                tmp_name = Path(tmp_dir) / f"page-{page_number:06d}.txt"
                self.client.run(
                    "pdftotext",
                    self._arguments(filepath, page_number, tmp_name),
                )
                pages.append(PageText(page_number=page_number, lines=self._read_lines(tmp_name)))

        if save_dir:
            self._save(filepath, save_dir, pages)

        logger.info(f"Text extraction completed successfully in {time.perf_counter() - start:0.3f} seconds")
        return ExtractResult(info=info, text=pages)

    def _arguments(self, filepath: str, page_number: int, output: Path) -> List[str]:
        return [
            "-table",
            "-f", str(page_number),
            "-l", str(page_number),
            "-enc", self.client.config.text_encoding,
            filepath,
            str(output),
        ]

    def _read_lines(self, path: Path) -> List[str]:
        try:
            # pdftotext ends lines with \n only; a lone \r is line content
            with open(path, "r", encoding=self.client.config.codec, errors="replace", newline="\n") as f:
                return [line.rstrip("\n") for line in f]
        except OSError as e:
            logger.error(f"A file handle could not be opened to {path}")
            raise TemporaryFileError(f"A file handle could not be opened to {path}") from e

    def _save(self, filepath: str, save_dir: str, pages: List[PageText]) -> None:
        save_dir = Path(save_dir)
        save_dir.mkdir(parents=True, exist_ok=True)
        txt_file = save_dir / f"{Path(filepath).stem}_xpdf.txt"
        with open(txt_file, "w", encoding="utf-8") as f:
            f.write("\f".join(page.text for page in pages))
        logger.info(f"Saved extracted text to: {txt_file}")
