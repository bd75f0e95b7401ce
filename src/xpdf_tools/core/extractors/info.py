"""
pdfinfo-based document metadata extractor.
"""

import logging
from pathlib import Path

from .base import BaseExtractor, ExtractResult
from ..models import DocumentInfo
from ..parsers.pdfinfo_parser import PdfInfoParser

logger = logging.getLogger(__name__)


class InfoExtractor(BaseExtractor):
    """Reads document metadata and page boxes with ``pdfinfo -box``."""

    name = "info"

    def __init__(self, client=None):
        super().__init__(client)
        self.parser = PdfInfoParser()

    def document_info(self, filepath: str = None) -> DocumentInfo:
        """Run pdfinfo on a file and parse its output.

        Raises:
            MissingArgumentError: If no path was given
            FileNotFoundError: If the file does not exist
            XpdfToolError: If pdfinfo exits with a non-zero status
        """
        filepath = self._check_file(filepath)
        output = self.client.run("pdfinfo", ["-box", "-enc", self.client.config.text_encoding, filepath])
        return self.parser.parse(output)

    def extract(self, filepath: str = None, save_dir: str = None, **kwargs) -> ExtractResult:
        info = self.document_info(filepath)
        if save_dir:
            save_dir = Path(save_dir)
            save_dir.mkdir(parents=True, exist_ok=True)
            json_file = save_dir / f"{Path(filepath).stem}_pdfinfo.json"
            json_file.write_text(info.model_dump_json(indent=2), encoding="utf-8")
            logger.info(f"Saved document info to: {json_file}")
        return ExtractResult(info=info)
