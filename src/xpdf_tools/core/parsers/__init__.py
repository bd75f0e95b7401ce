"""Parsers for Xpdf tool output."""

from .pdfinfo_parser import PdfInfoParser, parse_box, parse_date, parse_page_size

__all__ = ["PdfInfoParser", "parse_box", "parse_date", "parse_page_size"]
