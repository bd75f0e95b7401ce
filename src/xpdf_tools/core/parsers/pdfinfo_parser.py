"""Parser for the output of ``pdfinfo -box``."""

import logging
import re
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Tuple

from ..models import Box, DocumentInfo, PageSize

_LOGGER = logging.getLogger(__name__)

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)"

# POSIX-locale long form, e.g. "Tue Mar  3 10:22:11 2015"
_LONG_DATE_RE = re.compile(r"[a-z]+\s+[a-z]+\s+\d+\s+\d+:\d+:\d+\s+\d+", re.IGNORECASE)
# Slash-separated short form, e.g. "03/03/15 10:22:11"
_SHORT_DATE_RE = re.compile(r"\d+/\d+/\d+\s+\d+:\d+:\d+")
_DATE_FORMATS = (
    (_LONG_DATE_RE, "%a %b %d %H:%M:%S %Y"),
    (_SHORT_DATE_RE, "%m/%d/%y %H:%M:%S"),
)

_PAGE_SIZE_RE = re.compile(rf"^({_NUMBER})\s*x\s*({_NUMBER})(?:\s*pts)?(?:\s*\(([^)]*)\))?")
_BOX_RE = re.compile(rf"^({_NUMBER})\s+({_NUMBER})\s+({_NUMBER})\s+({_NUMBER})")
_INT_RE = re.compile(r"^(\d+)")


def parse_date(value: str) -> Optional[datetime]:
    """Parse a pdfinfo date in either of the two recognized formats.

    Returns None when neither format matches.
    """
    for pattern, fmt in _DATE_FORMATS:
        match = pattern.search(value)
        if not match:
            continue
        try:
            return datetime.strptime(" ".join(match.group(0).split()), fmt)
        except ValueError:
            _LOGGER.debug(f"Date {value!r} matched {fmt!r} but could not be parsed")
    return None


def parse_int(value: str) -> Optional[int]:
    match = _INT_RE.match(value)
    return int(match.group(1)) if match else None


def parse_page_size(value: str) -> Optional[PageSize]:
    """Parse ``612 x 792 pts (letter)`` into a PageSize."""
    match = _PAGE_SIZE_RE.match(value)
    if not match:
        return None
    name = match.group(3).strip() if match.group(3) else None
    return PageSize(width=float(match.group(1)), height=float(match.group(2)), name=name or None)


def parse_box(value: str) -> Optional[Box]:
    """Parse four whitespace-separated coordinates into a Box."""
    match = _BOX_RE.match(value)
    if not match:
        return None
    x1, y1, x2, y2 = (float(token) for token in match.groups())
    return Box(x1=x1, y1=y1, x2=x2, y2=y2)


def _text(value: str) -> str:
    return value


# Label as printed by pdfinfo -> (DocumentInfo field, converter).
# Tagged/Encrypted/Optimized stay raw here; DocumentInfo maps yes/no to bool.
FIELDS: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    "Title": ("title", _text),
    "Subject": ("subject", _text),
    "Keywords": ("keywords", _text),
    "Author": ("author", _text),
    "Creator": ("creator", _text),
    "Producer": ("producer", _text),
    "CreationDate": ("creation_date", parse_date),
    "ModDate": ("mod_date", parse_date),
    "Tagged": ("tagged", _text),
    "Form": ("form", _text),
    "Pages": ("pages", parse_int),
    "Encrypted": ("encrypted", _text),
    "Page size": ("page_size", parse_page_size),
    "MediaBox": ("media_box", parse_box),
    "CropBox": ("crop_box", parse_box),
    "BleedBox": ("bleed_box", parse_box),
    "TrimBox": ("trim_box", parse_box),
    "ArtBox": ("art_box", parse_box),
    "File size": ("file_size", parse_int),
    "Optimized": ("optimized", _text),
    "PDF version": ("pdf_version", _text),
}


class PdfInfoParser:
    """Turn ``pdfinfo -box`` output into a `DocumentInfo`.

    Each line is split on its first colon into a label and a value. Lines
    with unknown labels are ignored, and values that cannot be converted
    leave their field unset.
    """

    def __init__(self, fields: Optional[Dict[str, Tuple[str, Callable[[str], Any]]]] = None):
        self._fields = fields or FIELDS

    @staticmethod
    def split_line(line: str) -> Optional[Tuple[str, str]]:
        """Split a ``Label: value`` line into its trimmed label and value."""
        label, sep, value = line.partition(":")
        if not sep:
            return None
        return label.strip(), value.strip()

    def parse_fields(self, output: str) -> Dict[str, Any]:
        """Parse pdfinfo output into a dict of DocumentInfo field values."""
        values: Dict[str, Any] = {}
        for line in output.splitlines():
            parts = self.split_line(line)
            if parts is None:
                continue
            label, raw = parts
            if label not in self._fields:
                continue
            field, convert = self._fields[label]
            value = convert(raw)
            if value is None:
                _LOGGER.debug(f"Could not parse {label!r} value {raw!r}")
                continue
            values[field] = value
        return values

    def parse(self, output: str) -> DocumentInfo:
        """Parse pdfinfo output.

        Args:
            output: Text printed by ``pdfinfo -box``.

        Returns:
            A `DocumentInfo` instance.
        """
        return DocumentInfo(**self.parse_fields(output))
