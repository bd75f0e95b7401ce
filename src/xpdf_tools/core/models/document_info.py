"""Document metadata model built from pdfinfo output."""

from datetime import datetime
from typing import Annotated, Optional
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field

from .geometry import Box, PageSize
from .validators import to_str, empty_to_none, normalize, yes_no

InfoText = Annotated[
    str,
    BeforeValidator(to_str),
    AfterValidator(empty_to_none),
]

# True/False for the literals yes/no, otherwise the raw literal.
YesNo = Annotated[bool | str, BeforeValidator(yes_no)]


class DocumentInfo(BaseModel):
    """Metadata describing one PDF document, as reported by ``pdfinfo -box``.

    Every field is optional: pdfinfo omits lines for missing entries and
    lines that cannot be parsed leave their field unset.
    """

    model_config = ConfigDict(frozen=True)

    title: Optional[InfoText] = Field(None, description="Document title.")
    subject: Optional[InfoText] = Field(None, description="Document subject.")
    keywords: Optional[InfoText] = Field(None, description="Document keywords.")
    author: Optional[InfoText] = Field(None, description="Document author.")
    creator: Optional[InfoText] = Field(None, description="Application that created the original document.")
    producer: Optional[InfoText] = Field(None, description="Application that produced the PDF.")
    creation_date: Optional[datetime] = Field(None, description="Creation date.")
    mod_date: Optional[datetime] = Field(None, description="Last modification date.")
    tagged: Optional[YesNo] = Field(None, description="Whether the PDF is tagged; raw literal if not yes/no.")
    form: Optional[Annotated[str, BeforeValidator(to_str), AfterValidator(normalize)]] = Field(
        None, description="Form type, e.g. 'none', 'AcroForm' or 'XFA'."
    )
    pages: Optional[int] = Field(None, ge=0, description="Number of pages.")
    encrypted: Optional[YesNo] = Field(
        None, description="Whether the PDF is encrypted; raw literal (e.g. with permissions) if not yes/no."
    )
    page_size: Optional[PageSize] = Field(None, description="Size of the first page.")
    media_box: Optional[Box] = None
    crop_box: Optional[Box] = None
    bleed_box: Optional[Box] = None
    trim_box: Optional[Box] = None
    art_box: Optional[Box] = None
    file_size: Optional[int] = Field(None, ge=0, description="File size in bytes.")
    optimized: Optional[YesNo] = Field(None, description="Whether the PDF is linearized; raw literal if not yes/no.")
    pdf_version: Optional[InfoText] = Field(None, description="PDF version string, e.g. '1.4'.")

    def boxes(self) -> dict:
        """Return the boxes that are present, keyed by field name."""
        names = ("media_box", "crop_box", "bleed_box", "trim_box", "art_box")
        return {name: getattr(self, name) for name in names if getattr(self, name) is not None}
