"""
Data Transfer Objects for the Printing Framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .constants import PDF_HEADER


class PageNumbers(Enum):
    NONE = 'none'
    NUMERIC = 'numeric'


class HeaderRepeat(Enum):
    FIRST_PAGE_ONLY = 'first_page_only'
    ALL_PAGES = 'all_pages'


class GenerationFailure(Enum):
    """Reasons a document could not be produced"""

    NOT_FOUND = 'NotFound'
    UNSUPPORTED_STATE = 'UnsupportedState'
    EMPTY_RENDER = 'EmptyRender'


@dataclass(frozen=True)
class HeaderOptions:
    header_repeat: HeaderRepeat = HeaderRepeat.FIRST_PAGE_ONLY
    header_html: str = ''


@dataclass(frozen=True)
class PdfOptions:
    """
    Pagination and header policy handed to the PDF generator.
    """

    page_numbers: PageNumbers = PageNumbers.NONE
    header_options: HeaderOptions = field(default_factory=HeaderOptions)


def default_pdf_options() -> PdfOptions:
    """Numeric page numbers, fixed header on the first page only."""
    return PdfOptions(
        page_numbers=PageNumbers.NUMERIC,
        header_options=HeaderOptions(
            header_repeat=HeaderRepeat.FIRST_PAGE_ONLY,
            header_html=PDF_HEADER,
        ),
    )


@dataclass
class DocumentResult:
    """
    Result of a document generation request.

    Either carries the complete PDF bytes, or no bytes and the reason
    generation stopped. There is no partial result.
    """

    pdf_bytes: Optional[bytes] = None
    filename: Optional[str] = None
    failure: Optional[GenerationFailure] = None
    content_type: str = "application/pdf"

    @classmethod
    def failed(cls, failure: GenerationFailure) -> 'DocumentResult':
        return cls(failure=failure)

    @property
    def succeeded(self) -> bool:
        return self.failure is None and self.pdf_bytes is not None

    def __len__(self) -> int:
        """Return the size of PDF in bytes"""
        return len(self.pdf_bytes) if self.pdf_bytes else 0
