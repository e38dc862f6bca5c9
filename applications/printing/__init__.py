"""
Printing Framework for application documents

Renders state-specific HTML templates and converts the markup into paged
PDF documents using WeasyPrint. Supports numeric page numbers and a header
shown on the first page only.
"""

from .dto import (
    DocumentResult,
    GenerationFailure,
    HeaderOptions,
    HeaderRepeat,
    PageNumbers,
    PdfOptions,
    default_pdf_options,
)
from .interfaces import IApplicationSource, IPathProvider, IPdfDocument, IPdfGenerator, IViewGenerator

__all__ = [
    'DocumentResult',
    'GenerationFailure',
    'HeaderOptions',
    'HeaderRepeat',
    'PageNumbers',
    'PdfOptions',
    'default_pdf_options',
    'IApplicationSource',
    'IPathProvider',
    'IPdfDocument',
    'IPdfGenerator',
    'IViewGenerator',
]
