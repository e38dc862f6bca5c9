"""
WeasyPrint Renderer Implementation

Adapter for rendering HTML to PDF using WeasyPrint engine.
"""

import logging
import re
from typing import Optional

try:
    from weasyprint import CSS, HTML
    WEASYPRINT_AVAILABLE = True
except (ImportError, OSError):
    # OSError: WeasyPrint is installed but Pango/Cairo system libraries are missing
    WEASYPRINT_AVAILABLE = False

from .constants import HEADER_ELEMENT_CLASS
from .dto import HeaderRepeat, PageNumbers, PdfOptions
from .interfaces import IPdfDocument, IPdfGenerator


logger = logging.getLogger(__name__)

BODY_OPEN_TAG = re.compile(r'<body\b[^>]*>', re.IGNORECASE)


class PdfDocument(IPdfDocument):
    """
    A laid-out WeasyPrint document.

    Layout happens when the document is created; PDF bytes are written on
    demand by to_bytes().
    """

    def __init__(self, document):
        self.document = document

    @property
    def page_count(self) -> int:
        return len(self.document.pages)

    def to_bytes(self) -> bytes:
        return self.document.write_pdf()


class WeasyPrintRenderer(IPdfGenerator):
    """
    PDF renderer using WeasyPrint engine.

    Supports:
    - Page numbers in the bottom margin
    - A running header on the first page or on every page
    - Static assets via base_url
    - Additional print stylesheets
    """

    def __init__(self, stylesheets: Optional[list] = None, base_url: Optional[str] = None):
        """
        Initialize the renderer.

        Args:
            stylesheets: Optional list of CSS file paths to include
            base_url: Base URL for resolving relative URLs (images, CSS)
        """
        if not WEASYPRINT_AVAILABLE:
            raise ImportError(
                "WeasyPrint is not installed. "
                "Install it with: pip install weasyprint"
            )

        self.stylesheets = stylesheets or []
        self.base_url = base_url

    def generate_from_html(self, html: str, options: PdfOptions) -> PdfDocument:
        """
        Lay out HTML as a paged document using WeasyPrint.

        Args:
            html: HTML string to render
            options: Page number and header policy

        Returns:
            PdfDocument wrapping the rendered pages

        Raises:
            Exception: If rendering fails
        """
        try:
            html = inject_header(html, options.header_options.header_html)

            css_list = [CSS(string=build_page_css(options))]
            css_list.extend(CSS(filename=css) for css in self.stylesheets)

            document = HTML(string=html, base_url=self.base_url).render(stylesheets=css_list)

            logger.info(f"Successfully rendered PDF: {len(document.pages)} page(s)")
            return PdfDocument(document)

        except Exception as e:
            logger.error(f"Failed to render PDF: {e}", exc_info=True)
            raise


def inject_header(html: str, header_html: str) -> str:
    """
    Place the header markup at the start of the body as a running element.

    HTML without a body tag gets the header prepended.
    """
    if not header_html:
        return html

    header = f'<div class="{HEADER_ELEMENT_CLASS}">{header_html}</div>'
    match = BODY_OPEN_TAG.search(html)
    if match is None:
        return header + html
    return html[:match.end()] + header + html[match.end():]


def build_page_css(options: PdfOptions) -> str:
    """Build the @page rules for the given options."""
    rules = []

    if options.page_numbers == PageNumbers.NUMERIC:
        rules.append('@page { @bottom-right { content: counter(page); } }')

    if options.header_options.header_html:
        rules.append(f'.{HEADER_ELEMENT_CLASS} {{ position: running(pdf-header); }}')
        if options.header_options.header_repeat == HeaderRepeat.FIRST_PAGE_ONLY:
            selector = '@page :first'
        else:
            selector = '@page'
        rules.append(f'{selector} {{ @top-center {{ content: element(pdf-header); }} }}')

    return '\n'.join(rules)
