"""
Tests for the Printing Framework

Tests the printing framework components:
- Result and options DTOs
- Page CSS and header injection
- Template loading and rendering
- WeasyPrint renderer
"""

from pathlib import Path
from types import SimpleNamespace

import httpx
import respx
from django.conf import settings
from django.core.cache import cache
from django.test import SimpleTestCase, TestCase

from applications.models import ApplicationState, DocumentConfiguration
from applications.printing import (
    DocumentResult,
    GenerationFailure,
    HeaderOptions,
    HeaderRepeat,
    PageNumbers,
    PdfOptions,
    default_pdf_options,
)
from applications.printing.constants import HEADER_ELEMENT_CLASS, PDF_HEADER
from applications.printing.interfaces import IPdfGenerator
from applications.printing.view_generator import TemplateViewGenerator
from applications.printing.weasyprint_renderer import (
    WEASYPRINT_AVAILABLE,
    WeasyPrintRenderer,
    build_page_css,
    inject_header,
)
from applications.services.documents.generator import build_default_generator
from applications.services.documents.test_documents import create_application


class DocumentResultTestCase(SimpleTestCase):
    """Test cases for DocumentResult DTO"""

    def test_successful_result(self):
        pdf_bytes = b'%PDF-1.4...'
        result = DocumentResult(pdf_bytes=pdf_bytes, filename='application_A1.pdf')

        self.assertTrue(result.succeeded)
        self.assertEqual(result.content_type, 'application/pdf')
        self.assertEqual(len(result), len(pdf_bytes))

    def test_failed_result(self):
        result = DocumentResult.failed(GenerationFailure.NOT_FOUND)

        self.assertFalse(result.succeeded)
        self.assertIsNone(result.pdf_bytes)
        self.assertEqual(result.failure, GenerationFailure.NOT_FOUND)
        self.assertEqual(len(result), 0)

    def test_failure_kinds_are_distinct(self):
        self.assertEqual(
            {failure.value for failure in GenerationFailure},
            {'NotFound', 'UnsupportedState', 'EmptyRender'},
        )


class PdfOptionsTestCase(SimpleTestCase):
    """Test cases for rendering options"""

    def test_default_pdf_options(self):
        options = default_pdf_options()

        self.assertEqual(options.page_numbers, PageNumbers.NUMERIC)
        self.assertEqual(options.header_options.header_repeat, HeaderRepeat.FIRST_PAGE_ONLY)
        self.assertEqual(options.header_options.header_html, PDF_HEADER)

    def test_default_pdf_options_are_fresh_per_call(self):
        self.assertIsNot(default_pdf_options(), default_pdf_options())
        self.assertEqual(default_pdf_options(), default_pdf_options())

    def test_page_css_numeric_first_page_header(self):
        css = build_page_css(default_pdf_options())

        self.assertIn('counter(page)', css)
        self.assertIn('@page :first', css)
        self.assertIn('element(pdf-header)', css)

    def test_page_css_header_on_all_pages(self):
        options = PdfOptions(
            page_numbers=PageNumbers.NONE,
            header_options=HeaderOptions(header_repeat=HeaderRepeat.ALL_PAGES, header_html='<b>H</b>'),
        )
        css = build_page_css(options)

        self.assertNotIn('counter(page)', css)
        self.assertNotIn(':first', css)
        self.assertIn('@page { @top-center', css)

    def test_page_css_without_header(self):
        self.assertEqual(build_page_css(PdfOptions()), '')


class InjectHeaderTestCase(SimpleTestCase):
    """Test cases for header injection"""

    def test_header_follows_body_tag(self):
        html = '<html><body class="doc"><p>Content</p></body></html>'
        result = inject_header(html, '<b>Header</b>')

        self.assertEqual(
            result,
            f'<html><body class="doc"><div class="{HEADER_ELEMENT_CLASS}"><b>Header</b></div>'
            '<p>Content</p></body></html>',
        )

    def test_header_prepended_without_body(self):
        result = inject_header('<p>Content</p>', '<b>Header</b>')
        self.assertTrue(result.startswith(f'<div class="{HEADER_ELEMENT_CLASS}">'))
        self.assertTrue(result.endswith('<p>Content</p>'))

    def test_empty_header_leaves_html_unchanged(self):
        self.assertEqual(inject_header('<p>x</p>', ''), '<p>x</p>')


class TemplateViewGeneratorTestCase(SimpleTestCase):
    """Test cases for template loading and rendering"""

    def setUp(self):
        self.generator = TemplateViewGenerator(timeout=5.0)
        self.model = SimpleNamespace(full_name='Jane Doe')

    def test_default_timeout_from_settings(self):
        self.assertEqual(TemplateViewGenerator().timeout, settings.APPLICATION_DOCUMENT_FETCH_TIMEOUT)

    def test_render_local_template(self):
        path = Path(settings.APPLICATION_DOCUMENT_TEMPLATE_ROOT) / 'documents' / 'pending_application.html'
        model = SimpleNamespace(
            reference_number='A1',
            state='Pending',
            full_name='Jane Doe',
            applied_on=None,
            support_email='support@example.com',
            signature='Team',
        )

        html = self.generator.generate_from_path(str(path), model)

        self.assertIn('A1', html)
        self.assertIn('Jane Doe', html)
        self.assertIn('support@example.com', html)

    def test_render_file_url(self):
        path = Path(settings.APPLICATION_DOCUMENT_TEMPLATE_ROOT) / 'documents' / 'pending_application.html'
        source = self.generator.load_source(path.as_uri())
        self.assertIn('documents/base.html', source)

    @respx.mock
    def test_render_remote_template(self):
        route = respx.get('https://x.com/documents/pending_application.html').mock(
            return_value=httpx.Response(200, text='<p>{{ model.full_name }}</p>')
        )

        html = self.generator.generate_from_path('https://x.com/documents/pending_application.html', self.model)

        self.assertTrue(route.called)
        self.assertEqual(html, '<p>Jane Doe</p>')

    @respx.mock
    def test_remote_template_errors_propagate(self):
        respx.get('https://x.com/missing.html').mock(return_value=httpx.Response(404, text='missing'))

        with self.assertRaises(httpx.HTTPStatusError):
            self.generator.generate_from_path('https://x.com/missing.html', self.model)

    def test_template_output_is_escaped(self):
        path = Path(settings.APPLICATION_DOCUMENT_TEMPLATE_ROOT) / 'documents' / 'pending_application.html'
        model = SimpleNamespace(
            reference_number='A1',
            state='Pending',
            full_name='<script>x</script>',
            applied_on=None,
            support_email='',
            signature='',
        )

        html = self.generator.generate_from_path(str(path), model)

        self.assertNotIn('<script>x</script>', html)


class WeasyPrintRendererTestCase(SimpleTestCase):
    """Test cases for WeasyPrint renderer"""

    def setUp(self):
        if not WEASYPRINT_AVAILABLE:
            self.skipTest("WeasyPrint not available")

    def test_renderer_initialization(self):
        renderer = WeasyPrintRenderer()
        self.assertIsInstance(renderer, IPdfGenerator)

    def test_render_simple_html(self):
        renderer = WeasyPrintRenderer()
        html = """
        <!DOCTYPE html>
        <html>
        <head><title>Test</title></head>
        <body>
            <h1>Test Document</h1>
            <p>This is a test paragraph.</p>
        </body>
        </html>
        """

        document = renderer.generate_from_html(html, default_pdf_options())
        pdf_bytes = document.to_bytes()

        self.assertIsInstance(pdf_bytes, bytes)
        self.assertTrue(pdf_bytes.startswith(b'%PDF'))
        self.assertEqual(document.page_count, 1)

    def test_render_multi_page_document(self):
        renderer = WeasyPrintRenderer()
        sections = ''.join(
            f'<h2>Section {i}</h2><p>{"Lorem ipsum dolor sit amet. " * 40}</p>'
            for i in range(30)
        )
        html = f'<html><body>{sections}</body></html>'

        document = renderer.generate_from_html(html, default_pdf_options())

        self.assertGreater(document.page_count, 1)
        self.assertTrue(document.to_bytes().startswith(b'%PDF'))


class DocumentGenerationSmokeTestCase(TestCase):
    """
    Smoke test for the complete pipeline with the default collaborators.
    """

    def setUp(self):
        if not WEASYPRINT_AVAILABLE:
            self.skipTest("WeasyPrint not available")
        cache.clear()
        DocumentConfiguration.objects.create(
            support_email='support@example.com',
            signature='The Applications Team',
            tax_rate=0.1,
        )

    def test_smoke_activated_document(self):
        application = create_application(
            state=ApplicationState.ACTIVATED,
            funds=[(100, 10), (200, 20)],
        )

        result = build_default_generator().generate(
            application.pk,
            settings.APPLICATION_DOCUMENT_TEMPLATE_ROOT + '/',
        )

        self.assertTrue(result.succeeded)
        self.assertEqual(result.filename, 'application_A1.pdf')
        self.assertTrue(result.pdf_bytes.startswith(b'%PDF'))
