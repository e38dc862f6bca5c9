"""
Application Document Generator

Produces the PDF document for an application's current state:
1. Look up the application
2. Select the state's template and build its view model
3. Render the template to HTML
4. Convert the HTML to a paged PDF
"""

import logging
from typing import Any, Callable, Optional

from applications.models import Application
from applications.printing.dto import DocumentResult, GenerationFailure, default_pdf_options
from applications.printing.interfaces import IApplicationSource, IPathProvider, IPdfGenerator, IViewGenerator
from applications.printing.path_provider import SettingsTemplatePathProvider
from applications.printing.view_generator import TemplateViewGenerator
from applications.printing.weasyprint_renderer import WeasyPrintRenderer
from applications.services.config import DocumentSettings, get_document_settings

from .data_source import OrmApplicationSource
from .helpers import describe_state
from .registry import DocumentVariant, DocumentVariantRegistry, get_registry
from .template_selector import resolve_template_locator


class PdfApplicationDocumentGenerator:
    """
    Generates PDF documents for applications.

    Each call to generate() is independent: view model and PDF options are
    created per request, and nothing is cached between calls.

    Usage:
        generator = build_default_generator()
        result = generator.generate(application_id, base_uri='https://example.com/')
        if result.succeeded:
            ...
    """

    def __init__(
        self,
        data_source: IApplicationSource,
        template_path_provider: IPathProvider,
        view_generator: IViewGenerator,
        configuration: DocumentSettings,
        pdf_generator: IPdfGenerator,
        logger: Optional[logging.Logger] = None,
        describe: Callable[[str], str] = describe_state,
        registry: Optional[DocumentVariantRegistry] = None,
    ):
        """
        Initialize the generator.

        Args:
            data_source: Application lookup
            template_path_provider: Resolves template identifiers to paths
            view_generator: Renders templates to HTML
            configuration: Support email, signature and tax rate
            pdf_generator: Converts HTML to PDF
            logger: Receives warnings for requests that produce no document.
                Defaults to this module's logger.
            describe: Maps an application state to its display label
            registry: Per-state variants. Defaults to the global registry.

        Raises:
            ValueError: If a required collaborator is missing
        """
        required = {
            'data_source': data_source,
            'template_path_provider': template_path_provider,
            'view_generator': view_generator,
            'configuration': configuration,
            'pdf_generator': pdf_generator,
        }
        for name, dependency in required.items():
            if dependency is None:
                raise ValueError(f"{name} is required")

        self.data_source = data_source
        self.template_path_provider = template_path_provider
        self.view_generator = view_generator
        self.configuration = configuration
        self.pdf_generator = pdf_generator
        self.logger = logger or logging.getLogger(__name__)
        self.describe = describe
        self.registry = registry or get_registry()

    def generate(self, application_id: Any, base_uri: str) -> DocumentResult:
        """
        Generate the PDF document for an application.

        Args:
            application_id: Identifier of the application
            base_uri: Base location the template paths are resolved against

        Returns:
            DocumentResult with the PDF bytes, or with the failure reason if
            no document could be produced

        Raises:
            Exception: Errors from the data source, template lookup or
                rendering engines are not caught
        """
        application = self.data_source.find_application_by_id(application_id)
        if application is None:
            self.logger.warning(f"No application found for id '{application_id}'")
            return DocumentResult.failed(GenerationFailure.NOT_FOUND)

        variant = self.registry.get_variant(application.state)
        if variant is None:
            self.logger.warning(
                f"The application is in state '{application.state}' "
                f"and no valid document can be generated for it."
            )
            return DocumentResult.failed(GenerationFailure.UNSUPPORTED_STATE)

        html = self.generate_view_string(application, variant, base_uri)
        if not html or not html.strip():
            self.logger.warning(f"Unable to generate view for application '{application_id}'.")
            return DocumentResult.failed(GenerationFailure.EMPTY_RENDER)

        document = self.pdf_generator.generate_from_html(html, default_pdf_options())
        result = DocumentResult(
            pdf_bytes=document.to_bytes(),
            filename=f"application_{application.reference_number}.pdf",
        )

        self.logger.info(f"Generated document {result.filename} ({len(result)} bytes)")
        return result

    def generate_view_string(self, application: Application, variant: DocumentVariant, base_uri: str) -> str:
        """Render the state's template with a freshly built view model."""
        locator = resolve_template_locator(self.template_path_provider, variant.template_id, base_uri)
        view_model = variant.build_view_model(application, self.configuration, self.describe)
        return self.view_generator.generate_from_path(locator, view_model)


def build_default_generator(logger: Optional[logging.Logger] = None) -> PdfApplicationDocumentGenerator:
    """
    Wire the generator with the ORM data source, settings-based template
    paths, Django template rendering and WeasyPrint.

    Raises:
        ServiceNotConfigured: If the document configuration is missing
        ImportError: If WeasyPrint is not available
    """
    return PdfApplicationDocumentGenerator(
        data_source=OrmApplicationSource(),
        template_path_provider=SettingsTemplatePathProvider(),
        view_generator=TemplateViewGenerator(),
        configuration=get_document_settings(),
        pdf_generator=WeasyPrintRenderer(),
        logger=logger,
    )
