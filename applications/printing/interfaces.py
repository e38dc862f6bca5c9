"""
Interfaces for the Printing Framework

Defines the collaborators the document generator depends on. Each one can be
replaced by a different implementation (another data store, template host or
rendering engine).
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from .dto import PdfOptions


class IApplicationSource(ABC):
    """
    Interface for looking up application records.
    """

    @abstractmethod
    def find_application_by_id(self, application_id: Any) -> Optional[Any]:
        """
        Find a single application.

        Args:
            application_id: Unique application identifier

        Returns:
            The application, or None if no record matches

        Raises:
            Exception: If more than one record matches the identifier
        """
        pass


class IPathProvider(ABC):
    """
    Interface for resolving template identifiers to template paths.
    """

    @abstractmethod
    def get(self, template_id: str) -> str:
        """
        Resolve a template identifier.

        Args:
            template_id: Logical template name (e.g., 'PendingApplication')

        Returns:
            Template path, starting with its own separator
        """
        pass


class IViewGenerator(ABC):
    """
    Interface for rendering a template to markup.
    """

    @abstractmethod
    def generate_from_path(self, path: str, model: Any) -> str:
        """
        Render the template found at path with the given view model.

        Args:
            path: Full template locator (base location plus template path)
            model: View model exposed to the template

        Returns:
            Rendered HTML
        """
        pass


class IPdfDocument(ABC):
    """A rendered, paginated document."""

    @abstractmethod
    def to_bytes(self) -> bytes:
        pass


class IPdfGenerator(ABC):
    """
    Interface for PDF rendering engines.

    Implementations convert HTML to a paginated document using their
    specific engine.
    """

    @abstractmethod
    def generate_from_html(self, html: str, options: PdfOptions) -> IPdfDocument:
        """
        Render HTML to a PDF document.

        Args:
            html: HTML string to render
            options: Page number and header policy

        Returns:
            Rendered document

        Raises:
            Exception: If rendering fails
        """
        pass
