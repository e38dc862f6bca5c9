"""
Document Variant Registry

Maps application states to the template identifier and view-model builder
used to render them. States without a registered variant cannot produce a
document.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from applications.models import Application, ApplicationState
from applications.services.config import DocumentSettings

from .view_models import (
    build_activated_view_model,
    build_in_review_view_model,
    build_pending_view_model,
)


class ViewModelBuilder(Protocol):
    """Protocol defining the interface for view-model builders"""

    def __call__(
        self,
        application: Application,
        settings: DocumentSettings,
        describe: Callable[[str], str],
    ) -> Any:
        ...


@dataclass(frozen=True)
class DocumentVariant:
    template_id: str
    build_view_model: ViewModelBuilder


class DocumentVariantRegistry:
    """Registry for per-state document variants"""

    def __init__(self):
        self._variants: dict[str, DocumentVariant] = {}

    def register(self, state: str, template_id: str, builder: ViewModelBuilder) -> None:
        """
        Register a document variant.

        Args:
            state: Application state the variant handles
            template_id: Logical template name (e.g., 'PendingApplication')
            builder: Function building the view model for that state
        """
        if state in self._variants:
            raise ValueError(f"Document variant for state '{state}' is already registered")
        self._variants[state] = DocumentVariant(template_id=template_id, build_view_model=builder)

    def get_variant(self, state: str) -> Optional[DocumentVariant]:
        """Get the variant for a state, or None if the state is unsupported"""
        return self._variants.get(state)

    def is_registered(self, state: str) -> bool:
        """Check if a state has a variant"""
        return state in self._variants

    def list_states(self) -> list[str]:
        """List all supported states"""
        return list(self._variants.keys())


def create_default_registry() -> DocumentVariantRegistry:
    registry = DocumentVariantRegistry()
    registry.register(ApplicationState.PENDING, 'PendingApplication', build_pending_view_model)
    registry.register(ApplicationState.ACTIVATED, 'ActivatedApplication', build_activated_view_model)
    registry.register(ApplicationState.IN_REVIEW, 'InReviewApplication', build_in_review_view_model)
    return registry


# Global registry instance
_registry = create_default_registry()


def get_registry() -> DocumentVariantRegistry:
    return _registry


def get_template_id(state: str) -> Optional[str]:
    """Template identifier for a state, or None if the state is unsupported"""
    variant = _registry.get_variant(state)
    return variant.template_id if variant else None
