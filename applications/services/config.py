"""
Configuration service for application documents.

This module provides a centralized configuration layer that:
- Loads singleton configuration models with caching
- Exposes an immutable settings snapshot to the document generator

The document generator receives a DocumentSettings snapshot at construction
and never reads configuration while generating.
"""

from dataclasses import dataclass
from typing import Optional, Type

from django.core.cache import cache
from django.db import models

from applications.models import DocumentConfiguration
from .exceptions import ServiceNotConfigured


# Cache configuration
DEFAULT_CACHE_TTL = 60  # 60 seconds default TTL
CACHE_KEY_PREFIX = "appdocs_config"


@dataclass(frozen=True)
class DocumentSettings:
    """Read-only configuration shared by all document requests."""

    support_email: str
    signature: str
    tax_rate: float


def _get_cache_key(model_cls: Type[models.Model]) -> str:
    """Generate a cache key for a given model class."""
    return f"{CACHE_KEY_PREFIX}:{model_cls.__name__}"


def get_singleton(model_cls: Type[models.Model]) -> Optional[models.Model]:
    """
    Load a singleton configuration object with caching.

    Results are cached for DEFAULT_CACHE_TTL seconds to avoid excessive
    database queries.

    Args:
        model_cls: The Django model class to load (must be a singleton model)

    Returns:
        The singleton instance or None if not configured

    Example:
        >>> config = get_singleton(DocumentConfiguration)
        >>> if config:
        ...     print(config.support_email)
    """
    cache_key = _get_cache_key(model_cls)

    cached_value = cache.get(cache_key)
    if cached_value is not None:
        return cached_value

    obj = model_cls.objects.first()

    # Only cache configured rows so a freshly saved configuration is picked up
    if obj is not None:
        cache.set(cache_key, obj, DEFAULT_CACHE_TTL)

    return obj


def invalidate_singleton(model_cls: Type[models.Model]) -> None:
    """
    Invalidate the cache for a singleton configuration.

    This should be called when a configuration is updated.

    Args:
        model_cls: The Django model class to invalidate
    """
    cache_key = _get_cache_key(model_cls)
    cache.delete(cache_key)


def get_document_config() -> Optional[DocumentConfiguration]:
    """
    Get the document configuration.

    Returns:
        DocumentConfiguration instance or None if not configured
    """
    return get_singleton(DocumentConfiguration)


def get_document_settings() -> DocumentSettings:
    """
    Build the settings snapshot used by the document generator.

    Raises:
        ServiceNotConfigured: If no configuration exists or the support
            email is missing
    """
    config = get_document_config()
    if config is None:
        raise ServiceNotConfigured("Document configuration has not been created")
    if not config.support_email:
        raise ServiceNotConfigured("Document configuration is missing a support email")

    return DocumentSettings(
        support_email=config.support_email,
        signature=config.signature,
        tax_rate=float(config.tax_rate),
    )
