"""
Service-layer exceptions for consistent error handling across appdocs.

These exceptions provide a consistent way to handle service configuration
and availability issues throughout the application.
"""


class ServiceError(Exception):
    """Base exception for all service-related errors."""
    pass


class ServiceNotConfigured(ServiceError):
    """
    Raised when a service is used but its configuration is incomplete or missing.

    Example:
        If no DocumentConfiguration row exists, or it has no support email.
    """
    pass


class TemplatePathNotConfigured(ServiceNotConfigured):
    """Raised when a template identifier has no configured path."""
    pass
