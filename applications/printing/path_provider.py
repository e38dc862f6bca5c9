"""
Template path resolution backed by Django settings.
"""

import logging

from django.conf import settings

from applications.services.exceptions import TemplatePathNotConfigured

from .interfaces import IPathProvider


logger = logging.getLogger(__name__)


class SettingsTemplatePathProvider(IPathProvider):
    """
    Resolves template identifiers via settings.APPLICATION_DOCUMENT_TEMPLATES.

    The setting is read on every call, so overrides take effect without
    rebuilding the provider.
    """

    setting_name = 'APPLICATION_DOCUMENT_TEMPLATES'

    def get(self, template_id: str) -> str:
        templates = getattr(settings, self.setting_name, None) or {}
        path = templates.get(template_id)
        if not path:
            raise TemplatePathNotConfigured(
                f"No template path configured for '{template_id}' in settings.{self.setting_name}"
            )

        logger.debug(f"Resolved template '{template_id}' to {path}")
        return path
