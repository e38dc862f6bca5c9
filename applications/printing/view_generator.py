"""
View Generator

Loads a template from a locator and renders it with the Django template
engine. Locators may be local paths, file:// URLs or http(s):// URLs.
"""

import logging
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urlparse
from urllib.request import url2pathname

import httpx
from django.conf import settings
from django.template import engines

from .interfaces import IViewGenerator


logger = logging.getLogger(__name__)

REMOTE_SCHEMES = ('http', 'https')


class TemplateViewGenerator(IViewGenerator):
    """
    Renders Django templates addressed by a full locator.

    The view model is exposed to the template as ``model``. Templates may
    extend or include templates known to the configured Django engine.
    """

    def __init__(self, timeout: Optional[float] = None, engine_alias: str = 'django'):
        """
        Initialize the generator.

        Args:
            timeout: Seconds to wait for remote templates. Defaults to
                settings.APPLICATION_DOCUMENT_FETCH_TIMEOUT
            engine_alias: Name of the Django template engine to compile with
        """
        if timeout is None:
            timeout = getattr(settings, 'APPLICATION_DOCUMENT_FETCH_TIMEOUT', 30.0)
        self.timeout = timeout
        self.engine_alias = engine_alias

    def generate_from_path(self, path: str, model: Any) -> str:
        source = self.load_source(path)
        template = engines[self.engine_alias].from_string(source)

        logger.debug(f"Rendering template from {path}")
        return template.render({'model': model})

    def load_source(self, path: str) -> str:
        """
        Read template source from a local path or URL.

        Raises:
            httpx.HTTPError: If a remote template cannot be fetched
            OSError: If a local template cannot be read
        """
        parsed = urlparse(path)

        if parsed.scheme in REMOTE_SCHEMES:
            logger.debug(f"Fetching template {parsed.netloc}{parsed.path}")
            response = httpx.get(path, timeout=self.timeout, follow_redirects=True)
            response.raise_for_status()
            return response.text

        if parsed.scheme == 'file':
            return Path(url2pathname(parsed.path)).read_text(encoding='utf-8')

        return Path(path).read_text(encoding='utf-8')
