"""
Template locator construction.
"""

from applications.printing.interfaces import IPathProvider


PATH_SEPARATOR = '/'


def normalize_base_uri(base_uri: str) -> str:
    """Strip a single trailing separator from the base location."""
    if base_uri.endswith(PATH_SEPARATOR):
        return base_uri[:-1]
    return base_uri


def build_template_locator(base_uri: str, template_path: str) -> str:
    """
    Join a base location and a resolved template path.

    The resolved path supplies its own leading separator; none is inserted.
    """
    return f"{normalize_base_uri(base_uri)}{template_path}"


def resolve_template_locator(path_provider: IPathProvider, template_id: str, base_uri: str) -> str:
    """Resolve a template identifier and combine it with the base location."""
    return build_template_locator(base_uri, path_provider.get(template_id))
