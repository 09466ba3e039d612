"""
Receipt printing configuration

Reads the printing settings from Django settings and populates a
renderer registry at startup.

Settings:
    RECEIPT_RENDERERS: dict of format key -> dotted path to a renderer class
        (or a renderer class/instance). Defaults to the built-in renderers.
    RECEIPT_DEFAULT_FORMAT: format used when a caller does not pick one
    RECEIPT_STRICT_REGISTRATION: reject duplicate format keys when True
"""

import logging
from typing import Any, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from .exceptions import DuplicateFormatError
from .registry import RendererRegistry, get_registry
from .renderers import default_renderers


logger = logging.getLogger(__name__)

DEFAULT_FORMAT = 'paper'


def get_renderer_paths() -> dict[str, Any]:
    """Return the configured format key -> renderer mapping."""
    configured = getattr(settings, 'RECEIPT_RENDERERS', None)
    if configured is None:
        return default_renderers()
    if not isinstance(configured, dict):
        raise ImproperlyConfigured("RECEIPT_RENDERERS must be a dict of format key -> renderer")
    return dict(configured)


def get_default_format() -> str:
    return getattr(settings, 'RECEIPT_DEFAULT_FORMAT', DEFAULT_FORMAT)


def is_strict_registration() -> bool:
    return bool(getattr(settings, 'RECEIPT_STRICT_REGISTRATION', False))


def build_renderer(format_key: str, spec: Any):
    """
    Turn a configured renderer entry into a renderer instance.
    
    Args:
        format_key: Format the entry is configured for (used in errors)
        spec: Dotted path, renderer class or renderer instance
        
    Raises:
        ImproperlyConfigured: If the path cannot be imported or the
            result is not a renderer
    """
    if isinstance(spec, str):
        try:
            spec = import_string(spec)
        except ImportError as e:
            raise ImproperlyConfigured(
                f"Cannot import renderer for format '{format_key}': {e}"
            )
    
    renderer = spec() if isinstance(spec, type) else spec
    if not callable(getattr(renderer, 'render', None)):
        raise ImproperlyConfigured(
            f"Renderer configured for format '{format_key}' has no render() method"
        )
    return renderer


def load_configured_renderers(registry: Optional[RendererRegistry] = None) -> RendererRegistry:
    """
    Register every configured renderer.
    
    Args:
        registry: Registry to populate (defaults to the global registry)
        
    Returns:
        The populated registry
        
    Raises:
        ImproperlyConfigured: On a bad renderer entry, or a duplicate key
            in strict mode
    """
    registry = registry if registry is not None else get_registry()
    strict = is_strict_registration()
    
    for format_key, spec in get_renderer_paths().items():
        renderer = build_renderer(format_key, spec)
        try:
            registry.register(format_key, renderer, replace=not strict)
        except DuplicateFormatError as e:
            raise ImproperlyConfigured(str(e))
    
    logger.info(f"Loaded {len(registry)} receipt renderers: {', '.join(registry.list_formats())}")
    return registry
