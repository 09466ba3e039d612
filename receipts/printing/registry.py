"""
Receipt Renderer Registry

Central registry for resolving format keys to renderer instances.
"""

import logging
import threading
from typing import Optional

from .exceptions import DuplicateFormatError, UnsupportedFormatError
from .interfaces import IReceiptRenderer


logger = logging.getLogger(__name__)


class RendererRegistry:
    """
    Registry mapping format keys to receipt renderers.
    
    Keys are case-sensitive strings. Registering an existing key replaces
    the previous renderer unless the registry is strict. All access is
    serialized by a single lock, so formats can be added at runtime while
    other threads resolve.
    """
    
    def __init__(self, strict: bool = False):
        """
        Initialize an empty registry.
        
        Args:
            strict: If True, registering an existing key raises
                DuplicateFormatError instead of replacing the renderer
        """
        self.strict = strict
        self._renderers: dict[str, IReceiptRenderer] = {}
        self._lock = threading.RLock()
    
    def register(
        self,
        format_key: str,
        renderer: IReceiptRenderer,
        *,
        replace: Optional[bool] = None
    ) -> None:
        """
        Register a renderer under a format key.
        
        Args:
            format_key: Unique identifier for the format (e.g. 'pdf')
            renderer: Renderer instance
            replace: Whether to replace an existing entry. Defaults to
                ``not self.strict``.
                
        Raises:
            ValueError: If format_key is empty or not a string
            TypeError: If renderer has no callable ``render``
            DuplicateFormatError: If the key exists and replacing is off
        """
        if not isinstance(format_key, str) or not format_key:
            raise ValueError("Format key must be a non-empty string")
        if not callable(getattr(renderer, 'render', None)):
            raise TypeError(
                f"Renderer for '{format_key}' must provide a callable render()"
            )
        if replace is None:
            replace = not self.strict
        
        with self._lock:
            if format_key in self._renderers:
                if not replace:
                    raise DuplicateFormatError(format_key)
                logger.info(f"Replacing renderer for format '{format_key}'")
            self._renderers[format_key] = renderer
        
        logger.debug(f"Registered renderer {renderer!r} for format '{format_key}'")
    
    def resolve(self, format_key: str) -> IReceiptRenderer:
        """
        Get the renderer registered for a format key.
        
        Args:
            format_key: The format to look up
            
        Returns:
            The most recently registered renderer for the key
            
        Raises:
            UnsupportedFormatError: If no renderer is registered for the key
        """
        with self._lock:
            renderer = self._renderers.get(format_key)
        if renderer is None:
            raise UnsupportedFormatError(format_key)
        return renderer
    
    def unregister(self, format_key: str) -> None:
        """Remove a format; does nothing if it is not registered"""
        with self._lock:
            removed = self._renderers.pop(format_key, None)
        if removed is not None:
            logger.info(f"Unregistered renderer for format '{format_key}'")
    
    def is_registered(self, format_key: str) -> bool:
        """Check if a format key is registered"""
        with self._lock:
            return format_key in self._renderers
    
    def list_formats(self) -> list[str]:
        """List all registered format keys, sorted"""
        with self._lock:
            return sorted(self._renderers)
    
    def snapshot(self) -> dict[str, IReceiptRenderer]:
        """Return a copy of the current key -> renderer mapping"""
        with self._lock:
            return dict(self._renderers)
    
    def clear(self) -> None:
        with self._lock:
            self._renderers.clear()
    
    def __contains__(self, format_key: object) -> bool:
        return self.is_registered(format_key)
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._renderers)


# Global registry instance, populated from settings by ReceiptsConfig.ready()
_registry = RendererRegistry()


def get_registry() -> RendererRegistry:
    """Get the global renderer registry"""
    return _registry


def register_renderer(
    format_key: str,
    renderer: IReceiptRenderer,
    *,
    replace: Optional[bool] = None
) -> None:
    """Register a renderer in the global registry"""
    _registry.register(format_key, renderer, replace=replace)


def resolve_renderer(format_key: str) -> IReceiptRenderer:
    """Resolve a renderer from the global registry"""
    return _registry.resolve(format_key)


def unregister_renderer(format_key: str) -> None:
    """Remove a renderer from the global registry"""
    _registry.unregister(format_key)


def is_registered(format_key: str) -> bool:
    """Check if a format key is registered in the global registry"""
    return _registry.is_registered(format_key)


def list_formats() -> list[str]:
    """List all format keys of the global registry"""
    return _registry.list_formats()
