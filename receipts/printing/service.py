"""
Receipt Service

High-level orchestrator that prints one order with one injected renderer.
"""

import logging

from .dto import Order, RenderResult
from .exceptions import RenderError
from .interfaces import IReceiptRenderer


logger = logging.getLogger(__name__)


class ReceiptService:
    """
    Prints a receipt for an order using an injected renderer.
    
    The service depends only on the renderer interface. It never looks up
    formats itself; resolve the renderer first (e.g. via RendererRegistry)
    and pass it in.
    
    Usage:
        renderer = get_registry().resolve('pdf')
        service = ReceiptService(Order.create(id=101, item='Laptop'), renderer)
        result = service.print_receipt()
    """
    
    def __init__(self, order: Order, renderer: IReceiptRenderer):
        """
        Initialize the service.
        
        Args:
            order: The order to print
            renderer: Renderer producing the desired format
            
        Raises:
            TypeError: If either dependency is missing
        """
        if order is None:
            raise TypeError("ReceiptService requires an order")
        if renderer is None:
            raise TypeError("ReceiptService requires a renderer")
        self._order = order
        self._renderer = renderer
    
    @property
    def order(self) -> Order:
        return self._order
    
    @property
    def renderer(self) -> IReceiptRenderer:
        return self._renderer
    
    def print_receipt(self) -> RenderResult:
        """
        Render the receipt.
        
        Returns:
            Whatever the renderer returns
            
        Raises:
            RenderError: Propagated unchanged from the renderer
        """
        format_key = getattr(self._renderer, 'format_key', '?')
        try:
            result = self._renderer.render(self._order)
        except RenderError as e:
            logger.warning(f"Receipt rendering failed for format '{format_key}': {e.reason}")
            raise
        
        logger.debug(f"Printed '{format_key}' receipt")
        return result
