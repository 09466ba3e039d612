"""
Interfaces for the Receipt Printing Framework

Defines the capability every receipt renderer implements. New formats are
added by implementing this interface and registering the implementation;
neither the registry nor the service needs to change.
"""

from abc import ABC, abstractmethod

from .dto import Order, RenderResult


class IReceiptRenderer(ABC):
    """
    Interface for receipt renderers.
    
    Implementations convert an Order into the output of one format.
    They must not mutate the order and must not perform I/O; delivering
    the returned content is up to the caller.
    """
    
    #: Format identifier this renderer produces (e.g. 'pdf', 'paper')
    format_key: str = ''
    
    @abstractmethod
    def render(self, order: Order) -> RenderResult:
        """
        Render an order.
        
        Args:
            order: The order to render
            
        Returns:
            RenderResult with the rendered content
            
        Raises:
            RenderError: If the order lacks what this format needs
        """
        pass
    
    def __repr__(self) -> str:
        return f"<{type(self).__name__} format_key={self.format_key!r}>"
