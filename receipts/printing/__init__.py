"""
Receipt Printing Framework

Renders orders into receipts of a chosen format. Renderers implement
IReceiptRenderer, are registered in a RendererRegistry under a format key,
and are injected into ReceiptService by the caller.
"""

from .dto import Order, RenderResult
from .exceptions import (
    DuplicateFormatError,
    ReceiptPrintingError,
    RenderError,
    UnsupportedFormatError,
)
from .interfaces import IReceiptRenderer
from .registry import RendererRegistry, get_registry
from .service import ReceiptService

__all__ = [
    'Order',
    'RenderResult',
    'IReceiptRenderer',
    'RendererRegistry',
    'get_registry',
    'ReceiptService',
    'ReceiptPrintingError',
    'UnsupportedFormatError',
    'DuplicateFormatError',
    'RenderError',
]
