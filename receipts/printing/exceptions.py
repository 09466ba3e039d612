"""
Receipt printing exceptions

All errors raised by the printing framework carry the format key they
relate to, so callers can decide whether to fall back to another format.
"""


class ReceiptPrintingError(Exception):
    """Base exception for all receipt printing errors."""
    
    def __init__(self, message: str, format_key: str = None):
        super().__init__(message)
        self.format_key = format_key


class UnsupportedFormatError(ReceiptPrintingError):
    """
    Raised when no renderer is registered for a requested format key.
    
    Recoverable by the caller, e.g. by retrying with a default format.
    
    Example:
        resolve('fax') on a registry that only knows 'pdf' and 'paper'.
    """
    
    def __init__(self, format_key: str):
        super().__init__(f"Unsupported receipt format '{format_key}'", format_key)


class DuplicateFormatError(ReceiptPrintingError):
    """Raised by a strict registry when a format key is registered twice."""
    
    def __init__(self, format_key: str):
        super().__init__(f"Receipt format '{format_key}' is already registered", format_key)


class RenderError(ReceiptPrintingError):
    """
    Raised by a renderer that cannot produce output for a given order.
    
    Attributes:
        format_key: Format of the renderer that failed
        reason: Human-readable cause (e.g. a missing required field)
    """
    
    def __init__(self, format_key: str, reason: str):
        super().__init__(f"Cannot render '{format_key}' receipt: {reason}", format_key)
        self.reason = reason
