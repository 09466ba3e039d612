"""
Data Transfer Objects for the Receipt Printing Framework
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Union


def _freeze(value: Any) -> Any:
    """Recursively convert dicts, lists and sets into read-only equivalents."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(value)
    return value


def _thaw(value: Any) -> Any:
    """Inverse of ``_freeze``: build plain dicts and lists again (sets become sorted lists)."""
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    if isinstance(value, frozenset):
        return sorted(value, key=str)
    return value


def _hashable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return frozenset((key, _hashable(item)) for key, item in value.items())
    if isinstance(value, tuple):
        return tuple(_hashable(item) for item in value)
    return value


@dataclass(frozen=True)
class Order:
    """
    Immutable record describing a purchase to be rendered into a receipt.
    
    Fields are arbitrary key/value pairs (e.g. ``id``, ``item``, ``lines``).
    The mapping passed in is copied, so later changes to it do not leak
    into the order.
    
    Usage:
        order = Order.create(id=101, item='Laptop')
        order['item']  # 'Laptop'
    """
    
    fields: Mapping[str, Any]
    
    def __post_init__(self):
        if not isinstance(self.fields, Mapping):
            raise TypeError(
                f"Order fields must be a mapping, got {type(self.fields).__name__}"
            )
        object.__setattr__(self, 'fields', _freeze(self.fields))
    
    @classmethod
    def create(cls, **fields: Any) -> 'Order':
        """Build an order from keyword arguments."""
        return cls(fields)
    
    def __getitem__(self, key: str) -> Any:
        return self.fields[key]
    
    def __contains__(self, key: object) -> bool:
        return key in self.fields
    
    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)
    
    def __len__(self) -> int:
        return len(self.fields)
    
    def __hash__(self) -> int:
        return hash(_hashable(self.fields))
    
    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)
    
    def as_dict(self) -> dict:
        """Return a mutable deep copy of the order fields."""
        return _thaw(self.fields)


@dataclass(frozen=True)
class RenderResult:
    """
    Result of a receipt rendering operation.
    
    Contains the rendered content and metadata for whoever delivers it
    (screen, file, mail transport, ...).
    """
    
    content: Union[str, bytes]
    format_key: str
    content_type: str = "text/plain"
    filename: Optional[str] = None
    
    def __len__(self) -> int:
        """Return the size of the content (characters or bytes)"""
        return len(self.content)
    
    def __str__(self) -> str:
        if isinstance(self.content, bytes):
            return self.content.decode('utf-8', errors='replace')
        return self.content
