"""
Built-in Receipt Renderers

One renderer per format. They share nothing but the IReceiptRenderer
contract and the small field checks at the top of this module.
"""

import json
import logging
from decimal import Decimal, InvalidOperation
from typing import Iterable, Mapping

from django.core.serializers.json import DjangoJSONEncoder
from django.template.loader import render_to_string

from .dto import Order, RenderResult
from .exceptions import RenderError
from .interfaces import IReceiptRenderer


logger = logging.getLogger(__name__)

SLIP_WIDTH = 32
HTML_TEMPLATE = 'receipts/receipt.html'


def require_fields(format_key: str, order: Order, fields: Iterable[str]) -> None:
    """Raise RenderError for the first required field the order lacks."""
    for field in fields:
        if order.get(field) in (None, ''):
            raise RenderError(format_key, f"missing required field '{field}'")


def parse_lines(format_key: str, order: Order) -> list[tuple[str, int, Decimal]]:
    """
    Read the optional ``lines`` field as (name, quantity, unit price) tuples.
    
    Raises:
        RenderError: If ``lines`` is not a list, or a line is not a mapping
            or has a bad quantity/price
    """
    raw_lines = order.get('lines')
    if raw_lines is None:
        return []
    if not isinstance(raw_lines, tuple):
        raise RenderError(format_key, "lines must be a list")
    
    lines = []
    for index, line in enumerate(raw_lines):
        if not isinstance(line, Mapping) or not line.get('name'):
            raise RenderError(format_key, f"line {index + 1} must have a name")
        try:
            quantity = Decimal(str(line.get('quantity', 1)))
            price = Decimal(str(line.get('price', 0)))
        except (TypeError, ValueError, OverflowError, InvalidOperation):
            raise RenderError(format_key, f"line {index + 1} has an invalid quantity or price")
        if (
            not quantity.is_finite()
            or quantity != quantity.to_integral_value()
            or not price.is_finite()
        ):
            raise RenderError(format_key, f"line {index + 1} has an invalid quantity or price")
        lines.append((str(line['name']), int(quantity), price))
    return lines


def _money(value: Decimal) -> str:
    return f"{value.quantize(Decimal('0.01'))}"


class PdfReceiptRenderer(IReceiptRenderer):
    """
    Describes a PDF receipt job for an order.
    
    Producing the actual document is left to whatever consumes the
    result; this renderer only emits the job description.
    """
    
    format_key = 'pdf'
    required_fields = ('id', 'item')
    
    def render(self, order: Order) -> RenderResult:
        require_fields(self.format_key, order, self.required_fields)
        return RenderResult(
            content=f"Generating PDF receipt for order {order['id']}: {order['item']}",
            format_key=self.format_key,
            filename=f"receipt_{order['id']}.pdf",
        )


class PaperReceiptRenderer(IReceiptRenderer):
    """Fixed-width text slip for a receipt printer."""
    
    format_key = 'paper'
    required_fields = ('id', 'item')
    
    def __init__(self, width: int = SLIP_WIDTH, title: str = 'PAPER RECEIPT'):
        self.width = width
        self.title = title
    
    def render(self, order: Order) -> RenderResult:
        require_fields(self.format_key, order, self.required_fields)
        lines = parse_lines(self.format_key, order)
        
        rule = '=' * self.width
        slip = [
            rule,
            self.title.center(self.width).rstrip(),
            rule,
            f"Order: {order['id']}",
            f"Item: {order['item']}",
        ]
        
        if lines:
            slip.append('-' * self.width)
            total = Decimal('0')
            for name, quantity, price in lines:
                amount = price * quantity
                total += amount
                slip.append(self._columns(f"{quantity} x {name}", _money(amount)))
            slip.append('-' * self.width)
            slip.append(self._columns('Total', _money(total)))
        
        slip.append(rule)
        
        return RenderResult(
            content='\n'.join(slip) + '\n',
            format_key=self.format_key,
        )
    
    def _columns(self, left: str, right: str) -> str:
        left = left[:max(self.width - len(right) - 1, 0)]
        space = max(self.width - len(left) - len(right), 1)
        return f"{left}{' ' * space}{right}"


class HtmlReceiptRenderer(IReceiptRenderer):
    """Renders the receipt through a Django template (autoescaped)."""
    
    format_key = 'html'
    required_fields = ('id',)
    
    def __init__(self, template_name: str = HTML_TEMPLATE):
        self.template_name = template_name
    
    def render(self, order: Order) -> RenderResult:
        require_fields(self.format_key, order, self.required_fields)
        lines = parse_lines(self.format_key, order)
        
        context = {
            'order_id': order['id'],
            'fields': [(key, value) for key, value in order.as_dict().items() if key != 'lines'],
            'lines': [
                {'name': name, 'quantity': quantity, 'price': _money(price),
                 'amount': _money(price * quantity)}
                for name, quantity, price in lines
            ],
            'total': _money(sum((price * quantity for _, quantity, price in lines), Decimal('0'))),
        }
        
        logger.debug(f"Rendering template: {self.template_name}")
        html = render_to_string(self.template_name, context)
        
        return RenderResult(
            content=html,
            format_key=self.format_key,
            content_type='text/html',
            filename=f"receipt_{order['id']}.html",
        )


class JsonReceiptRenderer(IReceiptRenderer):
    """Serializes all order fields as JSON."""
    
    format_key = 'json'
    
    def render(self, order: Order) -> RenderResult:
        try:
            content = json.dumps(order.as_dict(), cls=DjangoJSONEncoder, sort_keys=True, indent=2)
        except (TypeError, ValueError) as e:
            raise RenderError(self.format_key, f"order is not serializable: {e}")
        
        return RenderResult(
            content=content,
            format_key=self.format_key,
            content_type='application/json',
        )


def default_renderers() -> dict[str, type]:
    """Built-in renderer classes keyed by their format"""
    return {
        renderer_cls.format_key: renderer_cls
        for renderer_cls in (
            PdfReceiptRenderer,
            PaperReceiptRenderer,
            HtmlReceiptRenderer,
            JsonReceiptRenderer,
        )
    }
