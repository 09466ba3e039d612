"""
Django management command to print a receipt for an order.

Example:
    python manage.py print_receipt pdf --field id=101 --field item=Laptop
"""

import json

from django.core.management.base import BaseCommand, CommandError

from receipts.printing import Order, ReceiptService, get_registry
from receipts.printing.config import get_default_format
from receipts.printing.exceptions import RenderError, UnsupportedFormatError


def parse_field(raw: str) -> tuple:
    """Split ``key=value``; the value is decoded as JSON when possible."""
    key, sep, value = raw.partition('=')
    if not sep or not key:
        raise CommandError(f"Invalid field '{raw}', expected key=value")
    try:
        return key, json.loads(value)
    except ValueError:
        return key, value


class Command(BaseCommand):
    help = 'Render a receipt for an order in the given format and write it to stdout'

    def add_arguments(self, parser):
        parser.add_argument(
            'format',
            nargs='?',
            help='Format key (defaults to RECEIPT_DEFAULT_FORMAT)',
        )
        parser.add_argument(
            '--field',
            action='append',
            default=[],
            metavar='KEY=VALUE',
            help='Order field; may be repeated',
        )
        parser.add_argument(
            '--fields-json',
            help='Order fields as a JSON object (merged before --field values)',
        )
        parser.add_argument(
            '--list',
            action='store_true',
            help='List the registered formats and exit',
        )

    def handle(self, *args, **options):
        """Execute the command."""
        registry = get_registry()
        
        if options['list']:
            for format_key in registry.list_formats():
                self.stdout.write(format_key)
            return
        
        fields = {}
        if options['fields_json']:
            try:
                decoded = json.loads(options['fields_json'])
            except ValueError as e:
                raise CommandError(f"--fields-json must be a JSON object: {e}")
            if not isinstance(decoded, dict):
                raise CommandError("--fields-json must be a JSON object")
            fields.update(decoded)
        for raw in options['field']:
            key, value = parse_field(raw)
            fields[key] = value
        
        format_key = options['format'] or get_default_format()
        
        try:
            renderer = registry.resolve(format_key)
        except UnsupportedFormatError as e:
            available = ', '.join(registry.list_formats()) or 'none'
            raise CommandError(f"{e} (available: {available})")
        
        try:
            result = ReceiptService(Order(fields), renderer).print_receipt()
        except RenderError as e:
            raise CommandError(str(e))
        
        text = str(result)
        self.stdout.write(text, ending='' if text.endswith('\n') else '\n')
