"""
Tests for the print_receipt management command.
"""

import json
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase, override_settings

from receipts.management.commands.print_receipt import parse_field


class ParseFieldTestCase(TestCase):
    """Test cases for key=value parsing"""
    
    def test_json_values_are_decoded(self):
        self.assertEqual(parse_field('id=101'), ('id', 101))
        self.assertEqual(parse_field('paid=true'), ('paid', True))
    
    def test_plain_values_stay_strings(self):
        self.assertEqual(parse_field('item=Laptop'), ('item', 'Laptop'))
        self.assertEqual(parse_field('note=a=b'), ('note', 'a=b'))
    
    def test_missing_separator_raises_error(self):
        with self.assertRaises(CommandError):
            parse_field('item')
        with self.assertRaises(CommandError):
            parse_field('=Laptop')


class PrintReceiptCommandTestCase(TestCase):
    """Test print_receipt command."""
    
    def test_print_pdf_receipt(self):
        """Test printing a pdf receipt to stdout"""
        out = StringIO()
        call_command('print_receipt', 'pdf', field=['id=101', 'item=Laptop'], stdout=out)
        
        output = out.getvalue()
        self.assertIn('PDF', output)
        self.assertIn('Laptop', output)
        self.assertIn('101', output)
    
    def test_fields_json(self):
        """Test passing order fields as a JSON object"""
        out = StringIO()
        call_command(
            'print_receipt', 'json',
            fields_json='{"id": 123, "item": "Book"}',
            field=['item=Novel'],
            stdout=out,
        )
        
        self.assertEqual(json.loads(out.getvalue()), {'id': 123, 'item': 'Novel'})
    
    @override_settings(RECEIPT_DEFAULT_FORMAT='paper')
    def test_default_format(self):
        """Test that the configured default format is used"""
        out = StringIO()
        call_command('print_receipt', field=['id=123', 'item=Book'], stdout=out)
        
        self.assertIn('PAPER RECEIPT', out.getvalue())
        self.assertIn('Book', out.getvalue())
    
    def test_list_formats(self):
        """Test listing registered formats"""
        out = StringIO()
        call_command('print_receipt', list=True, stdout=out)
        
        formats = out.getvalue().split()
        for format_key in ('html', 'json', 'paper', 'pdf'):
            self.assertIn(format_key, formats)
    
    def test_unknown_format_raises_command_error(self):
        """Test that an unregistered format is reported"""
        with self.assertRaises(CommandError) as cm:
            call_command('print_receipt', 'fax', field=['id=1'], stdout=StringIO())
        
        self.assertIn('fax', str(cm.exception))
        self.assertIn('available', str(cm.exception))
    
    def test_render_error_raises_command_error(self):
        """Test that a render failure is reported"""
        with self.assertRaises(CommandError) as cm:
            call_command('print_receipt', 'pdf', field=['id=1'], stdout=StringIO())
        
        self.assertIn('item', str(cm.exception))
    
    def test_invalid_fields_json_raises_command_error(self):
        """Test that --fields-json must hold an object"""
        for raw in ('[1, 2]', '[["id", 1]]', '"id"', '{not json'):
            with self.subTest(fields_json=raw):
                with self.assertRaises(CommandError):
                    call_command('print_receipt', 'json', fields_json=raw, stdout=StringIO())
    
    def test_malformed_lines_raise_command_error(self):
        """Test that a bad lines value is reported, not a traceback"""
        with self.assertRaises(CommandError) as cm:
            call_command(
                'print_receipt', 'paper',
                field=['id=1', 'item=x', 'lines=5'],
                stdout=StringIO(),
            )
    
        self.assertIn('lines', str(cm.exception))
