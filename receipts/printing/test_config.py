"""
Tests for receipt printing configuration.
"""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.test import TestCase, override_settings

from receipts.printing.config import (
    DEFAULT_FORMAT,
    build_renderer,
    get_default_format,
    get_renderer_paths,
    is_strict_registration,
    load_configured_renderers,
)
from receipts.printing.registry import RendererRegistry
from receipts.printing.renderers import (
    JsonReceiptRenderer,
    PaperReceiptRenderer,
    PdfReceiptRenderer,
)


class ReceiptConfigTestCase(TestCase):
    """Test cases for settings access"""
    
    @override_settings(RECEIPT_RENDERERS=None)
    def test_defaults_to_builtin_renderers(self):
        """Test that missing RECEIPT_RENDERERS falls back to built-ins"""
        paths = get_renderer_paths()
        
        self.assertEqual(sorted(paths), ['html', 'json', 'paper', 'pdf'])
        self.assertIs(paths['pdf'], PdfReceiptRenderer)
    
    @override_settings(RECEIPT_RENDERERS=['pdf'])
    def test_non_dict_setting_is_rejected(self):
        """Test that RECEIPT_RENDERERS must be a dict"""
        with self.assertRaises(ImproperlyConfigured):
            get_renderer_paths()
    
    @override_settings(RECEIPT_DEFAULT_FORMAT='json')
    def test_default_format_from_settings(self):
        """Test reading RECEIPT_DEFAULT_FORMAT"""
        self.assertEqual(get_default_format(), 'json')
    
    def test_default_format_fallback(self):
        """Test the built-in default format"""
        with self.settings():
            del settings.RECEIPT_DEFAULT_FORMAT
            self.assertEqual(get_default_format(), DEFAULT_FORMAT)
    
    @override_settings(RECEIPT_STRICT_REGISTRATION=True)
    def test_strict_flag(self):
        """Test reading RECEIPT_STRICT_REGISTRATION"""
        self.assertTrue(is_strict_registration())


class BuildRendererTestCase(TestCase):
    """Test cases for build_renderer"""
    
    def test_dotted_path(self):
        """Test importing a renderer class by dotted path"""
        renderer = build_renderer('pdf', 'receipts.printing.renderers.PdfReceiptRenderer')
        self.assertIsInstance(renderer, PdfReceiptRenderer)
    
    def test_instance_is_used_as_is(self):
        """Test that configured instances are kept"""
        renderer = PaperReceiptRenderer(width=40)
        self.assertIs(build_renderer('paper', renderer), renderer)
    
    def test_bad_path_raises_improperly_configured(self):
        """Test that an unknown dotted path is a configuration error"""
        with self.assertRaises(ImproperlyConfigured) as cm:
            build_renderer('fax', 'receipts.printing.renderers.FaxReceiptRenderer')
        
        self.assertIn('fax', str(cm.exception))
    
    def test_non_renderer_raises_improperly_configured(self):
        """Test that the imported object must provide render()"""
        with self.assertRaises(ImproperlyConfigured):
            build_renderer('json', 'json.dumps')


class LoadConfiguredRenderersTestCase(TestCase):
    """Test cases for load_configured_renderers"""
    
    @override_settings(RECEIPT_RENDERERS={
        'pdf': 'receipts.printing.renderers.PdfReceiptRenderer',
        'data': JsonReceiptRenderer,
    })
    def test_populates_given_registry(self):
        """Test that every configured format ends up registered"""
        registry = load_configured_renderers(RendererRegistry())
        
        self.assertEqual(registry.list_formats(), ['data', 'pdf'])
        self.assertIsInstance(registry.resolve('data'), JsonReceiptRenderer)
    
    @override_settings(
        RECEIPT_RENDERERS={'pdf': 'receipts.printing.renderers.PdfReceiptRenderer'},
        RECEIPT_STRICT_REGISTRATION=False,
    )
    def test_replaces_existing_entries(self):
        """Test that configured renderers replace existing ones by default"""
        registry = RendererRegistry()
        registry.register('pdf', PaperReceiptRenderer())
        
        load_configured_renderers(registry)
        
        self.assertIsInstance(registry.resolve('pdf'), PdfReceiptRenderer)
    
    @override_settings(
        RECEIPT_RENDERERS={'pdf': 'receipts.printing.renderers.PdfReceiptRenderer'},
        RECEIPT_STRICT_REGISTRATION=True,
    )
    def test_strict_mode_rejects_duplicates(self):
        """Test that strict registration reports duplicates as misconfiguration"""
        registry = RendererRegistry()
        registry.register('pdf', PaperReceiptRenderer())
        
        with self.assertRaises(ImproperlyConfigured) as cm:
            load_configured_renderers(registry)
        
        self.assertIn("already registered", str(cm.exception))
        self.assertIsInstance(registry.resolve('pdf'), PaperReceiptRenderer)
