from django.apps import AppConfig


class ReceiptsConfig(AppConfig):
    name = 'receipts'
    
    def ready(self):
        """Populate the global renderer registry from settings."""
        from receipts.printing.config import load_configured_renderers
        
        load_configured_renderers()
