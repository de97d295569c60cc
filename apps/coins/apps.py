# apps/coins/apps.py
from django.apps import AppConfig
from importlib import import_module

class CoinsConfig(AppConfig):
    """
    Configuration for the coins app.
    - Ensures signals are imported and connected when the app is ready.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.coins'

    def ready(self):
        # Import signals module to connect signal handlers
        import_module('apps.coins.signals')
