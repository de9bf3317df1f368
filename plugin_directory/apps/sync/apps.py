"""
Django metadata for the Sync Django application.
"""
from django.apps import AppConfig


class SyncConfig(AppConfig):
    """
    Configuration for the Sync Django application.
    """

    name = "plugin_directory.apps.sync"
    verbose_name = "Plugin Directory > Sync"
    default_auto_field = "django.db.models.BigAutoField"
    label = "pd_sync"
