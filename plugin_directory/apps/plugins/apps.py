"""
Django metadata for the Plugins Django application.
"""
from django.apps import AppConfig


class PluginsConfig(AppConfig):
    """
    Configuration for the Plugins Django application.
    """

    name = "plugin_directory.apps.plugins"
    verbose_name = "Plugin Directory > Plugins"
    default_auto_field = "django.db.models.BigAutoField"
    label = "pd_plugins"
