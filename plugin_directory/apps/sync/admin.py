"""
Django admin for raw sync records.
"""
from django.contrib import admin

from .models import SyncPlugin


@admin.register(SyncPlugin)
class SyncPluginAdmin(admin.ModelAdmin):
    """
    Read-only view of what we last pulled from upstream.
    """
    list_display = ["slug", "name", "current_version", "modified"]
    search_fields = ["slug", "name"]
    readonly_fields = ["uuid", "slug", "name", "current_version", "metadata", "created", "modified"]

    def has_add_permission(self, request, *args, **kwargs):
        return False  # pragma: no cover
