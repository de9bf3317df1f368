"""
Django Admin pages for Plugin models.
"""
from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .api import get_plugin_tags
from .models import Plugin, PluginTag


@admin.register(PluginTag)
class PluginTagAdmin(admin.ModelAdmin):
    """
    Tags are created as a side effect of syncing plugins, so only names are editable.
    """
    list_display = ["slug", "name"]
    search_fields = ["slug", "name"]
    readonly_fields = ["slug"]

    def has_add_permission(self, request, *args, **kwargs):
        return False  # pragma: no cover


@admin.register(Plugin)
class PluginAdmin(admin.ModelAdmin):
    """
    Plugins only change by re-applying upstream metadata, so everything is read-only here.
    """
    list_display = ["slug", "name", "version", "active_installs", "last_updated"]
    search_fields = ["slug", "name", "author"]
    fieldsets = [
        (
            "",
            {
                "fields": ["uuid", "slug", "sync", "name", "version", "author", "tag_list"],
            }
        ),
        (
            _("Compatibility"),
            {
                "fields": ["requires", "requires_php", "tested"],
            }
        ),
        (
            _("Statistics"),
            {
                "fields": [
                    "rating",
                    "num_ratings",
                    "support_threads",
                    "support_threads_resolved",
                    "active_installs",
                    "downloaded",
                    "added",
                    "last_updated",
                ],
            }
        ),
    ]

    def get_readonly_fields(self, request, obj=None):
        return [
            field.name for field in self.model._meta.get_fields() if field.concrete and not field.many_to_many
        ] + ["tag_list"]

    @admin.display(description=_("Tags"))
    def tag_list(self, obj: Plugin) -> str:
        return ", ".join(sorted(get_plugin_tags(obj)))

    def has_add_permission(self, request, *args, **kwargs):
        return False  # pragma: no cover

    def has_delete_permission(self, request, obj=None):
        return False  # pragma: no cover
