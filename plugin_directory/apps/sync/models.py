"""
Raw records pulled from the upstream plugin directory.

A SyncPlugin holds whatever the upstream API last told us about one plugin,
as-is. The fetcher that fills these rows in lives outside this package; the
``plugins`` app reads them and builds normalized Plugin rows from them.
"""
from __future__ import annotations

from django.db import models
from django.utils.translation import gettext_lazy as _

from plugin_directory.lib.fields import immutable_uuid_field, slug_field

__all__ = [
    "SyncPlugin",
]


class SyncPlugin(models.Model):
    """
    One upstream plugin record and its raw metadata payload.
    """

    id = models.BigAutoField(primary_key=True)
    uuid = immutable_uuid_field()

    slug = slug_field(unique=True)
    name = models.CharField(max_length=255, blank=True, default="")
    current_version = models.CharField(
        max_length=255,
        blank=True,
        default="",
        help_text=_("The version upstream currently advertises as stable."),
    )
    metadata = models.JSONField(
        null=True,
        blank=True,
        default=None,
        help_text=_(
            "Raw plugin information payload, exactly as returned upstream. "
            "Empty when the plugin has not been fetched (or was closed)."
        ),
    )

    created = models.DateTimeField(auto_now_add=True)
    modified = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Sync Plugin"
        verbose_name_plural = "Sync Plugins"

    def __str__(self):
        return f"<{self.__class__.__name__}> ({self.id}) {self.slug}"

    @property
    def has_metadata(self) -> bool:
        return bool(self.metadata)
