"""
Normalized plugin directory data.

A Plugin is built from exactly one SyncPlugin (the raw upstream record) and
is only ever changed by re-applying that record's metadata through the
functions in ``api.py``. Don't mutate these models directly: tag
associations are staged on the Plugin and only written when it is saved
through the API.

PluginTags are shared between plugins and deduplicated by slug. The link
table carries no data of its own, and a plugin's links are replaced
wholesale every time its metadata is re-applied.
"""
from __future__ import annotations

from django.db import models
from django.utils.translation import gettext_lazy as _

from plugin_directory.lib.fields import immutable_uuid_field, slug_field, url_field
from plugin_directory.lib.validators import validate_utc_datetime

from ..sync.models import SyncPlugin

__all__ = [
    "Plugin",
    "PluginTag",
]

# Character budgets. Values longer than these are truncated, never rejected.
NAME_MAX_LENGTH = 255
SHORT_DESCRIPTION_MAX_LENGTH = 150
AUTHOR_MAX_LENGTH = 255
VERSION_MAX_LENGTH = 255
URL_MAX_LENGTH = 1024


class PluginTag(models.Model):
    """
    A label like "security" that many plugins can share.

    The slug is the identity; the name is whatever the first plugin to use
    the slug called it.
    """

    id = models.BigAutoField(primary_key=True)
    slug = slug_field(unique=True)
    name = models.CharField(max_length=NAME_MAX_LENGTH, blank=True)

    class Meta:
        verbose_name = "Plugin Tag"
        verbose_name_plural = "Plugin Tags"

    def __str__(self):
        return f"<{self.__class__.__name__}> ({self.id}) {self.slug}"


class Plugin(models.Model):
    """
    A plugin listing, normalized from its upstream SyncPlugin record.
    """

    id = models.BigAutoField(primary_key=True)
    uuid = immutable_uuid_field()

    sync = models.OneToOneField(
        SyncPlugin,
        on_delete=models.PROTECT,
        related_name="plugin",
        help_text=_("The upstream record this plugin was built from."),
    )

    # Set once at creation; any metadata applied later must carry the same slug.
    slug = slug_field(unique=True)

    name = models.CharField(max_length=NAME_MAX_LENGTH, blank=True)
    short_description = models.CharField(max_length=SHORT_DESCRIPTION_MAX_LENGTH, blank=True, default="")
    description = models.TextField(blank=True, default="")
    version = models.CharField(max_length=VERSION_MAX_LENGTH, blank=True, default="")
    author = models.CharField(max_length=AUTHOR_MAX_LENGTH, blank=True, default="")
    author_profile = url_field()

    # Version constraints, e.g. "6.2" or "7.4".
    requires = models.CharField(max_length=VERSION_MAX_LENGTH, blank=True, default="")
    requires_php = models.CharField(max_length=VERSION_MAX_LENGTH, null=True, blank=True, default=None)
    tested = models.CharField(max_length=VERSION_MAX_LENGTH, blank=True, default="")

    download_link = models.CharField(max_length=URL_MAX_LENGTH, blank=True, default="")

    added = models.DateTimeField(validators=[validate_utc_datetime])
    last_updated = models.DateTimeField(null=True, blank=True, default=None, validators=[validate_utc_datetime])

    rating = models.IntegerField(default=0)
    ratings = models.JSONField(null=True, blank=True, default=None)
    num_ratings = models.IntegerField(default=0)
    support_threads = models.IntegerField(default=0)
    support_threads_resolved = models.IntegerField(default=0)
    active_installs = models.BigIntegerField(default=0)
    downloaded = models.BigIntegerField(default=0)

    homepage = url_field()
    donate_link = url_field()
    business_model = models.CharField(max_length=NAME_MAX_LENGTH, null=True, blank=True, default=None)
    commercial_support_url = url_field()
    support_url = url_field()
    preview_link = url_field()
    repository_url = url_field()

    banners = models.JSONField(null=True, blank=True, default=None)
    contributors = models.JSONField(null=True, blank=True, default=None)
    icons = models.JSONField(null=True, blank=True, default=None)
    source = models.JSONField(null=True, blank=True, default=None)
    requires_plugins = models.JSONField(null=True, blank=True, default=None)
    compatibility = models.JSONField(null=True, blank=True, default=None)
    screenshots = models.JSONField(null=True, blank=True, default=None)
    sections = models.JSONField(null=True, blank=True, default=None)
    versions = models.JSONField(null=True, blank=True, default=None)
    upgrade_notice = models.JSONField(null=True, blank=True, default=None)

    # Read these through api.get_plugin_tags(), which always queries.
    tags = models.ManyToManyField(
        PluginTag,
        related_name="plugins",
        db_table="plugin_plugin_tags",
        blank=True,
    )

    # Tag mapping (slug -> name) from the last apply_metadata() call that
    # hasn't been written yet. None means "leave the associations alone".
    staged_tags: dict[str, str] | None = None

    class Meta:
        verbose_name = "Plugin"
        verbose_name_plural = "Plugins"

    def __str__(self):
        return f"<{self.__class__.__name__}> ({self.id}) {self.slug}"
