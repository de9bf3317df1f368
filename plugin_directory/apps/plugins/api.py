"""
Plugins API (warning: UNSTABLE, in progress API)

This maps upstream SyncPlugin records onto Plugin rows. A Plugin is created
once per SyncPlugin and afterwards only changes by re-applying the whole
metadata payload; there is no field-by-field update path. You can read from
the models directly, but you should NEVER mutate them directly, since the
tag associations are staged on the Plugin and written by ``save_plugin``.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from logging import getLogger
from typing import Any

from django.db.models import QuerySet
from django.db.transaction import atomic
from django.utils import timezone

from plugin_directory.lib.fields import SLUG_MAX_LENGTH
from plugin_directory.lib.normalize import truncate

from ..sync.models import SyncPlugin
from .data import INTEGER_FIELDS, STRUCTURED_FIELDS, PluginMetadata
from .exceptions import MissingMetadataError, SlugMismatchError
from .models import (
    AUTHOR_MAX_LENGTH,
    NAME_MAX_LENGTH,
    SHORT_DESCRIPTION_MAX_LENGTH,
    URL_MAX_LENGTH,
    VERSION_MAX_LENGTH,
    Plugin,
    PluginTag,
)

# The public API that will be re-exported by plugin_directory.api.plugins
# is listed in the __all__ entries below. Internal helper functions that are
# private to this module should start with an underscore.
__all__ = [
    "apply_metadata",
    "create_plugin",
    "get_or_create_plugin",
    "get_or_create_plugin_tag",
    "get_plugin_by_slug",
    "get_plugin_tags",
    "get_plugins",
    "refresh_plugin_from_sync",
    "save_plugin",
    "MissingMetadataError",
    "SlugMismatchError",
]

logger = getLogger(__name__)

# Re-applied short descriptions get one character less than the seed row
# does. Existing data was written this way, so both budgets are kept.
SHORT_DESCRIPTION_APPLY_LENGTH = SHORT_DESCRIPTION_MAX_LENGTH - 1

_URL_FIELDS = (
    "author_profile",
    "homepage",
    "donate_link",
    "commercial_support_url",
    "support_url",
    "preview_link",
    "repository_url",
)


def get_or_create_plugin(sync_plugin: SyncPlugin) -> Plugin:
    """
    Get the Plugin built from ``sync_plugin``, creating it if there isn't one.

    An existing Plugin is returned as-is; looking it up does not refresh its
    metadata. Use ``refresh_plugin_from_sync`` for that.
    """
    plugin = Plugin.objects.filter(sync_id=sync_plugin.pk).first()
    if plugin is not None:
        return plugin
    return create_plugin(sync_plugin)


def create_plugin(sync_plugin: SyncPlugin) -> Plugin:
    """
    Create a fully populated Plugin (tags included) from a SyncPlugin.

    Raises MissingMetadataError if the SyncPlugin has no metadata, and
    SlugMismatchError if the metadata is for a different slug. Either way, and
    on any database error, no Plugin row is left behind.
    """
    payload = _get_sync_metadata(sync_plugin)
    metadata = PluginMetadata.from_payload(payload)

    with atomic():
        plugin = Plugin.objects.create(
            sync=sync_plugin,
            slug=sync_plugin.slug,
            name=truncate(sync_plugin.name, NAME_MAX_LENGTH),
            short_description=truncate(metadata.short_description, SHORT_DESCRIPTION_MAX_LENGTH),
            description=metadata.description,
            version=truncate(sync_plugin.current_version, VERSION_MAX_LENGTH),
            author=truncate(metadata.author, AUTHOR_MAX_LENGTH),
            requires=truncate(metadata.requires, VERSION_MAX_LENGTH),
            tested=truncate(metadata.tested, VERSION_MAX_LENGTH),
            download_link=truncate(metadata.download_link, URL_MAX_LENGTH),
            added=_added(metadata),
        )
        apply_metadata(plugin, payload)
        save_plugin(plugin)

    logger.info("Created plugin %s from sync record %s", plugin.slug, sync_plugin.pk)
    return plugin


def apply_metadata(plugin: Plugin, payload: Mapping[str, Any]) -> Plugin:
    """
    Copy every field of ``payload`` onto ``plugin``, without saving.

    The payload's slug must match the plugin's, or SlugMismatchError is raised
    before anything on the plugin is touched. Missing or malformed values get
    their defaults. If the payload has a tag mapping, it is staged on the
    plugin and replaces all of its tags when ``save_plugin`` is called; until
    then ``get_plugin_tags`` still shows the old ones.

    Returns the same (modified) Plugin instance.
    """
    payload_slug = payload.get("slug")
    if payload_slug != plugin.slug:
        raise SlugMismatchError(expected=plugin.slug, actual=payload_slug)

    metadata = PluginMetadata.from_payload(payload)

    plugin.name = truncate(metadata.name, NAME_MAX_LENGTH)
    plugin.short_description = truncate(metadata.short_description, SHORT_DESCRIPTION_APPLY_LENGTH)
    plugin.description = metadata.description
    plugin.version = truncate(metadata.version, VERSION_MAX_LENGTH)
    plugin.author = truncate(metadata.author, AUTHOR_MAX_LENGTH)
    plugin.requires = truncate(metadata.requires, VERSION_MAX_LENGTH)
    plugin.requires_php = truncate(metadata.requires_php, VERSION_MAX_LENGTH)
    plugin.tested = truncate(metadata.tested, VERSION_MAX_LENGTH)
    plugin.download_link = truncate(metadata.download_link, URL_MAX_LENGTH)
    plugin.business_model = truncate(metadata.business_model, NAME_MAX_LENGTH)
    plugin.added = _added(metadata)
    plugin.last_updated = metadata.last_updated

    for field_name in _URL_FIELDS:
        setattr(plugin, field_name, truncate(getattr(metadata, field_name), URL_MAX_LENGTH))
    for field_name in INTEGER_FIELDS:
        setattr(plugin, field_name, getattr(metadata, field_name))
    for field_name in STRUCTURED_FIELDS:
        setattr(plugin, field_name, getattr(metadata, field_name))

    if metadata.tags is not None:
        plugin.staged_tags = dict(metadata.tags)

    return plugin


def save_plugin(plugin: Plugin) -> Plugin:
    """
    Write a Plugin and any tag mapping staged on it by ``apply_metadata``.

    Staged tags replace the plugin's existing tags entirely. The plugin is
    validated first (``full_clean``), so e.g. a non-UTC ``added`` raises
    ValidationError and nothing is written.
    """
    with atomic():
        plugin.full_clean()
        plugin.save()
        if plugin.staged_tags is not None:
            _replace_tags(plugin, plugin.staged_tags)
            plugin.staged_tags = None
    return plugin


def refresh_plugin_from_sync(plugin: Plugin) -> Plugin:
    """
    Re-read the Plugin's SyncPlugin and re-apply its metadata, then save.

    Raises MissingMetadataError or SlugMismatchError without saving anything.
    """
    sync_plugin = SyncPlugin.objects.get(pk=plugin.sync_id)
    payload = _get_sync_metadata(sync_plugin)

    with atomic():
        apply_metadata(plugin, payload)
        save_plugin(plugin)

    logger.debug("Refreshed plugin %s from sync record %s", plugin.slug, sync_plugin.pk)
    return plugin


def get_plugin_tags(plugin: Plugin) -> dict[str, str]:
    """
    Get the plugin's saved tags, as a dict of slug -> name.

    This queries every time. Tags staged by ``apply_metadata`` but not yet
    saved are not included.
    """
    return dict(
        PluginTag.objects.filter(plugins=plugin).values_list("slug", "name")
    )


def get_or_create_plugin_tag(slug: str, name: str) -> PluginTag:
    """
    Get the PluginTag for ``slug``, creating it with ``name`` if missing.

    An existing tag keeps its name even if ``name`` differs. Concurrent
    creation of the same slug is settled by the unique constraint: Django's
    ``get_or_create`` re-fetches the winning row on IntegrityError. Slugs
    longer than the column are cut to fit, so they match what was stored.
    """
    slug = truncate(slug, SLUG_MAX_LENGTH)
    tag, created = PluginTag.objects.get_or_create(
        slug=slug,
        defaults={"name": truncate(name, NAME_MAX_LENGTH)},
    )
    if created:
        logger.debug("Created plugin tag %s", slug)
    return tag


def get_plugin_by_slug(slug: str) -> Plugin:
    """
    Get a Plugin by its slug. Raises Plugin.DoesNotExist if there isn't one.
    """
    return Plugin.objects.get(slug=slug)


def get_plugins(tag_slug: str | None = None) -> QuerySet[Plugin]:
    """
    Get all Plugins ordered by slug, optionally only those with a given tag.
    """
    qs = Plugin.objects.all()
    if tag_slug is not None:
        qs = qs.filter(tags__slug=tag_slug)
    return qs.order_by("slug")


def _get_sync_metadata(sync_plugin: SyncPlugin) -> Mapping[str, Any]:
    metadata = sync_plugin.metadata
    if not metadata or not isinstance(metadata, Mapping):
        raise MissingMetadataError(sync_plugin)
    return metadata


def _added(metadata: PluginMetadata) -> datetime:
    # A missing or unreadable "added" date means "now", as upstream parsing did.
    return metadata.added or timezone.now()


def _replace_tags(plugin: Plugin, tags: Mapping[str, str]) -> None:
    plugin.tags.clear()
    plugin.tags.add(*[
        get_or_create_plugin_tag(slug, name) for slug, name in tags.items()
    ])
    logger.debug("Set tags of plugin %s to %s", plugin.slug, sorted(tags))
