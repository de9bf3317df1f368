"""
Django management command to build Plugins from their SyncPlugin records.
"""
import logging
import time

from django.core.management import CommandError
from django.core.management.base import BaseCommand

from plugin_directory.apps.plugins.api import get_or_create_plugin, refresh_plugin_from_sync
from plugin_directory.apps.plugins.exceptions import PluginMetadataError
from plugin_directory.apps.plugins.models import Plugin
from plugin_directory.apps.sync.models import SyncPlugin

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """
    Create a Plugin for every SyncPlugin that has metadata (or just the named ones).
    """
    help = 'Create (and optionally refresh) Plugins from synced upstream metadata.'

    def add_arguments(self, parser):
        parser.add_argument('slugs', nargs='*', type=str, help='Only sync these plugin slugs')
        parser.add_argument(
            '--refresh',
            action='store_true',
            help='Re-apply metadata to plugins that already exist.',
        )

    def handle(self, *args, **options):
        slugs = options['slugs']
        refresh = options['refresh']

        sync_plugins = SyncPlugin.objects.order_by('slug')
        if slugs:
            sync_plugins = sync_plugins.filter(slug__in=slugs)
            missing = set(slugs) - set(sync_plugins.values_list('slug', flat=True))
            if missing:
                raise CommandError(f"Unknown plugin slugs: {', '.join(sorted(missing))}")

        start_time = time.time()
        created = refreshed = skipped = failed = 0
        for sync_plugin in sync_plugins:
            if not sync_plugin.has_metadata:
                skipped += 1
                continue
            try:
                existed = Plugin.objects.filter(sync_id=sync_plugin.pk).exists()
                plugin = get_or_create_plugin(sync_plugin)
                if not existed:
                    created += 1
                elif refresh:
                    refresh_plugin_from_sync(plugin)
                    refreshed += 1
            except PluginMetadataError as exc:
                failed += 1
                logger.warning("Skipping sync record %s: %s", sync_plugin.slug, "; ".join(exc.messages))
            except Exception:  # pylint: disable=broad-except
                failed += 1
                logger.exception("Failed to sync plugin %s", sync_plugin.slug)

        elapsed = time.time() - start_time
        message = (
            f'{created} created, {refreshed} refreshed, {skipped} without metadata, '
            f'{failed} failed ({elapsed:.2f} seconds)'
        )
        if failed:
            raise CommandError(message)
        self.stdout.write(self.style.SUCCESS(message))
