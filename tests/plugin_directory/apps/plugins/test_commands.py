"""
Tests for the sync_plugins management command.
"""
from io import StringIO

from django.core.management import CommandError, call_command
from django.test import TestCase

from plugin_directory.api import plugins as api
from plugin_directory.api.plugins_models import Plugin

from .utils import make_payload, make_sync_plugin


class SyncPluginsCommandTestCase(TestCase):
    """
    Test ``manage.py sync_plugins``.
    """

    def call(self, *args, **kwargs) -> str:
        out = StringIO()
        call_command("sync_plugins", *args, stdout=out, **kwargs)
        return out.getvalue()

    def test_creates_missing_plugins(self):
        make_sync_plugin("hello-dolly")
        make_sync_plugin("akismet", metadata=make_payload("akismet", name="Akismet"))
        make_sync_plugin("closed-plugin", metadata={})

        output = self.call()

        assert "2 created, 0 refreshed, 1 without metadata, 0 failed" in output
        assert sorted(Plugin.objects.values_list("slug", flat=True)) == ["akismet", "hello-dolly"]

    def test_only_named_slugs(self):
        make_sync_plugin("hello-dolly")
        make_sync_plugin("akismet", metadata=make_payload("akismet"))

        self.call("akismet")

        assert list(Plugin.objects.values_list("slug", flat=True)) == ["akismet"]

    def test_unknown_slug(self):
        make_sync_plugin("hello-dolly")
        with self.assertRaises(CommandError):
            self.call("hello-dolly", "nope")
        assert not Plugin.objects.exists()

    def test_refresh(self):
        sync_plugin = make_sync_plugin("hello-dolly")
        self.call()

        sync_plugin.metadata = make_payload(name="Hello Again")
        sync_plugin.save()

        output = self.call()
        assert "0 created, 0 refreshed" in output
        assert api.get_plugin_by_slug("hello-dolly").name == "Hello Dolly"

        output = self.call("--refresh")
        assert "0 created, 1 refreshed" in output
        assert api.get_plugin_by_slug("hello-dolly").name == "Hello Again"

    def test_bad_record_fails_command_but_not_others(self):
        make_sync_plugin("hello-dolly", metadata=make_payload("not-hello-dolly"))
        make_sync_plugin("akismet", metadata=make_payload("akismet"))

        with self.assertLogs("plugin_directory.apps.plugins.management.commands.sync_plugins", "WARNING"):
            with self.assertRaises(CommandError) as ctx:
                self.call()

        assert "1 created, 0 refreshed, 0 without metadata, 1 failed" in str(ctx.exception)
        assert list(Plugin.objects.values_list("slug", flat=True)) == ["akismet"]
