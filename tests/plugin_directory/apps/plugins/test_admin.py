"""
Tests for the Plugin admin pages.
"""
from django.contrib import admin
from django.test import TestCase

from plugin_directory.api import plugins as api
from plugin_directory.api.plugins_models import Plugin

from .utils import make_sync_plugin


class PluginAdminTestCase(TestCase):
    """
    The Plugin admin is read-only and shows saved tags.
    """

    def setUp(self):
        super().setUp()
        self.plugin = api.create_plugin(make_sync_plugin("hello-dolly"))
        self.model_admin = admin.site._registry[Plugin]  # pylint: disable=protected-access

    def test_tag_list(self):
        assert self.model_admin.tag_list(self.plugin) == "lyrics, nostalgia"

    def test_everything_read_only(self):
        readonly = self.model_admin.get_readonly_fields(request=None, obj=self.plugin)
        for name in ("slug", "sync", "name", "version", "added", "tag_list"):
            assert name in readonly
        assert "tags" not in readonly
