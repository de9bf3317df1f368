"""
Errors raised while building Plugins from upstream metadata.

Both are ValidationErrors: they describe bad input, not a broken database.
"""
from __future__ import annotations

import typing

from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

if typing.TYPE_CHECKING:
    from ..sync.models import SyncPlugin


class PluginMetadataError(ValidationError):
    """
    Base exception for metadata that can't be applied to a Plugin.
    """


class MissingMetadataError(PluginMetadataError):
    """
    The SyncPlugin has no metadata payload to build a Plugin from.
    """

    def __init__(self, sync_plugin: SyncPlugin):
        self.sync_plugin = sync_plugin
        super().__init__(
            _("SyncPlugin %(slug)s has no metadata"),
            code="missing_metadata",
            params={"slug": sync_plugin.slug},
        )


class SlugMismatchError(PluginMetadataError):
    """
    The payload describes a different plugin than the one being updated.
    """

    def __init__(self, expected: str, actual: typing.Any):
        self.expected = expected
        self.actual = actual
        super().__init__(
            _("Metadata slug does not match [%(actual)s != %(expected)s]"),
            code="slug_mismatch",
            params={"actual": actual, "expected": expected},
        )
