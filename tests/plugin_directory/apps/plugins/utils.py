"""
Helpers for building upstream payloads in tests.
"""
from __future__ import annotations

from typing import Any

from plugin_directory.apps.sync.models import SyncPlugin


def make_payload(slug: str = "hello-dolly", **overrides: Any) -> dict[str, Any]:
    """
    A plugin information payload shaped like the upstream API's.
    """
    payload: dict[str, Any] = {
        "slug": slug,
        "name": "Hello Dolly",
        "version": "1.7.2",
        "author": '<a href="http://ma.tt/">Matt Mullenweg</a>',
        "author_profile": "https://profiles.wordpress.org/matt/",
        "requires": "4.6",
        "tested": "6.6.2",
        "requires_php": False,
        "requires_plugins": [],
        "rating": 56,
        "ratings": {"5": 130, "4": 12, "3": 10, "2": 8, "1": 109},
        "num_ratings": 269,
        "support_threads": 5,
        "support_threads_resolved": 1,
        "active_installs": 300000,
        "downloaded": 4087442,
        "last_updated": "2024-06-14 8:43pm GMT",
        "added": "2008-05-20",
        "homepage": "http://wordpress.org/plugins/hello-dolly/",
        "short_description": "This is not just a plugin, it symbolizes the hope and enthusiasm of an entire generation.",
        "description": "<p>This is not just a plugin, it symbolizes the hope and enthusiasm...</p>",
        "sections": {
            "description": "<p>This is not just a plugin...</p>",
            "reviews": "",
        },
        "download_link": "https://downloads.wordpress.org/plugin/hello-dolly.1.7.2.zip",
        "screenshots": [],
        "versions": {
            "1.7.2": "https://downloads.wordpress.org/plugin/hello-dolly.1.7.2.zip",
            "trunk": "https://downloads.wordpress.org/plugin/hello-dolly.zip",
        },
        "banners": {
            "low": "https://ps.w.org/hello-dolly/assets/banner-772x250.jpg",
            "high": "https://ps.w.org/hello-dolly/assets/banner-1544x500.jpg",
        },
        "icons": {"1x": "https://ps.w.org/hello-dolly/assets/icon-128x128.jpg"},
        "contributors": {
            "matt": {
                "profile": "https://profiles.wordpress.org/matt/",
                "display_name": "Matt Mullenweg",
            },
        },
        "donate_link": "",
        "business_model": False,
        "repository_url": "",
        "commercial_support_url": "",
        "support_url": "https://wordpress.org/support/plugin/hello-dolly/",
        "preview_link": "",
        "upgrade_notice": {},
        "tags": {"nostalgia": "Nostalgia", "lyrics": "Lyrics"},
    }
    payload.update(overrides)
    return payload


def make_sync_plugin(slug: str = "hello-dolly", metadata: Any = None, **kwargs: Any) -> SyncPlugin:
    """
    Create a SyncPlugin row; pass ``metadata={}`` for one with no metadata.
    """
    if metadata is None:
        metadata = make_payload(slug)
    return SyncPlugin.objects.create(
        slug=slug,
        name=kwargs.pop("name", "Hello Dolly"),
        current_version=kwargs.pop("current_version", "1.7.2"),
        metadata=metadata,
        **kwargs,
    )
