"""
Typed view of an upstream plugin metadata payload.

The upstream payload is a bag of loosely typed keys. ``PluginMetadata`` is
the one place where it gets checked: every field is coerced to its expected
type or replaced by its default, so the rest of the app never has to look at
the raw dict.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from attrs import define

from plugin_directory.lib.fields import SLUG_MAX_LENGTH
from plugin_directory.lib.normalize import coerce_int, coerce_str, coerce_structure, parse_timestamp, truncate

# Strings that default to "" when missing.
STRING_FIELDS = (
    "name",
    "short_description",
    "description",
    "version",
    "author",
    "requires",
    "tested",
    "download_link",
)

# Strings that default to None when missing.
OPTIONAL_STRING_FIELDS = (
    "requires_php",
    "author_profile",
    "homepage",
    "donate_link",
    "business_model",
    "commercial_support_url",
    "support_url",
    "preview_link",
    "repository_url",
)

# Signed column ranges shared by MySQL, Postgres and SQLite.
INT32_RANGE = (-(2 ** 31), 2 ** 31 - 1)
INT64_RANGE = (-(2 ** 63), 2 ** 63 - 1)

# Integers that default to 0 when missing, with the range of their column
# (IntegerField or BigIntegerField). Anything outside the range counts as missing.
INTEGER_FIELDS = {
    "rating": INT32_RANGE,
    "num_ratings": INT32_RANGE,
    "support_threads": INT32_RANGE,
    "support_threads_resolved": INT32_RANGE,
    "active_installs": INT64_RANGE,
    "downloaded": INT64_RANGE,
}

# Nested dicts/lists stored as JSON, None when missing or not a dict/list.
STRUCTURED_FIELDS = (
    "ratings",
    "banners",
    "contributors",
    "icons",
    "source",
    "requires_plugins",
    "compatibility",
    "screenshots",
    "sections",
    "versions",
    "upgrade_notice",
)


@define(frozen=True)
class PluginMetadata:
    """
    One upstream payload, with every field at its expected type.

    ``tags`` is None when the payload had no tag mapping at all, which is
    different from an empty mapping: only the latter clears a plugin's tags.
    """
    slug: str | None

    name: str = ""
    short_description: str = ""
    description: str = ""
    version: str = ""
    author: str = ""
    requires: str = ""
    tested: str = ""
    download_link: str = ""

    requires_php: str | None = None
    author_profile: str | None = None
    homepage: str | None = None
    donate_link: str | None = None
    business_model: str | None = None
    commercial_support_url: str | None = None
    support_url: str | None = None
    preview_link: str | None = None
    repository_url: str | None = None

    added: datetime | None = None
    last_updated: datetime | None = None

    rating: int = 0
    num_ratings: int = 0
    support_threads: int = 0
    support_threads_resolved: int = 0
    active_installs: int = 0
    downloaded: int = 0

    ratings: dict | list | None = None
    banners: dict | list | None = None
    contributors: dict | list | None = None
    icons: dict | list | None = None
    source: dict | list | None = None
    requires_plugins: dict | list | None = None
    compatibility: dict | list | None = None
    screenshots: dict | list | None = None
    sections: dict | list | None = None
    versions: dict | list | None = None
    upgrade_notice: dict | list | None = None

    tags: dict[str, str] | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> PluginMetadata:
        """
        Build a PluginMetadata from a raw payload. Never raises for bad values.
        """
        values: dict[str, Any] = {"slug": coerce_str(payload.get("slug"), default=None)}
        values.update({name: coerce_str(payload.get(name), default="") for name in STRING_FIELDS})
        values.update({name: coerce_str(payload.get(name), default=None) for name in OPTIONAL_STRING_FIELDS})
        values.update({
            name: coerce_int(payload.get(name), min_value=low, max_value=high)
            for name, (low, high) in INTEGER_FIELDS.items()
        })
        values.update({name: coerce_structure(payload.get(name)) for name in STRUCTURED_FIELDS})
        values["added"] = parse_timestamp(payload.get("added"))
        values["last_updated"] = parse_timestamp(payload.get("last_updated"))
        values["tags"] = _coerce_tags(payload.get("tags"))
        return cls(**values)


def _coerce_tags(value: Any) -> dict[str, str] | None:
    """
    Return a slug -> name mapping, or None if ``value`` isn't a mapping.

    Upstream sends ``[]`` rather than ``{}`` for a plugin without tags (empty
    PHP arrays serialize that way), so an empty list is an empty mapping. Any
    other non-mapping is ignored. Entries with an empty slug are dropped; a
    missing or empty name falls back to the slug.

    Slugs are cut to the width of the tag slug column. Two slugs that only
    differ past that point are the same tag, and the first name wins.
    """
    if isinstance(value, list) and not value:
        return {}
    if not isinstance(value, Mapping):
        return None
    tags: dict[str, str] = {}
    for slug, name in value.items():
        slug = truncate(coerce_str(slug, default=""), SLUG_MAX_LENGTH)
        if not slug:
            continue
        tags.setdefault(slug, coerce_str(name, default=None) or slug)
    return tags
