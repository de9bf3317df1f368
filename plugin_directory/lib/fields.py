"""
Convenience functions to make consistent field conventions easier.

We're using the MySQL-friendly convention of BigInt ID as a primary key plus a
separate UUID column. Slugs coming from the upstream directory are compared
byte-for-byte, so they get case-sensitive collations on every backend (MySQL
is case-insensitive by default, SQLite and Postgres are case-sensitive).
"""
from __future__ import annotations

import uuid

from django.db import models

from .collations import MultiCollationMixin

SLUG_MAX_LENGTH = 255


def case_sensitive_char_field(**kwargs) -> MultiCollationCharField:
    """
    Return a case-sensitive ``MultiCollationCharField``.

    Unique indexes on this field are case sensitive, so "Akismet" and
    "akismet" are distinct values.

    You may override any argument that you would normally pass into
    ``MultiCollationCharField`` (which is itself a subclass of ``CharField``).
    """
    final_kwargs = {
        "null": False,
        "db_collations": {
            "sqlite": "BINARY",
            "mysql": "utf8mb4_bin",
        },
    }
    final_kwargs.update(kwargs)

    return MultiCollationCharField(**final_kwargs)


def slug_field(**kwargs) -> MultiCollationCharField:
    """
    Externally assigned slug, e.g. "akismet" or "contact-form-7".

    Slugs come from the upstream plugin directory and are never generated
    locally.
    """
    return case_sensitive_char_field(max_length=SLUG_MAX_LENGTH, blank=False, **kwargs)


def immutable_uuid_field() -> models.UUIDField:
    """
    Stable, randomly-generated UUIDs.

    These can be used as stable identifiers by other services that do not share
    a database, but you should prefer to make a ForeignKey to the primary (id)
    key of the model if you're in the same process.
    """
    return models.UUIDField(
        default=uuid.uuid4,
        blank=False,
        null=False,
        editable=False,
        unique=True,
        verbose_name="UUID",  # Just makes the Django admin output properly capitalized
    )


def url_field(**kwargs) -> models.CharField:
    """
    Optional URL-ish string of up to 1024 characters.

    This is deliberately a CharField and not a URLField: upstream data is not
    validated, and we store whatever we were given (truncated to fit).
    """
    final_kwargs = {
        "max_length": 1024,
        "null": True,
        "blank": True,
        "default": None,
    }
    final_kwargs.update(kwargs)
    return models.CharField(**final_kwargs)


class MultiCollationCharField(MultiCollationMixin, models.CharField):
    """
    CharField subclass with per-database-vendor collation settings.

    Django's CharField already supports specifying the database collation, but
    that only works with a single value. So there would be no way to say, "Use
    utf8mb4_bin for MySQL, and BINARY if we're running SQLite."
    """
