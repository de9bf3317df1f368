"""
Collation settings attached to specific fields on a per-database-vendor basis.

Used by the ``fields`` module so that slug columns compare the same way under
SQLite (tests) and MySQL (production).
"""
from django.db import models


class MultiCollationMixin:
    """
    Mixin to enable multiple, database-vendor-specific collations.

    Mix this into subclasses of CharField and TextField.
    """

    def __init__(self, *args, db_collations=None, db_collation=None, **kwargs):  # pylint: disable=unused-argument
        """
        Init like any field but take ``db_collations`` instead of ``db_collation``.

        The ``db_collations`` param is a dict of vendor names to collations::

          {
            'mysql': 'utf8mb4_bin',
            'sqlite': 'BINARY'
          }
        """
        super().__init__(*args, **kwargs)
        self.db_collations = db_collations or {}

    def db_parameters(self, connection):
        """
        Add the collation that maps to ``connection.vendor``, if we have one.
        """
        db_params = models.Field.db_parameters(self, connection)
        if connection.vendor in self.db_collations:
            db_params["collation"] = self.db_collations[connection.vendor]
        return db_params

    def deconstruct(self):
        """
        Serialize the field for migrations, including ``db_collations``.
        """
        name, path, args, kwargs = super().deconstruct()
        if self.db_collations:
            kwargs["db_collations"] = self.db_collations
        return name, path, args, kwargs
