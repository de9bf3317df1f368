"""
Models that callers may read from or make foreign keys to.

Don't create or modify these directly; use the functions in
``plugin_directory.api.plugins`` so that tags stay consistent.
"""
# These wildcard imports are okay because these modules declare __all__.
# pylint: disable=wildcard-import
from ..apps.plugins.models import *
from ..apps.sync.models import *
