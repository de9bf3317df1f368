"""
This is the public API for the plugin directory.

Code outside of ``plugin_directory.apps.*`` should import from here. It
re-exports the public functions from the api.py modules of the apps.
"""
# These wildcard imports are okay because these api modules declare __all__.
# pylint: disable=wildcard-import
from ..apps.plugins.api import *
