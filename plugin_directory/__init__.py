"""
Plugin Directory: normalized WordPress.org-style plugin metadata for Django.
"""

__version__ = "0.1.0"
