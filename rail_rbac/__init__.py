"""
Rail RBAC - in-memory role hierarchy for Django authorization engines.
"""

from .defaults import LIBRARY_VERSION

__version__ = LIBRARY_VERSION
