"""
Signals sent by the role manager after the role graph changed.

Receivers get ``sender`` (the manager class), ``manager`` and, for link
signals, the user-supplied ``name1``, ``name2`` and ``domain``.
"""

from django.dispatch import Signal

role_link_added = Signal()
role_link_deleted = Signal()
roles_cleared = Signal()

__all__ = ["role_link_added", "role_link_deleted", "roles_cleared"]
