"""
Role hierarchy package for Rail RBAC.

This package provides the in-memory role graph consumed by a policy engine:
- Role links with optional domain (tenant) scoping
- Bounded-depth inheritance checks
- Direct role and reverse (user) lookups
- Pattern roles through name-matching predicates

Quick Start:
    >>> from rail_rbac.rbac import DefaultRoleManager
    >>>
    >>> manager = DefaultRoleManager(max_hierarchy_level=3)
    >>> manager.add_link("alice", "editor", "tenant1")
    >>> manager.add_link("editor", "viewer", "tenant1")
    >>> manager.has_link("alice", "viewer", "tenant1")
    True

Exports:
    - RoleManager: Abstract contract for role managers
    - DefaultRoleManager: In-memory implementation
    - Role: Node of the role graph
    - RoleLink: Link declaration used by the loaders
    - RoleNotFoundError / InvalidRoleNameError: Errors raised on writes
    - get_role_manager: Process-wide manager built from settings
"""

from .base import RoleManager
from .exceptions import InvalidRoleNameError, RoleManagerError, RoleNotFoundError
from .loader import load_app_role_links, load_role_links
from .manager import DefaultRoleManager, get_role_manager, reset_role_manager
from .matching import (
    BUILTIN_MATCHING_FUNCTIONS,
    glob_match,
    key_match,
    key_match2,
    regex_match,
    resolve_matching_function,
)
from .role import Role
from .settings import RoleManagerSettings, get_role_manager_settings
from .types import MatchingFunction, RoleLink

__all__ = [
    # Types
    "MatchingFunction",
    "RoleLink",
    "Role",
    # Managers
    "RoleManager",
    "DefaultRoleManager",
    "get_role_manager",
    "reset_role_manager",
    # Errors
    "RoleManagerError",
    "RoleNotFoundError",
    "InvalidRoleNameError",
    # Matching
    "BUILTIN_MATCHING_FUNCTIONS",
    "key_match",
    "key_match2",
    "regex_match",
    "glob_match",
    "resolve_matching_function",
    # Settings
    "RoleManagerSettings",
    "get_role_manager_settings",
    # Loaders
    "load_role_links",
    "load_app_role_links",
]
