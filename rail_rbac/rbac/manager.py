"""
DefaultRoleManager - in-memory role hierarchy.

This module provides the DefaultRoleManager class that stores the role graph
used by the policy engine to answer "does X inherit Y?" queries, with optional
domain (tenant) scoping and pattern roles through a matching predicate.
"""

import logging
import threading
from typing import Iterable, Optional

from .base import RoleManager
from .exceptions import InvalidRoleNameError, RoleNotFoundError
from .matching import resolve_matching_function
from .role import Role
from .settings import get_role_manager_settings
from .signals import role_link_added, role_link_deleted, roles_cleared
from .types import MatchingFunction

logger = logging.getLogger(__name__)


class DefaultRoleManager(RoleManager):
    """
    Role graph indexed by name.

    Roles are created on demand the first time a name is written or
    materialized by a query, and are only ever dropped by ``clear``.
    Domain-scoped roles are stored as ``"<domain><separator><name>"``.
    """

    def __init__(
        self,
        max_hierarchy_level: Optional[int] = None,
        matching_fn: Optional[MatchingFunction] = None,
        *,
        domain_separator: Optional[str] = None,
        reject_separator_in_names: Optional[bool] = None,
    ):
        """
        Initialize the manager, falling back to ``role_manager_settings`` for
        every argument left as ``None``.
        """
        config = get_role_manager_settings()

        if max_hierarchy_level is None:
            max_hierarchy_level = config.max_hierarchy_level
        if max_hierarchy_level < 0:
            raise ValueError("max_hierarchy_level must be a non-negative integer")

        self._all_roles: dict[str, Role] = {}
        self._lock = threading.RLock()
        self.max_hierarchy_level = int(max_hierarchy_level)
        self.domain_separator = domain_separator or config.domain_separator
        self.reject_separator_in_names = (
            config.reject_separator_in_names
            if reject_separator_in_names is None
            else bool(reject_separator_in_names)
        )
        self._link_log_level = logging.INFO if config.log_link_changes else logging.DEBUG
        self._matching_fn = (
            matching_fn
            if matching_fn is not None
            else resolve_matching_function(config.matching_function)
        )

    def __len__(self) -> int:
        return len(self._all_roles)

    def __contains__(self, name: object) -> bool:
        return name in self._all_roles

    @property
    def matching_fn(self) -> Optional[MatchingFunction]:
        return self._matching_fn

    def add_matching_fn(self, matching_fn: MatchingFunction) -> None:
        """Install the matching predicate. Only affects later role creations."""
        with self._lock:
            self._matching_fn = matching_fn
        logger.debug(
            "Matching function set to %s",
            getattr(matching_fn, "__name__", repr(matching_fn)),
        )

    set_match_fn = add_matching_fn

    # --- Name handling ---

    def _key(self, name: str, domain: Optional[str]) -> str:
        if domain:
            return f"{domain}{self.domain_separator}{name}"
        return name

    def _strip_domain(self, names: Iterable[str], domain: Optional[str]) -> list[str]:
        if not domain:
            return list(names)
        prefix = f"{domain}{self.domain_separator}"
        return [name[len(prefix):] if name.startswith(prefix) else name for name in names]

    def _validate_name(self, value: str, label: str) -> None:
        if not isinstance(value, str) or not value:
            raise InvalidRoleNameError(f"Role {label} must be a non-empty string", value)
        if self.reject_separator_in_names and self.domain_separator in value:
            raise InvalidRoleNameError(
                f"Role {label} '{value}' must not contain '{self.domain_separator}'",
                value,
            )

    def _validate_link(self, name1: str, name2: str, domain: Optional[str]) -> None:
        self._validate_name(name1, "name")
        self._validate_name(name2, "name")
        if domain:
            self._validate_name(domain, "domain")

    # --- Role index ---

    def _create_role(self, name: str) -> Role:
        """
        Return the role called ``name``, creating it if needed.

        With a matching function, the role also gains an edge to every other
        known role whose name matches it. This runs on every call so roles
        added since the last materialization are picked up.
        """
        with self._lock:
            role = self._all_roles.get(name)
            if role is None:
                role = Role(name, self.domain_separator)
                self._all_roles[name] = role

            if self._matching_fn is not None:
                for existing_name, existing in list(self._all_roles.items()):
                    if existing_name != name and self._matching_fn(name, existing_name):
                        role.add_role(existing)

            return role

    def _has_role(self, name: str) -> bool:
        with self._lock:
            if self._matching_fn is not None:
                return any(self._matching_fn(name, role) for role in self._all_roles)
            return name in self._all_roles

    def has_role(self, name: str, domain: Optional[str] = None) -> bool:
        """Whether ``name`` is known, honoring the matching function."""
        return self._has_role(self._key(name, domain))

    # --- Links ---

    def add_link(self, name1: str, name2: str, domain: Optional[str] = None) -> None:
        self._validate_link(name1, name2, domain)
        key1, key2 = self._key(name1, domain), self._key(name2, domain)

        with self._lock:
            role1 = self._create_role(key1)
            role2 = self._create_role(key2)
            role1.add_role(role2)

        logger.log(self._link_log_level, "Role link added: %s -> %s", key1, key2)
        role_link_added.send(
            sender=self.__class__, manager=self, name1=name1, name2=name2, domain=domain
        )

    def delete_link(
        self, name1: str, name2: str, domain: Optional[str] = None
    ) -> None:
        """
        Remove the direct link ``name1 -> name2``.

        Raises:
            RoleNotFoundError: if either role is unknown.
        """
        self._validate_link(name1, name2, domain)
        key1, key2 = self._key(name1, domain), self._key(name2, domain)

        with self._lock:
            if not self._has_role(key1) or not self._has_role(key2):
                raise RoleNotFoundError(key1, key2)
            role1 = self._create_role(key1)
            role2 = self._create_role(key2)
            role1.delete_role(role2)

        logger.log(self._link_log_level, "Role link deleted: %s -> %s", key1, key2)
        role_link_deleted.send(
            sender=self.__class__, manager=self, name1=name1, name2=name2, domain=domain
        )

    def _lookup(self, key: str, materialize: bool) -> Optional[Role]:
        with self._lock:
            if not self._has_role(key):
                return None
            if materialize:
                return self._create_role(key)
            return self._all_roles.get(key)

    def has_link(
        self,
        name1: str,
        name2: str,
        domain: Optional[str] = None,
        *,
        materialize: bool = True,
    ) -> bool:
        """
        Whether ``name1`` reaches ``name2`` in at most ``max_hierarchy_level`` hops.

        ``materialize=False`` never creates roles nor runs matcher expansion.
        """
        if name1 == name2:
            return True

        key1, key2 = self._key(name1, domain), self._key(name2, domain)
        if not self._has_role(key2):
            return False
        role = self._lookup(key1, materialize)
        if role is None:
            return False
        return role.has_role(key2, self.max_hierarchy_level)

    def get_roles(
        self,
        name: str,
        domain: Optional[str] = None,
        *,
        materialize: bool = True,
    ) -> list[str]:
        role = self._lookup(self._key(name, domain), materialize)
        if role is None:
            return []
        return self._strip_domain(role.get_roles(), domain)

    def get_users(self, name: str, domain: Optional[str] = None) -> list[str]:
        """
        Names of roles with a direct link to ``name``.

        Under a domain only roles of that domain are returned, without prefix.
        """
        key = self._key(name, domain)
        with self._lock:
            if not self._has_role(key):
                return []
            roles = list(self._all_roles.values())

        users = [role for role in roles if role.has_direct_role(key)]
        if domain:
            return [role.local_name for role in users if role.domain == domain]
        return [role.name for role in users]

    def clear(self) -> None:
        with self._lock:
            self._all_roles.clear()
        logger.debug("Role manager cleared")
        roles_cleared.send(sender=self.__class__, manager=self)

    def print_roles(self) -> None:
        """Log every role with its direct roles."""
        with self._lock:
            roles = sorted(self._all_roles.values(), key=lambda role: role.name)
        for role in roles:
            logger.info("%s < %s", role.name, ", ".join(role.get_roles()))


_default_role_manager: Optional[DefaultRoleManager] = None
_default_role_manager_lock = threading.Lock()


def get_role_manager() -> DefaultRoleManager:
    """Return the process-wide role manager, built from settings on first use."""
    global _default_role_manager
    with _default_role_manager_lock:
        if _default_role_manager is None:
            _default_role_manager = DefaultRoleManager()
        return _default_role_manager


def reset_role_manager() -> None:
    """Forget the process-wide role manager so the next call rebuilds it."""
    global _default_role_manager
    with _default_role_manager_lock:
        _default_role_manager = None


__all__ = ["DefaultRoleManager", "get_role_manager", "reset_role_manager"]
