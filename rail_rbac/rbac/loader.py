"""
Role link loader for settings and roles.json files.

This module registers link declarations with a role manager, either from a
list (typically ``role_manager_settings.links``) or from roles.json files
found in installed Django apps.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Optional

from django.apps import apps

from .base import RoleManager
from .exceptions import InvalidRoleNameError
from .types import RoleLink

logger = logging.getLogger(__name__)


def load_role_links(
    manager: RoleManager,
    entries: Iterable[object],
    source: str = "settings",
) -> int:
    """
    Add every valid link declaration in ``entries`` to ``manager``.

    Entries are ``{"user": ..., "role": ..., "domain": ...}`` objects or
    ``(user, role[, domain])`` sequences. Malformed entries are skipped.

    Returns:
        Number of links added.
    """
    added = 0
    for entry in entries or []:
        link = _build_role_link(entry, source)
        if link is None:
            continue
        try:
            manager.add_link(link.user, link.role, link.domain)
        except InvalidRoleNameError as exc:
            logger.warning("Skipping role link from %s: %s", source, exc)
            continue
        added += 1
    return added


def load_app_role_links(
    manager: RoleManager,
    app_configs: Optional[Iterable[object]] = None,
) -> int:
    """
    Load roles.json files from installed apps and register their links.

    Args:
        manager: Role manager receiving the links.
        app_configs: Optional iterable of Django app configs. Defaults to all
            installed apps.

    Returns:
        Number of links registered from role files.
    """
    if app_configs is None:
        app_configs = apps.get_app_configs()

    registered_count = 0
    for app_config in app_configs:
        app_path = getattr(app_config, "path", None)
        if not app_path:
            continue
        roles_path = Path(app_path) / "roles.json"
        if not roles_path.exists():
            continue
        try:
            content = roles_path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            logger.warning("Could not read roles file %s: %s", roles_path, exc)
            continue
        if not content:
            logger.debug("Skipping empty roles file %s", roles_path)
            continue
        try:
            payload = json.loads(content)
        except json.JSONDecodeError as exc:
            logger.warning("Invalid JSON in roles file %s: %s", roles_path, exc)
            continue

        links = _extract_links(payload, roles_path)
        registered_count += load_role_links(manager, links, source=str(roles_path))

    return registered_count


def _extract_links(payload: object, roles_path: Path) -> list[object]:
    if isinstance(payload, dict):
        links = payload.get("links", [])
    else:
        links = payload
    if links is None:
        return []
    if not isinstance(links, list):
        logger.warning("Roles file %s must define a list of links", roles_path)
        return []
    return links


def _build_role_link(entry: object, source: str) -> Optional[RoleLink]:
    if isinstance(entry, RoleLink):
        return entry
    if isinstance(entry, dict):
        user = entry.get("user")
        role = entry.get("role")
        domain = entry.get("domain")
    elif isinstance(entry, (list, tuple)) and len(entry) in (2, 3):
        user, role = entry[0], entry[1]
        domain = entry[2] if len(entry) == 3 else None
    else:
        logger.warning("Role link entry in %s must be an object or a pair", source)
        return None

    if not user or not isinstance(user, str) or not role or not isinstance(role, str):
        logger.warning("Role link entry missing user or role in %s", source)
        return None
    if domain is not None and not isinstance(domain, str):
        logger.warning("Invalid domain for role link %s -> %s in %s", user, role, source)
        return None

    return RoleLink(user=user, role=role, domain=domain or None)


__all__ = ["load_app_role_links", "load_role_links"]
