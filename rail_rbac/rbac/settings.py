"""
Role manager settings.
"""

from dataclasses import dataclass
from typing import Any

from ..config_proxy import get_setting
from ..defaults import get_default

_SECTION = "role_manager_settings"


@dataclass(frozen=True)
class RoleManagerSettings:
    max_hierarchy_level: int
    domain_separator: str
    reject_separator_in_names: bool
    matching_function: Any
    links: list
    load_app_role_files: bool
    log_link_changes: bool


def _coerce_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off", ""}:
            return False
        return default
    return bool(value)


def _coerce_str(value: Any, default: str) -> str:
    if value is None:
        return default
    value = str(value).strip()
    return value or default


def _coerce_depth(value: Any, default: int) -> int:
    if value is None:
        return default
    try:
        depth = int(value)
    except (TypeError, ValueError):
        return default
    if depth < 0:
        return default
    return depth


def _setting(key: str) -> Any:
    return get_setting(f"{_SECTION}.{key}", get_default(_SECTION, key))


def get_role_manager_settings() -> RoleManagerSettings:
    max_hierarchy_level = _coerce_depth(
        _setting("max_hierarchy_level"),
        get_default(_SECTION, "max_hierarchy_level"),
    )
    domain_separator = _coerce_str(
        _setting("domain_separator"),
        get_default(_SECTION, "domain_separator"),
    )
    reject_separator_in_names = _coerce_bool(
        _setting("reject_separator_in_names"),
        True,
    )
    links = _setting("links")
    if not isinstance(links, (list, tuple)):
        links = []

    return RoleManagerSettings(
        max_hierarchy_level=max_hierarchy_level,
        domain_separator=domain_separator,
        reject_separator_in_names=reject_separator_in_names,
        matching_function=_setting("matching_function"),
        links=list(links),
        load_app_role_files=_coerce_bool(_setting("load_app_role_files"), False),
        log_link_changes=_coerce_bool(_setting("log_link_changes"), False),
    )


__all__ = ["RoleManagerSettings", "get_role_manager_settings"]
