"""
Default configuration for the rail-rbac library.

The goal of this module is to expose a single source of truth for every
setting that the library actually consumes. Each section mirrors a concrete
settings block read by the runtime.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "rail-rbac"


# --------------------------------------------------------------------------- #
# Library-wide defaults (grouped by feature area)
# --------------------------------------------------------------------------- #
LIBRARY_DEFAULTS: dict[str, Any] = {
    "role_manager_settings": {
        # Maximum number of edge hops followed by has_link.
        "max_hierarchy_level": 10,
        "domain_separator": "::",
        "reject_separator_in_names": True,
        # Built-in predicate name or dotted import path.
        "matching_function": None,
        "links": [],
        "load_app_role_files": False,
        "log_link_changes": False,
    },
}


def get_default(section: str, key: str, default: Any = None) -> Any:
    """Return a library default value for ``section.key``."""
    return LIBRARY_DEFAULTS.get(section, {}).get(key, default)


__all__ = ["LIBRARY_DEFAULTS", "LIBRARY_NAME", "LIBRARY_VERSION", "get_default"]
