"""
Configuration management for Rail RBAC.

This module provides a settings proxy that handles hierarchical configuration
resolution from runtime overrides, Django settings and library defaults.
"""

from typing import Any, Optional

from django.conf import settings

from .defaults import LIBRARY_DEFAULTS

DJANGO_SETTINGS_NAME = "RAIL_RBAC"

# Runtime storage for settings overrides (avoids modifying Django settings)
_RUNTIME_SETTINGS: dict[str, Any] = {}


class SettingsProxy:
    """
    Proxy for accessing Rail RBAC settings with hierarchical resolution.

    Settings are resolved in the following order:
    1. Runtime overrides (via configure_runtime_settings)
    2. Global Django settings (RAIL_RBAC)
    3. Library defaults (LIBRARY_DEFAULTS)
    """

    def __init__(self):
        self._cache: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value with hierarchical resolution and caching.

        Args:
            key: Setting key to retrieve (dot notation)
            default: Default value if setting is not found

        Returns:
            The setting value from the highest priority source
        """
        if key in self._cache:
            return self._cache[key]

        for source in (
            self._get_runtime_setting,
            self._get_django_setting,
            self._get_library_default,
        ):
            value = source(key)
            if value is not None:
                self._cache[key] = value
                return value

        self._cache[key] = default
        return default

    def _get_runtime_setting(self, key: str) -> Any:
        return self._get_nested_value(_RUNTIME_SETTINGS, key)

    def _get_django_setting(self, key: str) -> Any:
        """
        Get setting from global Django RAIL_RBAC settings.

        Args:
            key: Setting key to retrieve

        Returns:
            The setting value or None if not found
        """
        django_settings = getattr(settings, DJANGO_SETTINGS_NAME, {})
        return self._get_nested_value(django_settings, key)

    def _get_library_default(self, key: str) -> Any:
        return self._get_nested_value(LIBRARY_DEFAULTS, key)

    def _get_nested_value(self, data: dict[str, Any], key: str) -> Any:
        """
        Get nested value from dictionary using dot notation.

        Args:
            data: Dictionary to search in
            key: Key to retrieve (supports dot notation for nested access)

        Returns:
            The value or None if not found
        """
        if not isinstance(data, dict):
            return None

        current = data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return None
            current = current[k]

        return current

    def clear_cache(self) -> None:
        """
        Clear the settings cache.
        """
        self._cache.clear()


# Global settings proxy instance
settings_proxy = SettingsProxy()


def get_setting(key: str, default: Any = None) -> Any:
    """
    Get a setting value using the hierarchical settings system.

    Args:
        key: Setting key to retrieve
        default: Default value if setting is not found

    Returns:
        The setting value from the highest priority source
    """
    return SettingsProxy().get(key, default)


def _set_nested_value(data: dict[str, Any], key: str, value: Any) -> None:
    keys = key.split(".")
    current = data
    for k in keys[:-1]:
        if not isinstance(current.get(k), dict):
            current[k] = {}
        current = current[k]
    current[keys[-1]] = value


def configure_runtime_settings(
    clear_existing: bool = False, **overrides: Any
) -> None:
    """
    Configure runtime settings overrides.

    Keys use dot notation with ``__`` standing in for the dot, e.g.
    ``configure_runtime_settings(role_manager_settings__max_hierarchy_level=3)``.

    Args:
        clear_existing: Whether to clear existing runtime settings first
        **overrides: Setting key-value pairs to override
    """
    if clear_existing:
        _RUNTIME_SETTINGS.clear()

    for raw_key, value in overrides.items():
        _set_nested_value(_RUNTIME_SETTINGS, raw_key.replace("__", "."), value)

    settings_proxy.clear_cache()


def clear_runtime_settings() -> None:
    """
    Clear all runtime settings overrides.
    """
    _RUNTIME_SETTINGS.clear()
    settings_proxy.clear_cache()
