"""
Django app configuration for rail-rbac.

On startup the default role manager is populated from
``role_manager_settings.links`` and, when enabled, from roles.json files
shipped by installed apps.
"""

import logging

from django.apps import AppConfig as BaseAppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for rail-rbac library."""

    name = "rail_rbac"
    verbose_name = "Rail RBAC"
    label = "rail_rbac"

    def ready(self):
        """Load declared role links after Django has loaded."""
        try:
            self._load_role_links()
        except Exception as e:
            logger.error(f"Error loading role links: {e}")
            # Don't raise in production to avoid breaking the app
            if getattr(settings, "DEBUG", False):
                raise

    def _load_role_links(self):
        from .rbac import (
            get_role_manager,
            get_role_manager_settings,
            load_app_role_links,
            load_role_links,
        )

        config = get_role_manager_settings()
        manager = get_role_manager()

        count = load_role_links(manager, config.links)
        if config.load_app_role_files:
            count += load_app_role_links(manager)
        if count:
            logger.info("Loaded %d role links", count)
