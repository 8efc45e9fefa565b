import django
import pytest
from django.conf import settings


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")
    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY="rail-rbac-tests",
            INSTALLED_APPS=[
                "django.contrib.contenttypes",
                "django.contrib.auth",
                "rail_rbac",
            ],
            DATABASES={
                "default": {
                    "ENGINE": "django.db.backends.sqlite3",
                    "NAME": ":memory:",
                }
            },
            USE_TZ=True,
            RAIL_RBAC={},
        )
        django.setup()


@pytest.fixture(autouse=True)
def _isolated_role_settings():
    from rail_rbac.config_proxy import clear_runtime_settings
    from rail_rbac.rbac import reset_role_manager

    clear_runtime_settings()
    reset_role_manager()
    yield
    clear_runtime_settings()
    reset_role_manager()
