"""
Unit tests for loading role links from settings and roles.json files.
"""

import json
import logging
from types import SimpleNamespace

import pytest
from django.apps import apps
from django.test.utils import override_settings

from rail_rbac.rbac import (
    DefaultRoleManager,
    RoleLink,
    get_role_manager,
    load_app_role_links,
    load_role_links,
)

pytestmark = pytest.mark.unit


def test_load_role_links_accepts_objects_and_sequences():
    rm = DefaultRoleManager(3)
    entries = [
        {"user": "u1", "role": "g1"},
        {"user": "u2", "role": "g1", "domain": "domain1"},
        ("g1", "admin"),
        ["u3", "g2", "domain2"],
        RoleLink(user="u4", role="g2"),
    ]

    assert load_role_links(rm, entries) == 5
    assert rm.has_link("u1", "admin") is True
    assert rm.get_users("g1", "domain1") == ["u2"]
    assert rm.get_roles("u3", "domain2") == ["g2"]
    assert rm.get_roles("u4") == ["g2"]


def test_load_role_links_skips_malformed_entries(caplog):
    rm = DefaultRoleManager(3)
    entries = [
        "u1,g1",
        {"user": "u1"},
        {"user": "u1", "role": 3},
        ("only-one",),
        {"user": "u1", "role": "g1", "domain": 7},
        {"user": "bad::name", "role": "g1"},
        {"user": "u2", "role": "g2"},
    ]

    with caplog.at_level(logging.WARNING, logger="rail_rbac.rbac.loader"):
        added = load_role_links(rm, entries)

    assert added == 1
    assert rm.get_roles("u2") == ["g2"]
    assert "u1" not in rm
    assert "Skipping role link" in caplog.text


def test_load_role_links_handles_empty_input():
    rm = DefaultRoleManager(3)

    assert load_role_links(rm, None) == 0
    assert load_role_links(rm, []) == 0


def test_load_app_role_links_reads_roles_files(tmp_path):
    with_links = tmp_path / "billing"
    with_links.mkdir()
    (with_links / "roles.json").write_text(
        json.dumps({"links": [{"user": "alice", "role": "accountant", "domain": "acme"}]}),
        encoding="utf-8",
    )
    bare_list = tmp_path / "reports"
    bare_list.mkdir()
    (bare_list / "roles.json").write_text(
        json.dumps([["accountant", "reader", "acme"]]), encoding="utf-8"
    )
    empty = tmp_path / "empty"
    empty.mkdir()
    (empty / "roles.json").write_text("  ", encoding="utf-8")
    broken = tmp_path / "broken"
    broken.mkdir()
    (broken / "roles.json").write_text("{not json", encoding="utf-8")
    wrong_shape = tmp_path / "wrong_shape"
    wrong_shape.mkdir()
    (wrong_shape / "roles.json").write_text(json.dumps({"links": "x"}), encoding="utf-8")

    app_configs = [
        SimpleNamespace(path=str(with_links)),
        SimpleNamespace(path=str(bare_list)),
        SimpleNamespace(path=str(empty)),
        SimpleNamespace(path=str(broken)),
        SimpleNamespace(path=str(wrong_shape)),
        SimpleNamespace(path=str(tmp_path / "missing")),
        SimpleNamespace(path=None),
    ]
    rm = DefaultRoleManager(3)

    assert load_app_role_links(rm, app_configs) == 2
    assert rm.has_link("alice", "reader", "acme") is True


def test_app_ready_loads_links_from_settings():
    app_config = apps.get_app_config("rail_rbac")
    links = [{"user": "u1", "role": "g1", "domain": "domain1"}]

    with override_settings(RAIL_RBAC={"role_manager_settings": {"links": links}}):
        app_config.ready()
        manager = get_role_manager()

    assert manager.has_link("u1", "g1", "domain1") is True
