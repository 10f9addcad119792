"""Tests for permission declarations."""

import pytest
from pydantic import ValidationError

from plugdesc.permissions import (
    InvalidPermissionError,
    Permission,
    PermissionDefault,
    PermissionSet,
)


class TestPermissionDefault:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, PermissionDefault.TRUE),
            (False, PermissionDefault.FALSE),
            ("true", PermissionDefault.TRUE),
            ("No", PermissionDefault.FALSE),
            ("op", PermissionDefault.OP),
            ("isop", PermissionDefault.OP),
            ("OPERATOR", PermissionDefault.OP),
            ("notop", PermissionDefault.NOT_OP),
            ("!op", PermissionDefault.NOT_OP),
            ("not op", PermissionDefault.NOT_OP),
        ],
    )
    def test_lookup(self, value, expected):
        assert PermissionDefault.lookup(value) is expected

    @pytest.mark.parametrize("value", ["sometimes", 1, None, ["op"]])
    def test_lookup_unknown(self, value):
        with pytest.raises(InvalidPermissionError):
            PermissionDefault.lookup(value)

    def test_to_yaml(self):
        assert PermissionDefault.TRUE.to_yaml() is True
        assert PermissionDefault.FALSE.to_yaml() is False
        assert PermissionDefault.NOT_OP.to_yaml() == "not op"


class TestPermission:
    def test_defaults(self):
        perm = Permission(name="a")
        assert perm.description is None
        assert perm.default is PermissionDefault.OP
        assert perm.children == {}

    def test_children_list_grants_all(self):
        perm = Permission(name="a", children=["b", "c"])
        assert perm.children == {"b": True, "c": True}

    def test_bad_description(self):
        with pytest.raises(ValidationError):
            Permission(name="a", description=["x"])


class TestPermissionSetFromMapping:
    def test_builds_entries_in_order(self):
        perms = PermissionSet.from_mapping(
            {
                "perm.b": {"description": "B", "default": "notop"},
                "perm.a": {"description": "A", "children": {"perm.b": False}},
            }
        )
        assert perms.names() == ["perm.b", "perm.a"]
        assert perms.get("perm.b").default is PermissionDefault.NOT_OP
        assert perms.get("perm.a").children == {"perm.b": False}
        assert len(perms) == 2
        assert "perm.a" in perms
        assert "perm.c" not in perms
        assert perms.get("perm.c") is None

    def test_null_entry_uses_defaults(self):
        perms = PermissionSet.from_mapping({"perm.a": None})
        assert perms.get("perm.a").default is PermissionDefault.OP

    def test_null_settings_use_defaults(self):
        perms = PermissionSet.from_mapping({"perm.a": {"default": None, "description": None}})
        perm = perms.get("perm.a")
        assert perm.default is PermissionDefault.OP
        assert perm.description is None

    def test_unknown_settings_ignored(self):
        perms = PermissionSet.from_mapping({"perm.a": {"colour": "blue"}})
        assert perms.names() == ["perm.a"]

    def test_empty_mapping(self):
        assert len(PermissionSet.from_mapping({})) == 0

    def test_not_a_mapping(self):
        with pytest.raises(InvalidPermissionError, match="must be a mapping"):
            PermissionSet.from_mapping(["perm.a"])

    @pytest.mark.parametrize("name", ["", 5, None])
    def test_invalid_name(self, name):
        with pytest.raises(InvalidPermissionError, match="Invalid permission name"):
            PermissionSet.from_mapping({name: {}})

    def test_entry_not_a_mapping(self):
        with pytest.raises(InvalidPermissionError, match="perm.a"):
            PermissionSet.from_mapping({"perm.a": "yes"})

    def test_invalid_default(self):
        with pytest.raises(ValidationError):
            PermissionSet.from_mapping({"perm.a": {"default": "sometimes"}})


class TestPermissionSetToMapping:
    def test_inverse_of_from_mapping(self):
        source = {
            "perm.a": {"description": "A", "default": True},
            "perm.b": {"default": "not op", "children": {"perm.a": True}},
        }
        perms = PermissionSet.from_mapping(source)
        assert perms.to_mapping() == source
        assert PermissionSet.from_mapping(perms.to_mapping()) == perms
