"""Tests for hier.errors: exception hierarchy and error messages."""

import pytest

from hier.errors import (
    ConfigurationError,
    DuplicateChild,
    HierError,
    MalformedPath,
    NoSuchChild,
    PathNotFound,
    RegistryMiss,
    ResourceNotFound,
    UnknownHook,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError,
            DuplicateChild,
            MalformedPath,
            NoSuchChild,
            PathNotFound,
            RegistryMiss,
            ResourceNotFound,
            UnknownHook,
        ],
    )
    def test_is_hier_error(self, error: type[Exception]) -> None:
        assert issubclass(error, HierError)

    def test_value_errors(self) -> None:
        assert issubclass(MalformedPath, ValueError)
        assert issubclass(UnknownHook, ValueError)

    def test_lookup_errors(self) -> None:
        for error in (PathNotFound, NoSuchChild, ResourceNotFound, RegistryMiss):
            assert issubclass(error, LookupError)


class TestMessages:
    def test_path_not_found(self) -> None:
        err = PathNotFound("/a/b")
        assert err.path == "/a/b"
        assert str(err) == "Could not find path: /a/b"

    def test_registry_miss(self) -> None:
        assert str(RegistryMiss("/node")) == "Could not find in registry: /node"

    def test_no_such_child(self) -> None:
        err = NoSuchChild("node")
        assert err.name == "node"
        assert str(err) == "There is no child named node"

    def test_duplicate_child(self) -> None:
        assert str(DuplicateChild("node")) == "There already is a child named node"

    def test_unknown_hook(self) -> None:
        err = UnknownHook("hook")
        assert err.stage == "hook"
        assert str(err) == "Could not identify hook: 'hook'"

    def test_malformed_path(self) -> None:
        err = MalformedPath("node", "Paths must start with a slash")
        assert err.path == "node"
        assert err.detail == "Paths must start with a slash"
        assert str(err) == "Paths must start with a slash: 'node'"

    def test_resource_not_found_with_path(self) -> None:
        err = ResourceNotFound("#nav", "/app/nav")
        assert err.selector == "#nav"
        assert err.path == "/app/nav"
        assert str(err) == "Could not locate resource '#nav' while mounting /app/nav"

    def test_resource_not_found_without_path(self) -> None:
        assert str(ResourceNotFound("#nav")) == "Could not locate resource '#nav'"
