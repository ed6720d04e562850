"""Tests for named child collection operations."""

import pytest

from mgmtops.domain.base.exceptions import DuplicateNameError, NotFoundError
from mgmtops.domain.base.named_children import (
    add_named_child,
    find_named_child,
    remove_named_child,
)
from mgmtops.domain.gateway.models import RedirectConfiguration


def _redirect(name: str) -> RedirectConfiguration:
    return RedirectConfiguration(name=name, target_url=f"https://{name}.example.test")


@pytest.mark.unit
class TestNamedChildren:
    """Test case-insensitive named child collections."""

    def setup_method(self):
        self.children = (_redirect("cfg1"), _redirect("cfg2"))

    def test_add_appends_new_child(self):
        result = add_named_child(self.children, _redirect("cfg3"), "RedirectConfiguration")

        assert [child.name for child in result] == ["cfg1", "cfg2", "cfg3"]
        assert len(self.children) == 2

    def test_add_rejects_duplicate_ignoring_case(self):
        with pytest.raises(DuplicateNameError) as exc_info:
            add_named_child(self.children, _redirect("CFG1"), "RedirectConfiguration")

        assert exc_info.value.name == "CFG1"
        assert exc_info.value.error_code == "DUPLICATE_NAME"
        assert str(exc_info.value) == (
            "RedirectConfiguration with the specified name already exists: CFG1"
        )
        assert len(self.children) == 2

    def test_find_ignores_case(self):
        assert find_named_child(self.children, "Cfg2") is self.children[1]
        assert find_named_child(self.children, "missing") is None

    def test_remove_ignores_case(self):
        result = remove_named_child(self.children, "CFG2", "RedirectConfiguration")

        assert [child.name for child in result] == ["cfg1"]

    def test_remove_missing_is_noop_by_default(self):
        result = remove_named_child(self.children, "nope", "RedirectConfiguration")

        assert result == self.children

    def test_remove_missing_raises_when_requested(self):
        with pytest.raises(NotFoundError) as exc_info:
            remove_named_child(self.children, "nope", "NodeType", fail_on_missing=True)

        assert exc_info.value.details == {"resource_type": "NodeType", "name": "nope"}

    def test_custom_key(self):
        children = ({"id": "A"},)

        with pytest.raises(DuplicateNameError):
            add_named_child(children, {"id": "a"}, "Thing", key=lambda item: item["id"])
