"""Unit tests for module descriptor entities."""

from dataclasses import FrozenInstanceError

import pytest

from checkstyle_meta.domain.entities import ModuleDetails, ModuleType


class TestModuleType:
    def test_labels(self):
        assert ModuleType.CHECK.label == "check"
        assert ModuleType.FILTER.label == "filter"
        assert ModuleType.FILEFILTER.label == "filefilter"

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("check", ModuleType.CHECK),
            ("Filter", ModuleType.FILTER),
            ("file filter", ModuleType.FILEFILTER),
            ("file-filter", ModuleType.FILEFILTER),
        ],
    )
    def test_from_label(self, label: str, expected: ModuleType):
        assert ModuleType.from_label(label) is expected

    def test_from_label_unknown(self):
        with pytest.raises(ValueError, match="listener"):
            ModuleType.from_label("listener")


class TestModuleDetails:
    def test_defaults(self):
        details = ModuleDetails(
            name="Foo",
            module_type=ModuleType.CHECK,
            fully_qualified_name="org.example.FooCheck",
            parent="com.puppycrawl.tools.checkstyle.TreeWalker",
        )
        assert details.description == ""
        assert details.properties == ()
        assert details.violation_message_keys == frozenset()
        assert not details.has_description

    def test_sorted_message_keys(self, check_details: ModuleDetails):
        assert check_details.sorted_message_keys() == [
            "maxLen.constructor",
            "maxLen.method",
        ]

    def test_is_immutable(self, check_details: ModuleDetails):
        with pytest.raises(FrozenInstanceError):
            check_details.name = "Other"  # type: ignore[misc]
