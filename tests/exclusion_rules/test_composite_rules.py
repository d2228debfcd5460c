"""Unit tests for composite exclusion rules."""

from unittest.mock import Mock

import pytest

from localingest.exclusion_rules.base_rules import BaseExclusionRules
from localingest.exclusion_rules.composite_rules import CompositeExclusionRules
from localingest.exclusion_rules.extension_rules import ExtensionExclusionRules


class MockExclusionRules(BaseExclusionRules):
    """Mock exclusion rules for testing."""

    def __init__(self, exclude_paths=None, has_rules_result=True):
        self.exclude_paths = exclude_paths or []
        self.has_rules_result = has_rules_result
        self.calls = []

    def exclude(self, path: str) -> bool:
        self.calls.append(path)
        return path in self.exclude_paths

    def has_rules(self) -> bool:
        return self.has_rules_result


class TestCompositeExclusionRules:
    """Test the CompositeExclusionRules class."""

    def test_init_empty_raises(self):
        with pytest.raises(ValueError, match="At least one exclusion rule"):
            CompositeExclusionRules([])

    def test_init_invalid_rule_type(self):
        with pytest.raises(TypeError, match="Rule at index 1"):
            CompositeExclusionRules([MockExclusionRules(), "not a rule"])  # type: ignore[list-item]

    def test_exclude_is_logical_or(self):
        composite = CompositeExclusionRules([MockExclusionRules(["a"]), MockExclusionRules(["b"])])
        assert composite.exclude("a")
        assert composite.exclude("b")
        assert not composite.exclude("c")

    def test_short_circuit_skips_later_rules(self):
        first = MockExclusionRules(["a.png"])
        second = MockExclusionRules()
        composite = CompositeExclusionRules([first, second])

        assert composite.exclude("a.png")
        assert second.calls == []

        assert not composite.exclude("b.txt")
        assert second.calls == ["b.txt"]

    def test_has_rules(self):
        assert not CompositeExclusionRules([MockExclusionRules(has_rules_result=False)]).has_rules()
        assert CompositeExclusionRules(
            [MockExclusionRules(has_rules_result=False), MockExclusionRules(has_rules_result=True)]
        ).has_rules()

    def test_add_rule_object(self):
        composite = CompositeExclusionRules([ExtensionExclusionRules([".png"])])
        composite.add_rule_object(ExtensionExclusionRules([".zip"]))
        assert composite.exclude("dist.zip")

        with pytest.raises(TypeError):
            composite.add_rule_object(Mock())

    def test_add_rule_not_supported(self):
        composite = CompositeExclusionRules([MockExclusionRules()])
        with pytest.raises(NotImplementedError):
            composite.add_rule("*.txt")
