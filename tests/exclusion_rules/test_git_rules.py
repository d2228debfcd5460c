"""Unit tests for gitignore-style exclusion rules."""

from localingest.exclusion_rules.git_rules import GitIgnoreExclusionRules, escape_pattern


def test_empty_rules_exclude_nothing():
    rules = GitIgnoreExclusionRules()
    assert not rules.has_rules()
    assert not rules.exclude("anything.txt")


def test_glob_and_negation():
    rules = GitIgnoreExclusionRules(["*.log", "!keep.log"])
    assert rules.exclude("server.log")
    assert rules.exclude("logs/server.log")
    assert not rules.exclude("keep.log")
    assert not rules.exclude("server.py")


def test_directory_pattern_matches_directory_path():
    rules = GitIgnoreExclusionRules(["build/"])
    assert rules.exclude("build/")
    assert rules.exclude("build/output.txt")
    assert not rules.exclude("build")


def test_add_rule_appends_in_order():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.pyc")
    assert rules.exclude("test.pyc")
    rules.add_rule("!important.pyc")
    assert not rules.exclude("important.pyc")
    assert rules.patterns == ["*.pyc", "!important.pyc"]


def test_escaped_pattern_matches_only_that_path():
    rules = GitIgnoreExclusionRules([escape_pattern("output.txt")])
    assert rules.exclude("output.txt")
    assert not rules.exclude("docs/output.txt")
    assert not rules.exclude("output.txt.bak")


def test_escaped_pattern_with_wildcards_is_literal():
    rules = GitIgnoreExclusionRules([escape_pattern("out/[draft]*.txt")])
    assert rules.exclude("out/[draft]*.txt")
    assert not rules.exclude("out/d.txt")
    assert not rules.exclude("out/[draft]final.txt")
