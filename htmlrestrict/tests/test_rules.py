from unittest import mock

import pytest

from htmlrestrict.errors import RestrictError
from htmlrestrict.rules import RuleSet


def test_ruleset_is_empty_by_default():
    rules = RuleSet()
    assert len(rules) == 0
    assert not rules.allows("b")
    assert rules.attributes("b") == ()


def test_ruleset_keeps_attribute_order():
    rules = RuleSet({"img": ["src", "alt", "/"]})
    assert rules.allows("img")
    assert rules.attributes("img") == ("src", "alt", "/")
    assert rules.preserves_slash("img")


def test_ruleset_slash_must_be_listed():
    rules = RuleSet({"hr": []})
    assert rules.allows("hr")
    assert not rules.preserves_slash("hr")


def test_ruleset_get_is_read_only():
    rules = RuleSet({"b": []})
    with pytest.raises(TypeError):
        rules.get()["i"] = []


def test_ruleset_set_replaces_rules():
    rules = RuleSet({"b": []})
    rules.set({"i": ("title",)})
    assert not rules.allows("b")
    assert dict(rules.get()) == {"i": ("title",)}


def test_ruleset_accepts_another_ruleset():
    rules = RuleSet(RuleSet({"b": ["class"]}))
    assert rules.attributes("b") == ("class",)


def test_ruleset_accepts_arbitrary_names():
    rules = RuleSet({"not a tag!": ["???"]})
    assert rules.allows("not a tag!")


def test_ruleset_from_json(rules_file):
    rules = RuleSet.from_json(rules_file({"b": [], "a": ["href"]}))
    assert rules.attributes("a") == ("href",)
    assert rules.allows("b")


def test_ruleset_from_json_requires_object(rules_file):
    with pytest.raises(RestrictError):
        RuleSet.from_json(rules_file(["b", "i"]))


def test_ruleset_from_json_rejects_non_list_attributes(rules_file):
    with pytest.raises(RestrictError):
        RuleSet.from_json(rules_file({"b": None}))


def test_ruleset_from_json_reads_configured_encoding(tmp_path):
    path = tmp_path / "rules.json"
    path.write_bytes('{"b": ["título"]}'.encode("latin-1"))
    with mock.patch("htmlrestrict.rules.RestrictConfig.ENCODING", "latin-1"):
        rules = RuleSet.from_json(path)
    assert rules.attributes("b") == ("título",)
