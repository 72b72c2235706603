import re
from typing import Any

import pytest

from fluentrules import ValidationRules
from fluentrules.standard_rules import (
    EMAIL_PATTERN,
    equals,
    matches,
    max_items,
    max_length,
    min_items,
    min_length,
    required,
)


class TestStandardRules:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(None, False, id="None"),
            pytest.param("", False, id="empty string"),
            pytest.param(" \t\n", False, id="whitespace"),
            pytest.param(0, True, id="zero"),
            pytest.param(False, True, id="False"),
            pytest.param("a", True, id="string"),
            pytest.param(" a ", True, id="padded string"),
            pytest.param([], True, id="empty list"),
            pytest.param({}, True, id="empty dict"),
            pytest.param(object(), True, id="object"),
        ],
    )
    def test_required(self, value: Any, expected: bool):
        assert required(value, None) is expected

    @pytest.mark.parametrize(
        "value, min_expected, max_expected",
        [
            pytest.param(None, True, True, id="None"),
            pytest.param("", True, True, id="empty string"),
            pytest.param("ab", False, True, id="too short"),
            pytest.param("abc", True, True, id="exact"),
            pytest.param("abcd", True, False, id="too long"),
            pytest.param(123, False, False, id="unsized"),
        ],
    )
    def test_min_max_length(self, value: Any, min_expected: bool, max_expected: bool):
        assert min_length(3)(value, None) is min_expected
        assert max_length(3)(value, None) is max_expected

    @pytest.mark.parametrize(
        "value, min_expected, max_expected",
        [
            pytest.param(None, True, True, id="None"),
            pytest.param([], False, True, id="empty list"),
            pytest.param([1], False, True, id="too few"),
            pytest.param([1, 2], True, True, id="exact"),
            pytest.param((1, 2, 3), True, False, id="too many"),
        ],
    )
    def test_min_max_items(self, value: Any, min_expected: bool, max_expected: bool):
        assert min_items(2)(value, None) is min_expected
        assert max_items(2)(value, None) is max_expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(None, True, id="None"),
            pytest.param("", True, id="empty string"),
            pytest.param("123", True, id="digits"),
            pytest.param("12a", False, id="letters"),
            pytest.param(123, True, id="number"),
        ],
    )
    def test_matches(self, value: Any, expected: bool):
        assert matches(re.compile(r"^\d+$"))(value, None) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param("john.doe@example.com", True, id="valid"),
            pytest.param("john+tag@mail.example.org", True, id="plus"),
            pytest.param("john.doe", False, id="no at"),
            pytest.param("john@-example.com", False, id="leading hyphen"),
            pytest.param("", True, id="empty"),
        ],
    )
    def test_email_pattern(self, value: str, expected: bool):
        assert matches(EMAIL_PATTERN)(value, None) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(None, True, id="None"),
            pytest.param("", True, id="empty string"),
            pytest.param(5, True, id="equal"),
            pytest.param(4, False, id="different"),
            pytest.param("5", False, id="string"),
        ],
    )
    def test_equals(self, value: Any, expected: bool):
        assert equals(5)(value, None) is expected


class TestStandardRuleDeclarations:
    @pytest.mark.parametrize(
        "name, args, message_key, config",
        [
            pytest.param("required", (), "required", {}, id="required"),
            pytest.param("minLength", (3,), "minLength", {"length": 3}, id="minLength"),
            pytest.param("min_length", (3,), "minLength", {"length": 3}, id="min_length"),
            pytest.param("maxLength", (5,), "maxLength", {"length": 5}, id="maxLength"),
            pytest.param("minItems", (1,), "minItems", {"count": 1}, id="minItems"),
            pytest.param("max_items", (4,), "maxItems", {"count": 4}, id="max_items"),
            pytest.param("equals", ("yes",), "equals", {"expected_value": "yes"}, id="equals"),
        ],
    )
    def test_satisfies_rule_by_name(self, name: str, args: tuple, message_key: str, config: dict):
        rule = ValidationRules.ensure("value").satisfies_rule(name, *args).rule
        assert rule.message_key == message_key
        assert dict(rule.config) == config

    def test_matches_stores_compiled_pattern(self):
        rule = ValidationRules.ensure("zip_code").matches(r"^\d{5}$").rule
        assert rule.message_key == "matches"
        assert rule.config["regex"].pattern == r"^\d{5}$"
        assert rule.condition("01067", None)
        assert not rule.condition("0106", None)

    def test_email(self):
        rule = ValidationRules.ensure("email").email().rule
        assert rule.message_key == "email"
        assert rule.config["regex"] is EMAIL_PATTERN

    def test_chaining_on_same_property(self):
        rules = ValidationRules.ensure("name").required().min_length(2).max_length(20).equals("John").rules
        assert [rule.message_key for rule in rules[0]] == ["required", "minLength", "maxLength", "equals"]
        assert {rule.property.name for rule in rules[0]} == {"name"}
        assert len({id(rule.property) for rule in rules[0]}) == 1
