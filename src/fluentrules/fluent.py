"""
Contains the fluent API to declare rules:

```
ValidationRules.ensure("name").required().max_length(50) \
    .ensure("email").email().then().satisfies(is_unique).with_message("{display_name} is already taken") \
    .on(Customer)
```

`FluentEnsure` collects the rules in sequence buckets, `FluentRules` creates rules for one property (or the object
itself) and `FluentRuleCustomizer` refines the rule created last.
"""
import inspect
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

from frozendict import frozendict
from typeguard import TypeCheckError, check_type

from . import standard_rules
from .descriptors import PropertyDescriptor, RuleDescriptor
from .errors import InvalidArgumentError, UninitializedError, UnknownRuleError
from .types import Condition, PropertyRef, RuleSet, WhenPredicate

if TYPE_CHECKING:
    from .configuration import ValidationConfiguration


def _check_argument(name: str, value: Any, expected_type: Any) -> None:
    try:
        check_type(value, expected_type)
    except TypeCheckError as error:
        raise InvalidArgumentError(f"{name}: {error}") from error


class StandardRuleMethods(ABC):
    """
    Provides the named rules. Both `FluentRules` and `FluentRuleCustomizer` offer them so that further rules can be
    chained onto the same property without calling `ensure` again.
    """

    @property
    @abstractmethod
    def configuration(self) -> "ValidationConfiguration":
        """The configuration holding the custom rules"""

    @abstractmethod
    def satisfies(self, condition: Condition, config: Optional[Mapping[str, Any]] = None) -> "FluentRuleCustomizer":
        """
        Applies an ad-hoc rule function to the ensured property or object.
        """

    def satisfies_rule(self, name: str, *args: Any) -> "FluentRuleCustomizer":
        """
        Applies a rule by name. Custom rules take precedence over standard rules of the same name.
        The condition of a custom rule will be called with the property value, the object and `args`.
        """
        custom_rule = self.configuration.custom_rules.get(name)
        if custom_rule is None:
            handler = STANDARD_RULE_HANDLERS.get(name)
            if handler is None:
                raise UnknownRuleError(name)
            try:
                inspect.signature(handler).bind(self, *args)
            except TypeError as error:
                raise InvalidArgumentError(f"Invalid arguments for rule '{name}': {error}") from error
            return handler(self, *args)
        config = custom_rule.args_to_config(*args) if custom_rule.args_to_config is not None else None
        condition = custom_rule.condition

        def rule_condition(value: Any, obj: Any) -> Any:
            return condition(value, obj, *args)

        return self.satisfies(rule_condition, config).with_message_key(name)

    def required(self) -> "FluentRuleCustomizer":
        """
        The value cannot be None, empty or whitespace.
        """
        return self.satisfies(standard_rules.required).with_message_key("required")

    def matches(self, pattern: str | re.Pattern) -> "FluentRuleCustomizer":
        """
        The value must match the regular expression. None and empty values are considered valid.
        """
        _check_argument("pattern", pattern, str | re.Pattern)
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        return self.satisfies(standard_rules.matches(regex), {"regex": regex}).with_message_key("matches")

    def email(self) -> "FluentRuleCustomizer":
        """
        The value must be a valid email address. None and empty values are considered valid.
        """
        return self.matches(standard_rules.EMAIL_PATTERN).with_message_key("email")

    def min_length(self, length: int) -> "FluentRuleCustomizer":
        """
        String rule. None and empty values are considered valid.
        """
        _check_argument("length", length, int)
        return self.satisfies(standard_rules.min_length(length), {"length": length}).with_message_key("minLength")

    def max_length(self, length: int) -> "FluentRuleCustomizer":
        """
        String rule. None and empty values are considered valid.
        """
        _check_argument("length", length, int)
        return self.satisfies(standard_rules.max_length(length), {"length": length}).with_message_key("maxLength")

    def min_items(self, count: int) -> "FluentRuleCustomizer":
        """
        Collection rule. None is considered valid.
        """
        _check_argument("count", count, int)
        return self.satisfies(standard_rules.min_items(count), {"count": count}).with_message_key("minItems")

    def max_items(self, count: int) -> "FluentRuleCustomizer":
        """
        Collection rule. None is considered valid.
        """
        _check_argument("count", count, int)
        return self.satisfies(standard_rules.max_items(count), {"count": count}).with_message_key("maxItems")

    def equals(self, expected_value: Any) -> "FluentRuleCustomizer":
        """
        None and the empty string are considered valid.
        """
        return self.satisfies(
            standard_rules.equals(expected_value), {"expected_value": expected_value}
        ).with_message_key("equals")


STANDARD_RULE_HANDLERS: dict[str, Callable[..., "FluentRuleCustomizer"]] = {
    "required": StandardRuleMethods.required,
    "matches": StandardRuleMethods.matches,
    "email": StandardRuleMethods.email,
    "minLength": StandardRuleMethods.min_length,
    "min_length": StandardRuleMethods.min_length,
    "maxLength": StandardRuleMethods.max_length,
    "max_length": StandardRuleMethods.max_length,
    "minItems": StandardRuleMethods.min_items,
    "min_items": StandardRuleMethods.min_items,
    "maxItems": StandardRuleMethods.max_items,
    "max_items": StandardRuleMethods.max_items,
    "equals": StandardRuleMethods.equals,
}


class FluentEnsure:
    """
    Collects the declared rules. Rules are grouped in buckets by their sequence number; the bucket index equals the
    sequence number.
    """

    def __init__(self, configuration: "ValidationConfiguration"):
        self.configuration = configuration
        self.parser = configuration.parser
        self._rules: RuleSet = []

    @property
    def rules(self) -> RuleSet:
        """A copy of the rules declared so far"""
        return [list(bucket) for bucket in self._rules]

    def ensure(self, ref: PropertyRef) -> "FluentRules":
        """
        Targets a property with rules. `ref` is either the property name or an accessor like `lambda x: x.name`.
        """
        self._assert_initialized()
        assert self.parser is not None
        return FluentRules(self, self.parser.parse_property(ref))

    def ensure_object(self) -> "FluentRules":
        """
        Targets the object itself with rules.
        """
        self._assert_initialized()
        return FluentRules(self, PropertyDescriptor())

    def on(self, target: Any) -> "FluentEnsure":
        """
        Applies the rules to a class or object, making them discoverable by a validator.
        """
        self.configuration.rules.set(target, self._rules)
        return self

    def add_rule(self, rule: RuleDescriptor) -> None:
        """
        Adds the rule to the bucket of its sequence number. Missing buckets are created empty.
        """
        while len(self._rules) < rule.sequence + 1:
            self._rules.append([])
        self._rules[rule.sequence].append(rule)

    def _assert_initialized(self) -> None:
        if self.parser is None:
            raise UninitializedError()


class FluentRules(StandardRuleMethods):
    """
    Creates rules for a single property or the object itself.
    """

    def __init__(self, fluent_ensure: FluentEnsure, property_descriptor: PropertyDescriptor):
        self.fluent_ensure = fluent_ensure
        self.property = property_descriptor
        # Rules with a higher sequence number are only validated if all rules with lower numbers succeeded.
        # Managed by `FluentRuleCustomizer.then`.
        self.sequence = 0

    @property
    def configuration(self) -> "ValidationConfiguration":
        return self.fluent_ensure.configuration

    def display_name(self, name: str) -> "FluentRules":
        """
        Sets the display name of the ensured property.
        """
        self.property.display_name = name
        return self

    def satisfies(self, condition: Condition, config: Optional[Mapping[str, Any]] = None) -> "FluentRuleCustomizer":
        """
        Applies an ad-hoc rule function to the ensured property or object.
        The condition will be called with the property value and the object and has to return a bool or an awaitable
        resolving to a bool.
        """
        _check_argument("condition", condition, Callable[..., Any])
        _check_argument("config", config, Optional[Mapping[str, Any]])
        return FluentRuleCustomizer(self, condition, config)


class FluentRuleCustomizer(StandardRuleMethods):
    """
    Refines the rule created last. Further rules, properties or targets can be chained from here.
    """

    def __init__(self, fluent_rules: FluentRules, condition: Condition, config: Optional[Mapping[str, Any]] = None):
        self.fluent_rules = fluent_rules
        self.fluent_ensure = fluent_rules.fluent_ensure
        self.rule = RuleDescriptor(
            property=fluent_rules.property,
            condition=condition,
            config=frozendict(config or {}),
            sequence=fluent_rules.sequence,
        )
        self.fluent_ensure.add_rule(self.rule)

    @property
    def configuration(self) -> "ValidationConfiguration":
        return self.fluent_ensure.configuration

    @property
    def rules(self) -> RuleSet:
        """A copy of the rules declared so far"""
        return self.fluent_ensure.rules

    def then(self) -> "FluentRuleCustomizer":
        """
        Rules declared after this call are validated only if the previously declared rules succeeded. Use it to
        postpone costly rules until the cheap ones pass.
        """
        self.fluent_rules.sequence += 1
        return self

    def with_message_key(self, key: str) -> "FluentRuleCustomizer":
        """
        Specifies the key to look up the rule's message template.
        """
        _check_argument("key", key, str)
        self.rule.message_key = key
        self.rule.message = None
        return self

    def with_message(self, message: str) -> "FluentRuleCustomizer":
        """
        Specifies the rule's message, e.g. `"{display_name} is not a valid customer number"`.
        """
        assert self.fluent_ensure.parser is not None
        self.rule.message_key = "custom"
        self.rule.message = self.fluent_ensure.parser.parse_message(message)
        return self

    def when(self, condition: Optional[WhenPredicate]) -> "FluentRuleCustomizer":
        """
        Specifies a condition which must be met before the rule gets validated. It will be called with the object.
        """
        _check_argument("condition", condition, Optional[Callable[..., Any]])
        self.rule.when = condition
        return self

    def tag(self, tag: str) -> "FluentRuleCustomizer":
        """
        Tags the rule, see `ValidationRules.tagged_rules`.
        """
        _check_argument("tag", tag, str)
        self.rule.tag = tag
        return self

    def ensure(self, ref: PropertyRef) -> FluentRules:
        """
        Targets another property with rules.
        """
        return self.fluent_ensure.ensure(ref)

    def ensure_object(self) -> FluentRules:
        """
        Targets the object itself with rules.
        """
        return self.fluent_ensure.ensure_object()

    def on(self, target: Any) -> FluentEnsure:
        """
        Applies the rules to a class or object, making them discoverable by a validator.
        """
        return self.fluent_ensure.on(target)

    def satisfies(self, condition: Condition, config: Optional[Mapping[str, Any]] = None) -> "FluentRuleCustomizer":
        return self.fluent_rules.satisfies(condition, config)
