"""
Contains the entry point of the fluent rule API.
"""
import logging
from typing import Any, Optional

from .configuration import ValidationConfiguration
from .fluent import FluentEnsure, FluentRules
from .types import ArgsToConfig, Condition, Parser, PropertyRef, RuleSet

_logger = logging.getLogger(__name__)


class ValidationRules:
    """
    Entry point to declare rules. Call `initialize` once during startup, then declare rules with `ensure` or
    `ensure_object`.
    All methods operate on `ValidationRules.configuration` which is shared by the whole process. It is supposed to be
    written during startup only.
    """

    configuration: ValidationConfiguration = ValidationConfiguration()

    @classmethod
    def initialize(cls, parser: Parser, configuration: Optional[ValidationConfiguration] = None) -> None:
        """
        Sets the parser used to resolve properties and messages. If `configuration` is given it replaces the
        current configuration (e.g. to isolate tests). Calling it again replaces the parser.
        """
        if configuration is not None:
            cls.configuration = configuration
        cls.configuration.parser = parser
        _logger.debug("Initialized validation rules with parser %r", parser)

    @classmethod
    def ensure(cls, ref: PropertyRef) -> FluentRules:
        """
        Targets a property with rules. `ref` is either the property name or an accessor like `lambda x: x.name`.
        """
        return FluentEnsure(cls.configuration).ensure(ref)

    @classmethod
    def ensure_object(cls) -> FluentRules:
        """
        Targets an object with rules.
        """
        return FluentEnsure(cls.configuration).ensure_object()

    @classmethod
    def custom_rule(
        cls, name: str, condition: Condition, message: str, args_to_config: Optional[ArgsToConfig] = None
    ) -> None:
        """
        Defines a custom rule which can be applied with `satisfies_rule(name, *args)`.
        `name` also serves as the message key of `message`. `args_to_config` maps the rule's arguments to a config
        which is available when rendering the message.
        """
        cls.configuration.register_custom_rule(name, condition, message, args_to_config)

    @staticmethod
    def tagged_rules(rules: RuleSet, tag: str) -> RuleSet:
        """
        Returns the rules with the given tag. The sequence buckets are preserved, i.e. the result has as many buckets
        as `rules`. `rules` is not modified.
        """
        return [[rule for rule in bucket if rule.tag == tag] for bucket in rules]

    @classmethod
    def off(cls, target: Any) -> None:
        """
        Removes the rules from a class or object.
        """
        cls.configuration.rules.unset(target)
