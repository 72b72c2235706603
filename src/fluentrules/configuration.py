"""
Contains the configuration shared by all rule declarations of an application. It is meant to be set up once during
startup (parser, custom rules, messages) and only read afterwards.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional

from .rules import TargetRules
from .types import ArgsToConfig, Condition, Parser

_logger = logging.getLogger(__name__)

DEFAULT_MESSAGES: dict[str, str] = {
    "default": "{display_name} is invalid.",
    "required": "{display_name} is required.",
    "matches": "{display_name} is not correctly formatted.",
    "email": "{display_name} is not a valid email.",
    "minLength": "{display_name} must be at least {config[length]} characters.",
    "maxLength": "{display_name} cannot be longer than {config[length]} characters.",
    "minItems": "{display_name} must contain at least {config[count]} items.",
    "maxItems": "{display_name} cannot contain more than {config[count]} items.",
    "equals": "{display_name} must be {config[expected_value]}.",
}


@dataclass(frozen=True)
class CustomRule:
    """
    A rule registered by name. `args_to_config` maps the arguments of `satisfies_rule` to the rule's config.
    """

    condition: Condition
    args_to_config: Optional[ArgsToConfig] = None


@dataclass
class ValidationConfiguration:
    """
    Bundles the parser, the custom rules, the message templates and the registry of rules applied to targets.
    """

    parser: Optional[Parser] = None
    custom_rules: dict[str, CustomRule] = field(default_factory=dict)
    messages: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_MESSAGES))
    rules: TargetRules = field(default_factory=TargetRules)

    @property
    def initialized(self) -> bool:
        """True if a parser is configured"""
        return self.parser is not None

    def register_custom_rule(
        self, name: str, condition: Condition, message: str, args_to_config: Optional[ArgsToConfig] = None
    ) -> None:
        """
        Registers the rule and its message template under `name`. An existing rule with the same name gets replaced.
        """
        if name in self.custom_rules:
            _logger.debug("Overwriting custom rule '%s'", name)
        self.messages[name] = message
        self.custom_rules[name] = CustomRule(condition=condition, args_to_config=args_to_config)
