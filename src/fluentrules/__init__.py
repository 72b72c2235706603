"""
This package enables you to declare validation rules for properties and objects using a fluent API. The rules are
applied to classes or objects and executed later on by a validator of your choice.
"""

from .configuration import CustomRule, ValidationConfiguration
from .descriptors import PropertyDescriptor, RuleDescriptor
from .errors import FluentRulesError, InvalidArgumentError, UninitializedError, UnknownRuleError
from .fluent import FluentEnsure, FluentRuleCustomizer, FluentRules
from .parser import ParsedMessage, PropertyParser
from .rules import TargetRules
from .types import Parser, RuleSet
from .validation_rules import ValidationRules
