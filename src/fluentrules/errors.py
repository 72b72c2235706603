"""
Contains the exceptions raised while declaring validation rules
"""


class FluentRulesError(Exception):
    """
    Base class of all errors raised by the fluent rule API.
    """


class UninitializedError(FluentRulesError):
    """
    Raised if rules are declared before a parser got configured via `ValidationRules.initialize`.
    """

    def __init__(self):
        super().__init__(
            "No parser configured. Did you forget to call `ValidationRules.initialize(parser)` during startup?"
        )


class UnknownRuleError(FluentRulesError):
    """
    Raised if a rule is requested by a name which is neither a custom rule nor a standard rule.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Rule with name "{name}" does not exist.')


class InvalidArgumentError(FluentRulesError, TypeError):
    """
    Raised if a method of the fluent API receives an argument it cannot work with.
    """
