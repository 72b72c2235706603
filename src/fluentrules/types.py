"""
Contains the types used in the fluent rule API
"""
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Protocol, TypeAlias

if TYPE_CHECKING:
    from .descriptors import PropertyDescriptor, RuleDescriptor
    from .parser import ParsedMessage


class Parser(Protocol):
    """
    A protocol that defines what the fluent API needs to resolve property references and messages.
    """

    def parse_property(self, ref: "PropertyRef") -> "PropertyDescriptor":
        ...

    def parse_message(self, text: str) -> "ParsedMessage":
        ...


PropertyAccessor: TypeAlias = Callable[[Any], Any]
PropertyRef: TypeAlias = str | PropertyAccessor
SyncCondition: TypeAlias = Callable[..., bool]
AsyncCondition: TypeAlias = Callable[..., Awaitable[bool]]
Condition: TypeAlias = SyncCondition | AsyncCondition
WhenPredicate: TypeAlias = Callable[[Any], bool]
ArgsToConfig: TypeAlias = Callable[..., dict[str, Any]]
RuleSet: TypeAlias = "list[list[RuleDescriptor]]"
