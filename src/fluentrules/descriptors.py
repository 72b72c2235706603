"""
Contains the descriptor objects produced by the fluent API. An external validator consumes them.
"""
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from frozendict import frozendict

from .types import Condition, WhenPredicate

if TYPE_CHECKING:
    from .parser import ParsedMessage


@dataclass
class PropertyDescriptor:
    """
    Identifies the property a rule applies to. If `name` is None the rule applies to the object itself.
    Only the display name may be changed after creation.
    """

    name: Optional[str] = None
    display_name: Optional[str] = None

    @property
    def is_object(self) -> bool:
        """True if this descriptor targets the whole object instead of a single property"""
        return self.name is None

    def __setattr__(self, name: str, value: Any):
        if name == "name" and "name" in self.__dict__:
            raise AttributeError("The name of a property descriptor is fixed once it is created")
        super().__setattr__(name, value)


# pylint: disable=too-many-instance-attributes
@dataclass
class RuleDescriptor:
    """
    Represents a single validation check. The condition will be called with the property value and the object and
    returns either a bool or an awaitable resolving to a bool. Evaluating it is up to the validator.
    """

    property: PropertyDescriptor
    condition: Condition
    sequence: int
    config: frozendict[str, Any] = field(default_factory=frozendict)
    when: Optional[WhenPredicate] = None
    message_key: str = "default"
    message: Optional["ParsedMessage"] = None
    tag: Optional[str] = None

    def __setattr__(self, name: str, value: Any):
        if name == "sequence" and "sequence" in self.__dict__:
            raise AttributeError("The sequence of a rule is fixed once the rule is created")
        super().__setattr__(name, value)
