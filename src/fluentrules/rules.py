"""
Contains the registry which makes rules discoverable by the classes or objects they got applied to.
"""
import logging
import weakref
from typing import Any, NamedTuple, Optional

from .types import RuleSet

_logger = logging.getLogger(__name__)


def _target_name(target: Any) -> str:
    # log records must not reference the target
    if isinstance(target, type):
        return target.__qualname__
    return f"{type(target).__qualname__} instance"


class _Entry(NamedTuple):
    rules: RuleSet
    # only set for targets which cannot be weakly referenced
    target: Any
    finalizer: Optional[weakref.finalize]


class TargetRules:
    """
    Associates rule sets with classes or objects. Targets are compared by identity, i.e. two equal objects may carry
    different rules. Rules registered on a class are found for its subclasses and all instances which have no rules on
    their own.
    The registry does not keep targets alive: once a target is garbage collected its rules get removed. Targets which
    do not support weak references are kept until `unset` is called.
    """

    def __init__(self):
        self._rules: dict[int, _Entry] = {}

    def set(self, target: Any, rules: RuleSet) -> None:
        """Applies the rules to the target. Previously applied rules get replaced."""
        self._discard(id(target))
        try:
            finalizer = weakref.finalize(target, self._rules.pop, id(target), None)
        except TypeError:
            # e.g. tuples or ints; keep the target alive so that its id is not reused
            self._rules[id(target)] = _Entry(rules=rules, target=target, finalizer=None)
        else:
            finalizer.atexit = False
            self._rules[id(target)] = _Entry(rules=rules, target=None, finalizer=finalizer)
        _logger.debug("Applied %d rule bucket(s) to %s", len(rules), _target_name(target))

    def unset(self, target: Any) -> None:
        """Removes the rules from the target. Does nothing if the target has no rules."""
        if self._discard(id(target)):
            _logger.debug("Removed rules from %s", _target_name(target))

    def _discard(self, key: int) -> bool:
        entry = self._rules.pop(key, None)
        if entry is None:
            return False
        if entry.finalizer is not None:
            entry.finalizer.detach()
        return True

    def get(self, target: Any) -> Optional[RuleSet]:
        """
        Returns the rules applied to the target. Without own rules, the rules of the closest (base) class in the
        method resolution order are returned. None if no rules can be found.
        """
        candidates = target.__mro__ if isinstance(target, type) else (target, *type(target).__mro__)
        for candidate in candidates:
            entry = self._rules.get(id(candidate))
            if entry is not None:
                return entry.rules
        return None

    def __contains__(self, target: Any) -> bool:
        return id(target) in self._rules

    def __len__(self) -> int:
        return len(self._rules)
