"""
Contains functions to read the value a rule applies to. Validators can use them to evaluate rule conditions.
"""
from collections.abc import Mapping
from typing import Any

from typeguard import TypeCheckError, check_type

from fluentrules.descriptors import PropertyDescriptor


def _resolve(obj: Any, property_name: str) -> Any:
    """Follows the dotted property name. Mappings are queried by key, everything else by attribute."""
    current_obj: Any = obj
    for step in property_name.split("."):
        if current_obj is None:
            break
        if isinstance(current_obj, Mapping):
            current_obj = current_obj.get(step)
        else:
            current_obj = getattr(current_obj, step, None)
    return current_obj


def property_value(obj: Any, property_descriptor: PropertyDescriptor, expected_type: Any = Any) -> Any:
    """
    Returns the value rules of `property_descriptor` apply to: the object itself for object rules and the addressed
    property otherwise. If the property or one of its parents is missing, None is returned - rules like `required`
    then decide whether this is acceptable.
    If the value doesn't match `expected_type`, a TypeCheckError prefixed with the property name will be raised.
    """
    if property_descriptor.name is None:
        value = obj
    else:
        value = _resolve(obj, property_descriptor.name)
    try:
        check_type(value, expected_type)
    except TypeCheckError as error:
        raise TypeCheckError(f"{property_descriptor.name or 'object'}: {error}") from error
    return value
