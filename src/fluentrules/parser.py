"""
Contains the default parser which resolves property references into `PropertyDescriptor`s and message texts into
`ParsedMessage`s. Any object following the `Parser` protocol may be used instead.
"""
from dataclasses import dataclass
from string import Formatter
from typing import Any

from .descriptors import PropertyDescriptor
from .errors import InvalidArgumentError
from .types import PropertyRef


@dataclass(frozen=True)
class ParsedMessage:
    """
    A message template in `str.format` syntax, e.g. `"{display_name} must be at least {config[length]} characters"`.
    `fields` contains the names of the placeholders used in the template.
    """

    template: str
    fields: tuple[str, ...]

    def render(self, **context: Any) -> str:
        """Substitutes the placeholders with the values from `context`"""
        return self.template.format_map(context)

    def __str__(self):
        return self.template


class _AccessRecorder:
    """
    Stands in for the validated object when calling a property accessor and records the attribute path it touches.
    """

    def __init__(self, path: tuple[str, ...] = ()):
        object.__setattr__(self, "_path", path)

    def __getattr__(self, name: str) -> "_AccessRecorder":
        if name.startswith("__"):
            raise AttributeError(name)
        return _AccessRecorder(self._path + (name,))


class PropertyParser:
    """
    Resolves property names (`"address.city"`) and property accessors (`lambda customer: customer.address.city`).
    """

    def parse_property(self, ref: PropertyRef) -> PropertyDescriptor:
        """
        Returns the descriptor of the referenced property. Raises an InvalidArgumentError if no property name can be
        determined.
        """
        if isinstance(ref, str):
            if not ref or any(not part for part in ref.split(".")):
                raise InvalidArgumentError(f"'{ref}' is not a valid property name")
            return PropertyDescriptor(name=ref)
        if callable(ref):
            return PropertyDescriptor(name=self._parse_accessor(ref))
        raise InvalidArgumentError(f"Cannot resolve a property from {ref!r}. Use a property name or an accessor.")

    @staticmethod
    def _parse_accessor(accessor: PropertyRef) -> str:
        assert callable(accessor)
        try:
            result = accessor(_AccessRecorder())
        except Exception as error:
            raise InvalidArgumentError(f"Unable to parse accessor function {accessor!r}") from error
        # pylint: disable=protected-access
        if not isinstance(result, _AccessRecorder) or not result._path:
            raise InvalidArgumentError(
                f"Accessor function {accessor!r} must return an attribute of its argument, e.g. `lambda x: x.name`"
            )
        return ".".join(result._path)

    def parse_message(self, text: str) -> ParsedMessage:
        """
        Parses the message template. Raises an InvalidArgumentError if the template is malformed.
        """
        if not isinstance(text, str):
            raise InvalidArgumentError(f"A message must be a string, got {type(text).__name__}")
        try:
            fields = tuple(
                field_name for _, field_name, _, _ in Formatter().parse(text) if field_name is not None and field_name
            )
        except ValueError as error:
            raise InvalidArgumentError(f"Malformed message template '{text}': {error}") from error
        return ParsedMessage(template=text, fields=fields)
