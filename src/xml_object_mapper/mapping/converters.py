"""String converters used to turn mapped values into XML text.

A converter is referenced from an ``XmlString`` directive either as a
``StringConverter`` subclass (instantiated without arguments), as an instance,
or as any plain callable taking the value and returning a string. A class
annotation on the callable's first parameter is checked like ``value_type``.
"""

import inspect
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, ClassVar, Generic, TypeVar, Union, get_origin, get_type_hints

from xml_object_mapper.shared import ConversionTypeMismatchError

T = TypeVar("T")


class StringConverter(ABC, Generic[T]):
    """Converts values of ``value_type`` into strings.

    Subclasses narrow ``value_type`` to the type their ``convert`` expects;
    mapping a value of any other type raises ConversionTypeMismatchError.
    """

    value_type: ClassVar[type] = object

    @abstractmethod
    def convert(self, value: T) -> str:
        """Convert a value to its XML text."""


class ToStringConverter(StringConverter[Any]):
    """Default converter: ``str(value)``, with enum members rendered by name."""

    def convert(self, value: Any) -> str:
        if isinstance(value, Enum):
            return value.name
        return str(value)


ConverterReference = Union[type, StringConverter, Callable[[Any], str]]


def instantiate_converter(reference: ConverterReference) -> Union[StringConverter, Callable[[Any], str]]:
    """Resolve a converter reference into something that can convert values."""
    if isinstance(reference, type):
        return reference()
    return reference


def expected_value_type(converter: Union[StringConverter, Callable[[Any], str]]) -> type:
    """The type of value a converter accepts.

    StringConverter instances declare it with ``value_type``; plain callables
    with a class annotation on their first parameter. Anything else accepts
    every value.
    """
    if isinstance(converter, StringConverter):
        return converter.value_type

    try:
        parameter = next(iter(inspect.signature(converter).parameters.values()))
    except (TypeError, ValueError, StopIteration):
        return object

    annotation = parameter.annotation
    if isinstance(annotation, str):
        function = converter if inspect.isroutine(converter) else type(converter).__call__
        try:
            annotation = get_type_hints(function).get(parameter.name, object)
        except (NameError, SyntaxError, TypeError):
            return object

    if (
        annotation is inspect.Parameter.empty
        or not isinstance(annotation, type)
        or get_origin(annotation) is not None
    ):
        return object
    return annotation


def convert_value(converter: Union[StringConverter, Callable[[Any], str]], value: Any) -> str:
    """Convert ``value`` with ``converter``, checking the converter's input type.

    Raises:
        ConversionTypeMismatchError: If ``value`` is not an instance of the
            type the converter expects (see expected_value_type)
    """
    expected_type = expected_value_type(converter)
    if not isinstance(value, expected_type):
        raise ConversionTypeMismatchError(value, expected_type, converter)

    if isinstance(converter, StringConverter):
        return converter.convert(value)
    return converter(value)
