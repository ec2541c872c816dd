"""Exception types raised while building and manipulating XML trees.

All errors are raised at the call that caused them and are never suppressed
internally, so a failure part-way through a bulk document operation leaves the
entities processed before it already changed.
"""

from typing import Any, Optional

NAME_PATTERN = "[a-zA-Z][a-zA-Z0-9]*"


class XmlMapperError(Exception):
    """Base exception for all xml_object_mapper errors."""


class InvalidNameError(XmlMapperError, ValueError):
    """Raised when an entity name or attribute key does not match NAME_PATTERN."""

    def __init__(self, name: Any) -> None:
        super().__init__(f"Name must match the pattern '{NAME_PATTERN}'")
        self.name = name


class ConversionTypeMismatchError(XmlMapperError, TypeError):
    """Raised when a string converter receives a value of an unexpected type."""

    def __init__(self, value: Any, expected_type: type, converter: Optional[Any] = None) -> None:
        if converter is None:
            converter_name = "converter"
        else:
            converter_name = getattr(converter, "__name__", type(converter).__name__)
        super().__init__(
            f"class {type(value).__name__} cannot be converted by {converter_name} "
            f"(expects {expected_type.__name__})"
        )
        self.value = value
        self.expected_type = expected_type
        self.converter = converter


class XmlMappingError(XmlMapperError):
    """Raised when an object graph cannot be mapped onto an entity tree."""
