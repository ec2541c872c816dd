"""Public building API: simple functions and the configurable builder class."""

from .builder import XmlObjectBuilder, to_document, to_entity

__all__ = [
    "XmlObjectBuilder",
    "to_document",
    "to_entity",
]
