"""Entity tree model and document layer for XML object mapping.

Key Components:
    XmlEntity: Base class with attributes, parent linkage, depth and rendering
    XmlCompositeEntity: Entity owning an ordered list of child entities
    XmlTextEntity: Entity holding text content
    XmlDocument: Root container with declaration and bulk tree operations
"""

from .document import XmlDocument
from .entities import (
    XmlCompositeEntity,
    XmlEntity,
    XmlTextEntity,
    require_valid_name,
)

__all__ = [
    "XmlCompositeEntity",
    "XmlDocument",
    "XmlEntity",
    "XmlTextEntity",
    "require_valid_name",
]
