"""XML Object Mapper.

Builds XML documents from in-memory object graphs and offers structural
operations (rename, removal, path-based selection) over the resulting tree.

Progressive API Disclosure:
- Level 1: Simple functions - to_entity(), to_document()
- Level 2: Configured builder - XmlObjectBuilder class
- Level 3: Directives - XmlName, XmlAttribute, XmlWrapper, XmlString, XmlAdapt, XmlIgnore
"""

__version__ = "0.1.0"
__author__ = "XML Object Mapper Team"

# Progressive API disclosure - Level 1 and Level 2
from .api import XmlObjectBuilder, to_document, to_entity

# Directives and extension points
from .mapping import (
    StringConverter,
    ToStringConverter,
    XmlAdapt,
    XmlAdapter,
    XmlAttribute,
    XmlIgnore,
    XmlName,
    XmlString,
    XmlWrapper,
    xml_field,
)

# Configuration and errors
from .shared import (
    BuilderConfig,
    ConversionTypeMismatchError,
    DocumentConfig,
    InvalidNameError,
    MappingConfig,
    XmlMapperError,
    XmlMappingError,
)

# Tree model
from .tree import XmlCompositeEntity, XmlDocument, XmlEntity, XmlTextEntity

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple building functions
    "to_entity",
    "to_document",

    # Level 2: Configurable builder
    "XmlObjectBuilder",

    # Directives and extension points
    "StringConverter",
    "ToStringConverter",
    "XmlAdapt",
    "XmlAdapter",
    "XmlAttribute",
    "XmlIgnore",
    "XmlName",
    "XmlString",
    "XmlWrapper",
    "xml_field",

    # Configuration and errors
    "BuilderConfig",
    "ConversionTypeMismatchError",
    "DocumentConfig",
    "InvalidNameError",
    "MappingConfig",
    "XmlMapperError",
    "XmlMappingError",

    # Tree model
    "XmlCompositeEntity",
    "XmlDocument",
    "XmlEntity",
    "XmlTextEntity",
]
