"""Reflection-driven mapping of object graphs onto entity trees.

Key Components:
    ObjectMappingEngine: Walks values and their directives to build entities
    Directives: XmlIgnore, XmlName, XmlAttribute, XmlWrapper, XmlString, XmlAdapt
    StringConverter / ToStringConverter: Text conversion of mapped values
    XmlAdapter: Post-processing hook for produced entities
    resolve_metadata: Property-then-type fallback resolution of directives
"""

from .adapters import XmlAdapter, apply_adapter
from .converters import (
    StringConverter,
    ToStringConverter,
    convert_value,
    expected_value_type,
    instantiate_converter,
)
from .directives import (
    Directive,
    XmlAdapt,
    XmlAttribute,
    XmlIgnore,
    XmlName,
    XmlString,
    XmlWrapper,
    attach_directives,
    property_directives,
    type_directives,
    xml_field,
)
from .engine import ObjectMappingEngine, is_collection, is_scalar
from .introspection import is_named_tuple, iter_properties, property_names
from .resolution import (
    MappingTarget,
    ResolvedMetadata,
    first_directive,
    resolve,
    resolve_metadata,
)

__all__ = [
    "XmlAdapter",
    "apply_adapter",
    "StringConverter",
    "ToStringConverter",
    "convert_value",
    "expected_value_type",
    "instantiate_converter",
    "Directive",
    "XmlAdapt",
    "XmlAttribute",
    "XmlIgnore",
    "XmlName",
    "XmlString",
    "XmlWrapper",
    "attach_directives",
    "property_directives",
    "type_directives",
    "xml_field",
    "ObjectMappingEngine",
    "is_collection",
    "is_scalar",
    "is_named_tuple",
    "iter_properties",
    "property_names",
    "MappingTarget",
    "ResolvedMetadata",
    "first_directive",
    "resolve",
    "resolve_metadata",
]
