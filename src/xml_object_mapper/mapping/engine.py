"""Object mapping engine that turns object graphs into entity trees.

The engine walks a value and its directives at the same time. Scalars and
values with an explicit string converter become text entities, iterables
contribute one entity per item to the enclosing entity, and any other object
becomes a composite entity holding one entity (or attribute) per property.
"""

from collections.abc import Iterable, Mapping
from enum import Enum
from numbers import Number
from typing import Any, Optional

from xml_object_mapper.shared import (
    BuildMetrics,
    MappingConfig,
    XmlMappingError,
    get_logger,
)
from xml_object_mapper.tree import XmlCompositeEntity, XmlEntity, XmlTextEntity

from .adapters import apply_adapter
from .converters import convert_value
from .introspection import is_named_tuple, iter_properties
from .resolution import MappingTarget, resolve_metadata

_SCALAR_TYPES = (Number, str, bytes, Enum)


def is_scalar(value: Any) -> bool:
    """Whether ``value`` is mapped as text without an explicit converter."""
    return isinstance(value, _SCALAR_TYPES)


def is_collection(value: Any) -> bool:
    """Whether ``value`` is mapped item by item into its enclosing entity.

    Named tuples are records and map like any other object.
    """
    return (
        isinstance(value, Iterable)
        and not isinstance(value, Mapping)
        and not is_named_tuple(value)
    )


class ObjectMappingEngine:
    """Maps values onto XmlEntity trees following their mapping directives."""

    def __init__(
        self,
        config: Optional[MappingConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize mapping engine.

        Args:
            config: Mapping configuration, defaults to MappingConfig()
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or MappingConfig()
        self.metrics = BuildMetrics()
        self.logger = get_logger(__name__, correlation_id, "object_mapping_engine")

    def map_root(self, value: Any) -> Optional[XmlEntity]:
        """Map a root value, named after its type unless renamed by directives.

        Returns:
            The root entity (the wrapper, for wrapped root values), or None
            when the root value's type is ignored

        Raises:
            XmlMappingError: If the root value would only produce an attribute
                or loose collection items, which need an enclosing entity
        """
        if value is None:
            raise XmlMappingError("Cannot map None as a root value")

        target = MappingTarget.for_type(type(value))
        root = self.map_node(value, None, target)

        while root is not None and root.parent is not None:
            root = root.parent
        return root

    def map_node(
        self,
        value: Any,
        parent: Optional[XmlCompositeEntity],
        target: MappingTarget,
        is_list_item: bool = False,
        depth: int = 1,
    ) -> Optional[XmlEntity]:
        """Map ``value`` as ``target`` under ``parent``.

        Returns:
            The entity produced for the value, or the enclosing entity when
            the value was ignored, became an attribute or was a collection
        """
        if depth > self.config.max_depth:
            raise XmlMappingError(
                f"Object nesting exceeds max_depth ({self.config.max_depth}) at '{target.name}'"
            )

        metadata = resolve_metadata(target, value)

        if metadata.ignored:
            self.metrics.targets_ignored += 1
            self.logger.debug("Ignoring mapping target", extra={"target": target.name})
            return parent

        element_name = target.name

        if metadata.is_wrapped and not is_list_item:
            wrapper = XmlCompositeEntity(metadata.wrapper_name or element_name)
            self._attach(wrapper, parent)
            parent = wrapper

        string_repr = convert_value(metadata.string_converter, value)

        if metadata.is_attribute:
            if parent is None:
                raise XmlMappingError(
                    f"Cannot map '{element_name}' as an attribute without an enclosing entity"
                )
            parent.put_attribute(metadata.attribute_name or element_name, string_repr)
            self.metrics.attributes_written += 1
            return parent

        entity_name = metadata.entity_name or element_name
        entity: Optional[XmlEntity]

        if is_scalar(value) or metadata.has_explicit_converter:
            entity = XmlTextEntity(entity_name, string_repr)
        elif is_collection(value):
            if parent is None:
                raise XmlMappingError(
                    f"Cannot map collection '{element_name}' without an enclosing entity"
                )
            for item in value:
                if item is not None:
                    self.map_node(item, parent, target, is_list_item=True, depth=depth + 1)
            entity = None
        else:
            entity = XmlCompositeEntity(entity_name)
            for property_target, property_value in iter_properties(
                value, self.config.include_private
            ):
                if property_value is not None:
                    self.map_node(property_value, entity, property_target, depth=depth + 1)

        if entity is None:
            return parent

        self._attach(entity, parent)

        if metadata.adapter is not None:
            apply_adapter(metadata.adapter, entity)

        return entity

    def _attach(self, entity: XmlEntity, parent: Optional[XmlCompositeEntity]) -> None:
        self.metrics.entities_created += 1
        if parent is not None:
            parent.add_child(entity)
