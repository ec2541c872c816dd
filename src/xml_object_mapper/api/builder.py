"""Object-to-XML builder API with progressive disclosure.

This module provides the main building API, from simple module-level
functions to a configurable, reusable builder class that keeps statistics
across builds.
"""

import time
from typing import Any, Dict, Optional, Union

from xml_object_mapper.mapping import ObjectMappingEngine
from xml_object_mapper.shared import (
    BuilderConfig,
    BuildMetrics,
    XmlMapperError,
    get_logger,
)
from xml_object_mapper.tree import XmlDocument, XmlEntity

MS_PER_SECOND = 1000


def to_entity(obj: Any, correlation_id: Optional[str] = None) -> Optional[XmlEntity]:
    """Build an XML entity from any object.

    Args:
        obj: Object to map; its type name names the entity unless overridden
        correlation_id: Optional correlation ID for request tracking

    Returns:
        The built entity, or None if the object's type is ignored

    Examples:
        >>> to_entity(24).xml
        '<int>24</int>'
    """
    return XmlObjectBuilder(correlation_id=correlation_id).entity(obj)


def to_document(
    obj: Any,
    version: Union[str, float] = "1.0",
    encoding: str = "UTF-8",
    correlation_id: Optional[str] = None,
) -> XmlDocument:
    """Build an XML document whose root entity is mapped from ``obj``.

    Args:
        obj: Object to map into the root entity
        version: XML version, 1.0 or 1.1
        encoding: Declared encoding, UTF-8 or UTF-16
        correlation_id: Optional correlation ID for request tracking

    Returns:
        XmlDocument wrapping the built root entity

    Raises:
        ValueError: If the version or encoding is not supported
    """
    config = BuilderConfig.create(
        document__version=version,
        document__encoding=encoding,
        correlation_id=correlation_id,
    )
    return XmlObjectBuilder(config=config).document(obj)


class XmlObjectBuilder:
    """Configurable, reusable builder of XML entities and documents.

    Attributes:
        config: Current builder configuration
        correlation_id: Correlation ID for request tracking
        last_metrics: Metrics of the most recent build

    Examples:
        >>> builder = XmlObjectBuilder(BuilderConfig.create(document__version="1.1"))
        >>> builder.document(student).version
        '1.1'
    """

    def __init__(
        self,
        config: Optional[BuilderConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize builder.

        Args:
            config: Builder configuration (defaults to BuilderConfig())
            correlation_id: Optional correlation ID, overriding the configured one
        """
        self.config = config or BuilderConfig()
        self.correlation_id = correlation_id or self.config.correlation_id
        self.logger = get_logger(__name__, self.correlation_id, "xml_object_builder")
        self.last_metrics = BuildMetrics()

        self._build_count = 0
        self._total_processing_time = 0.0
        self._total_entities = 0

    def entity(self, obj: Any) -> Optional[XmlEntity]:
        """Build an XML entity from ``obj``.

        Raises:
            InvalidNameError: If a mapped name is not a valid XML name
            ConversionTypeMismatchError: If a string converter gets a value
                of the wrong type
            XmlMappingError: If the object cannot be represented as a tree
        """
        engine = ObjectMappingEngine(self.config.mapping, self.correlation_id)
        start_time = time.time()

        self.logger.info(
            "Starting object mapping",
            extra={"root_type": type(obj).__name__, "build_count": self._build_count + 1},
        )

        try:
            root = engine.map_root(obj)
        except XmlMapperError:
            self.logger.error(
                "Object mapping failed",
                extra={"root_type": type(obj).__name__},
            )
            raise
        finally:
            engine.metrics.processing_time_ms = (time.time() - start_time) * MS_PER_SECOND
            self.last_metrics = engine.metrics
            self._build_count += 1
            self._total_processing_time += engine.metrics.processing_time_ms
            self._total_entities += engine.metrics.entities_created

        self.logger.info(
            "Object mapping completed",
            extra={
                "entities_created": self.last_metrics.entities_created,
                "attributes_written": self.last_metrics.attributes_written,
                "targets_ignored": self.last_metrics.targets_ignored,
                "processing_time_ms": self.last_metrics.processing_time_ms,
            },
        )

        if root is None:
            self.logger.warning(
                "Root object type is ignored, no entity was built",
                extra={"root_type": type(obj).__name__},
            )

        return root

    def document(self, obj: Any) -> XmlDocument:
        """Build an XML document whose root entity is mapped from ``obj``."""
        return XmlDocument(
            self.entity(obj),
            version=self.config.document.version,
            encoding=self.config.document.encoding,
            correlation_id=self.correlation_id,
        )

    def reconfigure(self, config: BuilderConfig) -> None:
        """Replace the builder configuration for subsequent builds."""
        self.config = config

        self.logger.info(
            "Builder reconfigured",
            extra={"config": config.to_dict()},
        )

    @property
    def statistics(self) -> Dict[str, Any]:
        """Get builder usage statistics."""
        return {
            "total_builds": self._build_count,
            "total_entities": self._total_entities,
            "total_processing_time_ms": self._total_processing_time,
            "average_processing_time_ms": (
                self._total_processing_time / self._build_count
                if self._build_count > 0 else 0.0
            ),
            "correlation_id": self.correlation_id,
        }

    def reset_statistics(self) -> None:
        """Reset builder usage statistics."""
        self._build_count = 0
        self._total_processing_time = 0.0
        self._total_entities = 0
        self.last_metrics.reset()

        self.logger.info("Builder statistics reset")
