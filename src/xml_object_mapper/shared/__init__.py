"""Shared utilities for XML object mapping.

This module provides the error types, configuration objects, metrics and
logging helpers used by the tree, mapping and API layers.
"""

from .config import (
    BuilderConfig,
    ConfigError,
    ConfigValidationError,
    DocumentConfig,
    MappingConfig,
    normalize_encoding,
    normalize_version,
)
from .errors import (
    NAME_PATTERN,
    ConversionTypeMismatchError,
    InvalidNameError,
    XmlMapperError,
    XmlMappingError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import BuildMetrics

__all__ = [
    "BuilderConfig",
    "ConfigError",
    "ConfigValidationError",
    "DocumentConfig",
    "MappingConfig",
    "normalize_encoding",
    "normalize_version",
    "NAME_PATTERN",
    "ConversionTypeMismatchError",
    "InvalidNameError",
    "XmlMapperError",
    "XmlMappingError",
    "CorrelationLogger",
    "get_logger",
    "BuildMetrics",
]
