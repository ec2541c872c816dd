"""Configuration classes for XML object mapping.

This module provides configuration objects for document output and for the
object mapping engine, with validation on construction and dictionary/JSON
round-tripping for callers that keep settings outside of code.
"""

import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Union

SUPPORTED_VERSIONS = ("1.0", "1.1")
SUPPORTED_ENCODINGS = ("UTF-8", "UTF-16")
DEFAULT_VERSION = "1.0"
DEFAULT_ENCODING = "UTF-8"


def normalize_version(version: Union[str, float]) -> str:
    """Validate an XML version, accepting 1.0/1.1 as numbers or strings.

    Raises:
        ValueError: If the version is not 1.0 or 1.1
    """
    normalized = str(version)
    if normalized not in SUPPORTED_VERSIONS:
        raise ValueError("Version must be 1.0 or 1.1")
    return normalized


def normalize_encoding(encoding: str) -> str:
    """Validate an XML encoding declaration.

    Raises:
        ValueError: If the encoding is not UTF-8 or UTF-16
    """
    if encoding not in SUPPORTED_ENCODINGS:
        raise ValueError("Encoding must be UTF-8 or UTF-16")
    return encoding


@dataclass(frozen=True)
class DocumentConfig:
    """Configuration for the XML declaration of built documents."""

    version: str = DEFAULT_VERSION
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        """Validate document configuration."""
        object.__setattr__(self, "version", normalize_version(self.version))
        normalize_encoding(self.encoding)


@dataclass(frozen=True)
class MappingConfig:
    """Configuration for the object mapping engine."""

    include_private: bool = False  # Also map attributes starting with "_"
    max_depth: int = 200  # Maximum object nesting before mapping is aborted

    def __post_init__(self) -> None:
        """Validate mapping configuration."""
        if self.max_depth <= 0:
            raise ValueError("max_depth must be > 0")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError, ValueError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


_COMPONENTS = ("document", "mapping")


@dataclass(frozen=True)
class BuilderConfig:
    """Complete configuration for XmlObjectBuilder.

    Immutable, so a single instance can be shared between builders.
    """

    document: DocumentConfig = field(default_factory=DocumentConfig)
    mapping: MappingConfig = field(default_factory=MappingConfig)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete builder configuration."""
        try:
            self.document.__post_init__()
            self.mapping.__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

    @classmethod
    def create(cls, **kwargs: Any) -> "BuilderConfig":
        """Create a configuration from ``component__field`` keyword arguments.

        Example:
            >>> config = BuilderConfig.create(document__version="1.1")
        """
        return cls().override(**kwargs)

    def override(self, **kwargs: Any) -> "BuilderConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Keyword arguments for configuration fields to override,
                using ``component__field`` notation for nested fields

        Returns:
            New BuilderConfig instance with overrides applied

        Example:
            >>> config = BuilderConfig()
            >>> new_config = config.override(
            ...     document__encoding="UTF-16",
            ...     mapping__include_private=True
            ... )
        """
        nested_overrides: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                if component not in _COMPONENTS:
                    raise ConfigValidationError(
                        f"Unknown configuration component '{component}'",
                        field_name=key,
                        suggestions=[f"Use one of {list(_COMPONENTS)}"],
                    )
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                nested_overrides[key] = value

        new_fields: Dict[str, Any] = {}
        try:
            for component in _COMPONENTS:
                if component in nested_overrides and isinstance(
                    nested_overrides[component], dict
                ):
                    new_fields[component] = replace(
                        getattr(self, component), **nested_overrides.pop(component)
                    )
            new_fields.update(nested_overrides)
            return replace(self, **new_fields)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {
            "document": {
                "version": self.document.version,
                "encoding": self.document.encoding,
            },
            "mapping": {
                "include_private": self.mapping.include_private,
                "max_depth": self.mapping.max_depth,
            },
            "correlation_id": self.correlation_id,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BuilderConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected so that typos do not silently fall back to
        defaults.
        """
        unknown = set(data) - {"document", "mapping", "correlation_id"}
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration keys: {sorted(unknown)}"
            )

        try:
            return cls(
                document=DocumentConfig(**data.get("document", {})),
                mapping=MappingConfig(**data.get("mapping", {})),
                correlation_id=data.get("correlation_id"),
            )
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

    @classmethod
    def from_json(cls, json_str: str) -> "BuilderConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))
