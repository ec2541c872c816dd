"""Metadata resolution with property-then-type fallback.

A mapping target is either the root value's type or one property of an
object. Each directive kind is resolved independently: the target's own
directives are searched first, then the directives declared on the runtime
type of the value being mapped.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Tuple, Type, TypeVar, Union

from .adapters import AdapterReference
from .converters import StringConverter, ToStringConverter, instantiate_converter
from .directives import (
    Directive,
    XmlAdapt,
    XmlAttribute,
    XmlIgnore,
    XmlName,
    XmlString,
    XmlWrapper,
    type_directives,
)

D = TypeVar("D", bound=Directive)


@dataclass(frozen=True)
class MappingTarget:
    """The unit directives are resolved for: a type or a named property."""

    name: str
    directives: Tuple[Directive, ...] = field(default_factory=tuple)
    is_type: bool = False

    @classmethod
    def for_type(cls, value_type: type) -> "MappingTarget":
        return cls(
            name=value_type.__name__,
            directives=type_directives(value_type),
            is_type=True,
        )

    @classmethod
    def for_property(cls, name: str, directives: Iterable[Directive] = ()) -> "MappingTarget":
        return cls(name=name, directives=tuple(directives))


def first_directive(kind: Type[D], *sources: Iterable[Directive]) -> Optional[D]:
    """Return the first directive of ``kind`` found by walking ``sources`` in order."""
    for source in sources:
        for directive in source:
            if isinstance(directive, kind):
                return directive
    return None


def resolve(kind: Type[D], target: MappingTarget, fallback_type: Optional[type] = None) -> Optional[D]:
    """Resolve one directive kind for ``target``, falling back to ``fallback_type``."""
    sources = [target.directives]
    if fallback_type is not None:
        sources.append(type_directives(fallback_type))
    return first_directive(kind, *sources)


@dataclass(frozen=True)
class ResolvedMetadata:
    """All directives that apply to one value, after fallback resolution.

    ``attribute_name`` and ``wrapper_name`` are None when the directive is
    absent and an empty string when it is present without an explicit name.
    """

    ignored: bool = False
    entity_name: Optional[str] = None
    attribute_name: Optional[str] = None
    wrapper_name: Optional[str] = None
    converter: Optional[Any] = None
    adapter: Optional[AdapterReference] = None

    @property
    def is_attribute(self) -> bool:
        return self.attribute_name is not None

    @property
    def is_wrapped(self) -> bool:
        return self.wrapper_name is not None

    @property
    def has_explicit_converter(self) -> bool:
        return self.converter is not None

    @property
    def string_converter(self) -> Union[StringConverter, Any]:
        """The explicit converter, or the default ToStringConverter."""
        if self.converter is None:
            return ToStringConverter()
        return instantiate_converter(self.converter)


def resolve_metadata(target: MappingTarget, value: Any) -> ResolvedMetadata:
    """Resolve every directive kind for ``target`` mapping ``value``."""
    fallback_type = type(value)

    entity = resolve(XmlName, target, fallback_type)
    attribute = resolve(XmlAttribute, target, fallback_type)
    wrapper = resolve(XmlWrapper, target, fallback_type)
    string = resolve(XmlString, target, fallback_type)
    adapt = resolve(XmlAdapt, target, fallback_type)

    return ResolvedMetadata(
        ignored=resolve(XmlIgnore, target, fallback_type) is not None,
        entity_name=(entity.name or None) if entity is not None else None,
        attribute_name=attribute.name if attribute is not None else None,
        wrapper_name=wrapper.name if wrapper is not None else None,
        converter=string.converter if string is not None else None,
        adapter=adapt.adapter if adapt is not None else None,
    )
