"""Mapping directives and where they are stored.

Directives tell the mapping engine how to represent a value: skip it, rename
it, turn it into an attribute, wrap it, convert it to text or post-process
the produced entity. They can be attached at two levels:

Type level, by using a directive as a class decorator::

    @XmlName("student")
    @dataclass
    class Student:
        ...

Property level, through dataclass field metadata, ``typing.Annotated``
annotations, or a directive decorating a property getter::

    @dataclass
    class Student:
        name: str = xml_field(XmlAttribute())
        grade: Annotated[float, XmlString(AddPercentage)] = 0.0

        @property
        @XmlName("fullName")
        def full_name(self) -> str:
            ...

Type-level directives are not inherited by subclasses.
"""

import dataclasses
import functools
import inspect
import sys
from dataclasses import dataclass
from typing import Annotated, Any, Dict, Tuple, get_args, get_origin

from .adapters import AdapterReference
from .converters import ConverterReference, ToStringConverter

XML_METADATA_KEY = "xml"
_DIRECTIVES_ATTRIBUTE = "__xml_directives__"


class Directive:
    """Base class for all mapping directives.

    Calling a directive on a class, function or property attaches it there
    and returns the target, so directives double as decorators.
    """

    def __call__(self, target: Any) -> Any:
        attach_directives(target, self)
        return target


@dataclass(frozen=True)
class XmlIgnore(Directive):
    """Skip the value entirely."""


@dataclass(frozen=True)
class XmlName(Directive):
    """Override the entity name; empty keeps the property or type name."""

    name: str = ""


@dataclass(frozen=True)
class XmlAttribute(Directive):
    """Map the value as an attribute of the enclosing entity.

    An empty name uses the property name (or the type name for roots).
    """

    name: str = ""


@dataclass(frozen=True)
class XmlWrapper(Directive):
    """Wrap the value's entities in an extra composite entity.

    Mostly useful on collections, where a single wrapper holds one entity per
    item. An empty name uses the property name.
    """

    name: str = ""


@dataclass(frozen=True)
class XmlString(Directive):
    """Always map the value as text, converted with ``converter``."""

    converter: ConverterReference = ToStringConverter


@dataclass(frozen=True)
class XmlAdapt(Directive):
    """Run ``adapter`` on the entity produced for the value."""

    adapter: AdapterReference


def attach_directives(target: Any, *directives: Directive) -> None:
    """Store directives on a class, a function or a property's getter.

    Directives attached later take precedence over earlier ones of the same
    kind, so with stacked decorators the one written on top wins.
    """
    if isinstance(target, property):
        if target.fget is None:
            raise TypeError("Cannot attach directives to a property without a getter")
        target = target.fget

    if isinstance(target, type):
        existing = target.__dict__.get(_DIRECTIVES_ATTRIBUTE, ())
    else:
        existing = getattr(target, _DIRECTIVES_ATTRIBUTE, ())

    try:
        setattr(target, _DIRECTIVES_ATTRIBUTE, tuple(directives) + tuple(existing))
    except (AttributeError, TypeError) as e:
        raise TypeError(
            f"Cannot attach directives to {type(target).__name__} objects"
        ) from e


def xml_field(*directives: Directive, **kwargs: Any) -> Any:
    """Declare a dataclass field carrying mapping directives.

    Accepts the same keyword arguments as ``dataclasses.field``.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[XML_METADATA_KEY] = tuple(directives)
    return dataclasses.field(metadata=metadata, **kwargs)


def type_directives(value_type: type) -> Tuple[Directive, ...]:
    """Directives declared on ``value_type`` itself (not on its bases)."""
    return tuple(value_type.__dict__.get(_DIRECTIVES_ATTRIBUTE, ()))


def property_directives(owner_type: type, name: str) -> Tuple[Directive, ...]:
    """Directives declared for property ``name`` of ``owner_type``.

    Dataclass field metadata comes first, then ``Annotated`` metadata, then
    directives attached to a property getter.
    """
    found: Tuple[Directive, ...] = ()

    dataclass_fields = getattr(owner_type, "__dataclass_fields__", None)
    if dataclass_fields and name in dataclass_fields:
        found += tuple(dataclass_fields[name].metadata.get(XML_METADATA_KEY, ()))

    for klass in owner_type.__mro__:
        annotation = _own_annotations(klass).get(name)
        if annotation is not None:
            if get_origin(annotation) is Annotated:
                found += tuple(
                    item for item in get_args(annotation)[1:] if isinstance(item, Directive)
                )
            break

    for klass in owner_type.__mro__:
        if name in klass.__dict__:
            member = klass.__dict__[name]
            getter = member.fget if isinstance(member, property) else getattr(member, "func", None)
            if getter is not None:
                found += tuple(getattr(getter, _DIRECTIVES_ATTRIBUTE, ()))
            break

    return found


@functools.lru_cache(maxsize=None)
def _own_annotations(klass: type) -> Dict[str, Any]:
    """Annotations declared on ``klass`` itself, resolved entry by entry.

    String annotations are evaluated in the namespace of the class's module;
    one that cannot be resolved is left out without affecting the others.
    """
    try:
        declared = inspect.get_annotations(klass)
    except NameError:
        declared = _forward_ref_annotations(klass)

    module = sys.modules.get(klass.__module__)
    module_namespace = vars(module) if module is not None else {}

    resolved: Dict[str, Any] = {}
    for name, annotation in declared.items():
        if isinstance(annotation, str):
            try:
                annotation = eval(annotation, module_namespace, dict(vars(klass)))
            except (NameError, AttributeError, SyntaxError, TypeError):
                continue
        resolved[name] = annotation
    return resolved


def _forward_ref_annotations(klass: type) -> Dict[str, Any]:
    # Deferred annotations (Python 3.14+) referencing undefined names.
    import annotationlib

    return annotationlib.get_annotations(klass, format=annotationlib.Format.FORWARDREF)
