"""Enumeration of the properties of plain objects.

Properties are listed with constructor parameters first, in declaration
order, followed by every other readable property sorted by name.
"""

import dataclasses
import inspect
from collections.abc import Mapping
from functools import cached_property
from typing import Any, Iterator, List, Set, Tuple

from .directives import property_directives
from .resolution import MappingTarget

_CONSTRUCTOR_PARAMETER_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


def _is_visible(name: str, include_private: bool) -> bool:
    if name.startswith("__"):
        return False
    return include_private or not name.startswith("_")


def is_named_tuple(value: Any) -> bool:
    """Whether ``value`` is a record made with namedtuple or typing.NamedTuple."""
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def constructor_names(value_type: type) -> List[str]:
    """Names of the constructor parameters of ``value_type``, in order."""
    if dataclasses.is_dataclass(value_type):
        return [f.name for f in dataclasses.fields(value_type) if f.init]

    try:
        signature = inspect.signature(value_type)
    except (TypeError, ValueError):
        return []

    return [
        parameter.name
        for parameter in signature.parameters.values()
        if parameter.kind in _CONSTRUCTOR_PARAMETER_KINDS
    ]


def readable_names(value: Any) -> Set[str]:
    """Names of the data attributes and properties readable on ``value``."""
    names: Set[str] = set()

    if dataclasses.is_dataclass(value):
        names.update(f.name for f in dataclasses.fields(value))

    if is_named_tuple(value):
        names.update(type(value)._fields)

    names.update(getattr(value, "__dict__", {}))

    for klass in type(value).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.update(slot for slot in slots if hasattr(value, slot))

        names.update(
            name
            for name, member in klass.__dict__.items()
            if isinstance(member, (property, cached_property))
        )

    return names


def property_names(value: Any, include_private: bool = False) -> List[str]:
    """Visible property names of ``value``: constructor order, then alphabetical."""
    available = {name for name in readable_names(value) if _is_visible(name, include_private)}

    ordered = [name for name in constructor_names(type(value)) if name in available]
    ordered += sorted(available.difference(ordered))
    return ordered


def iter_properties(value: Any, include_private: bool = False) -> Iterator[Tuple[MappingTarget, Any]]:
    """Yield a mapping target and the current value for each property of ``value``.

    Mappings contribute one property per key, in key order and without
    directives.
    """
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield MappingTarget.for_property(str(key)), item
        return

    value_type = type(value)
    for name in property_names(value, include_private):
        target = MappingTarget.for_property(name, property_directives(value_type, name))
        yield target, getattr(value, name)
