"""Entity tree model for XML object mapping.

This module implements the nodes of an XML tree: composite entities that own
child entities and text entities that hold character content. Both share
attribute storage, parent linkage, depth computation and XML rendering.
"""

import re
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Callable, Iterator, List, Mapping, Optional

from xml_object_mapper.shared import NAME_PATTERN, InvalidNameError

_NAME_REGEX = re.compile(NAME_PATTERN)

INDENT_WIDTH = 4

EntityVisitor = Callable[["XmlEntity"], bool]


def require_valid_name(name: str) -> str:
    """Return ``name`` unchanged if it is a valid entity or attribute name.

    Raises:
        InvalidNameError: If the name does not match NAME_PATTERN
    """
    if not isinstance(name, str) or _NAME_REGEX.fullmatch(name) is None:
        raise InvalidNameError(name)
    return name


class XmlEntity(ABC):
    """Base class for all XML entities (the tags of a document).

    Entities are compared by identity: two entities with the same name and
    content are still distinct nodes of the tree.
    """

    def __init__(self, name: str) -> None:
        self._name = require_valid_name(name)
        self._attributes: dict = {}
        self._parent: Optional["XmlCompositeEntity"] = None

    @property
    def name(self) -> str:
        """Entity name, validated on every assignment."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = require_valid_name(value)

    @property
    def attributes(self) -> Mapping[str, str]:
        """Read-only view of the attributes, in insertion order."""
        return MappingProxyType(self._attributes)

    @property
    def parent(self) -> Optional["XmlCompositeEntity"]:
        """The composite entity owning this entity, or None."""
        return self._parent

    @property
    def depth(self) -> int:
        """Number of entities from the top of the hierarchy down to this one.

        A parentless entity has depth 1. Computed on every access.
        """
        depth = 1
        ancestor = self._parent
        while ancestor is not None:
            depth += 1
            ancestor = ancestor._parent
        return depth

    @property
    @abstractmethod
    def is_self_closing(self) -> bool:
        """Whether the entity renders as ``<name />``."""

    @property
    @abstractmethod
    def inner_xml(self) -> str:
        """XML placed between the opening and closing tags."""

    @property
    def xml(self) -> str:
        """XML representation of the entity, indented by its depth."""
        indent = " " * ((self.depth - 1) * INDENT_WIDTH)
        attributes = "".join(
            f' {key}="{value}"' for key, value in self._attributes.items()
        )

        if self.is_self_closing:
            return f"{indent}<{self._name}{attributes} />"

        inner_xml = self.inner_xml
        closing_indent = indent if inner_xml.endswith("\n") else ""
        return f"{indent}<{self._name}{attributes}>{inner_xml}{closing_indent}</{self._name}>"

    def put_attribute(self, name: str, value: str) -> Optional[str]:
        """Add or update an attribute.

        Args:
            name: Attribute name, must match NAME_PATTERN
            value: Attribute value

        Returns:
            The previous value of the attribute, or None if it was absent

        Raises:
            InvalidNameError: If the attribute name is invalid
        """
        require_valid_name(name)
        previous = self._attributes.get(name)
        self._attributes[name] = value
        return previous

    def remove_attribute(self, name: str) -> Optional[str]:
        """Remove an attribute, returning its value or None if it was absent."""
        return self._attributes.pop(name, None)

    def rename_attribute(self, old_name: str, new_name: str) -> Optional[str]:
        """Rename an attribute, moving it to the end of the attribute order.

        Returns:
            The value now held under ``new_name``, or None if ``old_name``
            was absent (in which case nothing changes)

        Raises:
            InvalidNameError: If ``new_name`` is invalid; the attributes are
                left untouched
        """
        require_valid_name(new_name)

        if old_name not in self._attributes:
            return None

        value = self._attributes.pop(old_name)
        self._attributes[new_name] = value
        return value

    def accept(self, visitor: EntityVisitor) -> None:
        """Visit this entity and its descendants in pre-order.

        The visitor returns True to descend into a composite's children and
        False to skip them. Children are snapshotted after their parent is
        visited, so the visitor may detach entities while traversing.
        """
        stack: List[XmlEntity] = [self]
        while stack:
            entity = stack.pop()
            if visitor(entity) and isinstance(entity, XmlCompositeEntity):
                stack.extend(reversed(entity._children))

    def iter_entities(self) -> Iterator["XmlEntity"]:
        """Iterate over this entity and all its descendants in pre-order."""
        stack: List[XmlEntity] = [self]
        while stack:
            entity = stack.pop()
            yield entity
            if isinstance(entity, XmlCompositeEntity):
                stack.extend(reversed(entity._children))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, attributes={self._attributes!r})"


class XmlCompositeEntity(XmlEntity):
    """XML entity that contains other entities."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._children: List[XmlEntity] = []

    @property
    def children(self) -> List[XmlEntity]:
        """Snapshot of the child entities, in insertion order."""
        return list(self._children)

    @property
    def is_self_closing(self) -> bool:
        return not self._children

    @property
    def inner_xml(self) -> str:
        return "\n" + "\n".join(child.xml for child in self._children) + "\n"

    def add_child(self, child: XmlEntity) -> bool:
        """Add a child entity and become its parent.

        Returns:
            False, without changing anything, if the child already has a
            parent, is this entity itself or is this entity's own parent;
            True otherwise
        """
        if not isinstance(child, XmlEntity):
            raise TypeError("Child must be an XmlEntity instance")

        if child._parent is not None or child is self or child is self._parent:
            return False

        self._children.append(child)
        child._parent = self
        return True

    def remove_child(self, child: XmlEntity) -> bool:
        """Remove a child entity and clear its parent.

        Returns:
            True if the entity was a child of this one, False otherwise
        """
        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                child._parent = None
                return True
        return False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, attributes={self._attributes!r}, "
            f"children={len(self._children)})"
        )


class XmlTextEntity(XmlEntity):
    """XML entity holding text content. Never self-closing, even when empty."""

    def __init__(self, name: str, text: str = "") -> None:
        super().__init__(name)
        self.text = text

    @property
    def is_self_closing(self) -> bool:
        return False

    @property
    def inner_xml(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, attributes={self._attributes!r}, "
            f"text={self.text!r})"
        )
