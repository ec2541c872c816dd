"""XML document container with whole-tree query and mutation operations.

The bulk operations walk the entire tree with ``XmlEntity.accept`` and are not
transactional: if an invalid name is rejected part-way through, entities
visited before the failure keep their changes.
"""

from pathlib import Path
from typing import List, Optional, Union

from xml_object_mapper.shared import (
    get_logger,
    normalize_encoding,
    normalize_version,
)
from xml_object_mapper.shared.config import DEFAULT_ENCODING, DEFAULT_VERSION

from .entities import XmlEntity

PATH_SEPARATOR = "/"


class XmlDocument:
    """Root XML document holding an optional root entity and its declaration.

    Examples:
        >>> from xml_object_mapper.tree import XmlCompositeEntity
        >>> root = XmlCompositeEntity("root")
        >>> XmlDocument(root).xml
        '<?xml version="1.0" encoding="UTF-8"?>\\n<root />'
    """

    def __init__(
        self,
        root: Optional[XmlEntity] = None,
        version: Union[str, float] = DEFAULT_VERSION,
        encoding: str = DEFAULT_ENCODING,
        correlation_id: Optional[str] = None,
    ) -> None:
        self._root: Optional[XmlEntity] = None
        self.root = root
        self.version = version  # type: ignore[assignment]
        self.encoding = encoding
        self.correlation_id = correlation_id
        self._logger = get_logger(__name__, correlation_id, "xml_document")

    @property
    def root(self) -> Optional[XmlEntity]:
        """Root entity of the document, or None."""
        return self._root

    @root.setter
    def root(self, value: Optional[XmlEntity]) -> None:
        if value is not None:
            if not isinstance(value, XmlEntity):
                raise TypeError("Root must be an XmlEntity instance")
            if value.parent is not None:
                raise ValueError("Root entity must not have a parent")
        self._root = value

    @property
    def version(self) -> str:
        """XML version, either "1.0" or "1.1"."""
        return self._version

    @version.setter
    def version(self, value: Union[str, float]) -> None:
        self._version = normalize_version(value)

    @property
    def encoding(self) -> str:
        """Declared encoding, either "UTF-8" or "UTF-16"."""
        return self._encoding

    @encoding.setter
    def encoding(self, value: str) -> None:
        self._encoding = normalize_encoding(value)

    @property
    def declaration(self) -> str:
        return f'<?xml version="{self._version}" encoding="{self._encoding}"?>'

    @property
    def xml(self) -> str:
        """XML declaration followed by the indented root entity, if any."""
        if self._root is None:
            return self.declaration
        return f"{self.declaration}\n{self._root.xml}"

    def render(self) -> str:
        """Render the document as XML text."""
        return self.xml

    def write_to_file(self, path: Union[str, Path]) -> None:
        """Write the rendered document to ``path``, replacing any existing file."""
        Path(path).write_text(self.xml, encoding=self._encoding.lower())

    def put_attribute(self, name: str, value: str, entity_name: str) -> None:
        """Add or update an attribute on every entity named ``entity_name``."""
        matches = 0

        def visit(entity: XmlEntity) -> bool:
            nonlocal matches
            if entity.name == entity_name:
                entity.put_attribute(name, value)
                matches += 1
            return True

        self._visit(visit)
        self._log_bulk_operation("put_attribute", entity_name, matches)

    def remove_attribute(self, name: str, entity_name: str) -> None:
        """Remove an attribute from every entity named ``entity_name``."""
        matches = 0

        def visit(entity: XmlEntity) -> bool:
            nonlocal matches
            if entity.name == entity_name:
                entity.remove_attribute(name)
                matches += 1
            return True

        self._visit(visit)
        self._log_bulk_operation("remove_attribute", entity_name, matches)

    def rename_attribute(self, old_name: str, new_name: str, entity_name: str) -> None:
        """Rename an attribute on every entity named ``entity_name``."""
        matches = 0

        def visit(entity: XmlEntity) -> bool:
            nonlocal matches
            if entity.name == entity_name:
                entity.rename_attribute(old_name, new_name)
                matches += 1
            return True

        self._visit(visit)
        self._log_bulk_operation("rename_attribute", entity_name, matches)

    def rename_entity(self, old_name: str, new_name: str) -> None:
        """Rename every entity named ``old_name``."""
        matches = 0

        def visit(entity: XmlEntity) -> bool:
            nonlocal matches
            if entity.name == old_name:
                entity.name = new_name
                matches += 1
            return True

        self._visit(visit)
        self._log_bulk_operation("rename_entity", old_name, matches)

    def remove_entity(self, name: str) -> None:
        """Remove every entity named ``name`` from the document.

        A matching root leaves the document without a root. Removed entities
        keep their own children; they are only detached from their parents.
        """
        matches = 0

        def visit(entity: XmlEntity) -> bool:
            nonlocal matches
            if entity.name == name:
                if entity is self._root:
                    self._root = None
                if entity.parent is not None:
                    entity.parent.remove_child(entity)
                matches += 1
            return True

        self._visit(visit)
        self._log_bulk_operation("remove_entity", name, matches)

    def select_entities(self, path: str) -> List[XmlEntity]:
        """Select entities matching a slash-separated path of entity names.

        The path is matched from its last segment against an entity's own
        name and then upwards against its ancestors, so ``"course/room"``
        selects every ``room`` whose parent is a ``course``, wherever it
        appears in the tree.

        Returns:
            Matching entities in document order; empty without a root
        """
        selected: List[XmlEntity] = []

        def visit(entity: XmlEntity) -> bool:
            if _matches_path(path, entity):
                selected.append(entity)
            return True

        self._visit(visit)
        return selected

    def _visit(self, visitor) -> None:
        if self._root is not None:
            self._root.accept(visitor)

    def _log_bulk_operation(self, operation: str, entity_name: str, matches: int) -> None:
        self._logger.debug(
            f"Applied {operation} to {matches} entities",
            extra={"operation": operation, "entity_name": entity_name, "matches": matches},
        )


def _matches_path(path: str, entity: XmlEntity) -> bool:
    remaining = path
    current: Optional[XmlEntity] = entity

    while True:
        if PATH_SEPARATOR in remaining:
            remaining, segment = remaining.rsplit(PATH_SEPARATOR, 1)
        else:
            remaining, segment = "", remaining

        if current is None or current.name != segment:
            return False

        if not remaining:
            return True

        current = current.parent
