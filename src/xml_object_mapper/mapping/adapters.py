"""Post-build adapters that adjust freshly mapped entities.

An adapter runs on the entity produced for a value right after it has been
attached to its parent, and may rename it, add attributes or restructure its
children in place.
"""

from abc import ABC, abstractmethod
from typing import Callable, Union

from xml_object_mapper.tree import XmlEntity


class XmlAdapter(ABC):
    """Base class for entity adapters referenced by the ``XmlAdapt`` directive."""

    @abstractmethod
    def process(self, entity: XmlEntity) -> None:
        """Process an entity after it has been created."""


AdapterReference = Union[type, XmlAdapter, Callable[[XmlEntity], None]]


def apply_adapter(reference: AdapterReference, entity: XmlEntity) -> None:
    """Run the referenced adapter on ``entity``.

    Classes are instantiated without arguments; instances of XmlAdapter have
    ``process`` called and any other callable is called with the entity.
    """
    adapter = reference() if isinstance(reference, type) else reference

    if isinstance(adapter, XmlAdapter):
        adapter.process(entity)
    else:
        adapter(entity)
