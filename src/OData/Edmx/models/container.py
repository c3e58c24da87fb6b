# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Entity container models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from lxml import etree

from ..common.constants import ELEMENT_ASSOCIATION_SET, ELEMENT_ENTITY_CONTAINER, ELEMENT_ENTITY_SET
from ..data._xml import children, make_element, required_attribute
from .association import AssociationSet


@dataclass(frozen=True)
class EntitySet:
    """
    Named, queryable collection of instances of one entity type.

    :param name: Entity set name, the resource path segment of the collection.
    :type name: str
    :param entity_type: Qualified name of the entity type, e.g. ``"Default.Aktør"``.
    :type entity_type: str
    """

    name: str
    entity_type: str

    @classmethod
    def from_element(cls, element: etree._Element) -> "EntitySet":
        return cls(
            name=required_attribute(element, "Name"),
            entity_type=required_attribute(element, "EntityType"),
        )

    def to_element(self) -> etree._Element:
        return make_element(ELEMENT_ENTITY_SET, {"Name": self.name, "EntityType": self.entity_type})

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "entity_type": self.entity_type}


@dataclass(frozen=True)
class EntityContainer:
    """
    Entity sets and association sets exposed by a service.

    :param name: Container name.
    :type name: str
    :param entity_sets: Entity sets in document order.
    :type entity_sets: tuple[EntitySet, ...]
    :param association_sets: Association sets in document order.
    :type association_sets: tuple[AssociationSet, ...]
    """

    name: str
    entity_sets: Tuple[EntitySet, ...] = ()
    association_sets: Tuple[AssociationSet, ...] = ()

    def entity_set(self, name: str) -> Optional[EntitySet]:
        """Return the entity set called ``name``, or ``None``."""
        return next((es for es in self.entity_sets if es.name == name), None)

    @classmethod
    def from_element(cls, element: etree._Element) -> "EntityContainer":
        return cls(
            name=required_attribute(element, "Name"),
            entity_sets=children(element, ELEMENT_ENTITY_SET, EntitySet.from_element),
            association_sets=children(element, ELEMENT_ASSOCIATION_SET, AssociationSet.from_element),
        )

    def to_element(self) -> etree._Element:
        element = make_element(ELEMENT_ENTITY_CONTAINER, {"Name": self.name})
        element.extend(es.to_element() for es in self.entity_sets)
        element.extend(aset.to_element() for aset in self.association_sets)
        return element


__all__ = ["EntitySet", "EntityContainer"]
