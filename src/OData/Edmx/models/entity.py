# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Entity type models: ``EntityType`` and its ``Key``, ``Property`` and
``NavigationProperty`` children.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from lxml import etree

from ..common.constants import (
    ELEMENT_ENTITY_TYPE,
    ELEMENT_KEY,
    ELEMENT_NAVIGATION_PROPERTY,
    ELEMENT_PROPERTY,
    ELEMENT_PROPERTY_REF,
)
from ..core._error_codes import PARSE_COMPOSITE_KEY
from ..core.errors import MetadataParseError
from ..data import _literals
from ..data._xml import (
    attribute_get_bool,
    children,
    iter_children,
    make_element,
    required_attribute,
    single_child,
)
from .property_type import PropertyType


@dataclass(frozen=True)
class PropertyRef:
    """Reference to a property of the enclosing entity type, by name."""

    name: str

    @classmethod
    def from_element(cls, element: etree._Element) -> "PropertyRef":
        return cls(name=required_attribute(element, "Name"))

    def to_element(self) -> etree._Element:
        return make_element(ELEMENT_PROPERTY_REF, {"Name": self.name})


@dataclass(frozen=True)
class Key:
    """
    Entity key.

    Only single-property keys are representable. A ``Key`` element holding
    more than one ``PropertyRef`` (a composite key) is legal CSDL but fails to
    parse here rather than being truncated to its first reference.

    :param property_ref: The key property reference.
    :type property_ref: PropertyRef
    """

    property_ref: PropertyRef

    @classmethod
    def from_element(cls, element: etree._Element) -> "Key":
        refs = list(iter_children(element, ELEMENT_PROPERTY_REF))
        if len(refs) > 1:
            raise MetadataParseError(
                "Composite keys are not supported: "
                + ", ".join(repr(ref.get("Name")) for ref in refs),
                subcode=PARSE_COMPOSITE_KEY,
                element=ELEMENT_PROPERTY_REF,
                expected="1",
                found=str(len(refs)),
            )
        return cls(property_ref=PropertyRef.from_element(single_child(element, ELEMENT_PROPERTY_REF)))

    def to_element(self) -> etree._Element:
        element = make_element(ELEMENT_KEY)
        element.append(self.property_ref.to_element())
        return element


@dataclass(frozen=True)
class Property:
    """
    A primitive property of an entity type.

    :param name: Property name.
    :type name: str
    :param type: Primitive type with its facets and default value.
    :type type: ~OData.Edmx.models.property_type.PropertyType
    :param nullable: Whether the property accepts null. ``True`` when the
        ``Nullable`` attribute is absent.
    :type nullable: bool

    Example::

        prop = entity.key_property()
        if prop is not None and isinstance(prop.type, StringType):
            print(prop.name, prop.type.max_length)
    """

    name: str
    type: PropertyType
    nullable: bool = True

    @classmethod
    def from_element(cls, element: etree._Element) -> "Property":
        return cls(
            name=required_attribute(element, "Name"),
            type=PropertyType.from_element(element),
            nullable=attribute_get_bool(element, "Nullable", True),
        )

    def to_element(self) -> etree._Element:
        attributes: Dict[str, Optional[str]] = {"Name": self.name}
        attributes.update(self.type.to_attributes())
        attributes["Nullable"] = _literals.encode_bool(self.nullable)
        return make_element(ELEMENT_PROPERTY, attributes)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a flat dictionary.

        :return: ``name`` and ``nullable`` merged with :meth:`PropertyType.to_dict`.
        :rtype: dict[str, Any]
        """
        result: Dict[str, Any] = {"name": self.name}
        result.update(self.type.to_dict())
        result["nullable"] = self.nullable
        return result


@dataclass(frozen=True)
class NavigationProperty:
    """
    Named link from an entity type to a related one through an association.

    ``relationship`` is the association's name only. Resolving it to an
    :class:`~OData.Edmx.models.association.Association` is up to the caller;
    callers that resolve many navigations should index
    ``Schema.associations`` by name once instead of scanning per lookup.
    """

    name: str
    relationship: str
    to_role: str
    from_role: str

    @classmethod
    def from_element(cls, element: etree._Element) -> "NavigationProperty":
        return cls(
            name=required_attribute(element, "Name"),
            relationship=required_attribute(element, "Relationship"),
            to_role=required_attribute(element, "ToRole"),
            from_role=required_attribute(element, "FromRole"),
        )

    def to_element(self) -> etree._Element:
        return make_element(
            ELEMENT_NAVIGATION_PROPERTY,
            {
                "Name": self.name,
                "Relationship": self.relationship,
                "ToRole": self.to_role,
                "FromRole": self.from_role,
            },
        )


@dataclass(frozen=True)
class EntityType:
    """
    Named structured type with a key, properties and navigation properties.

    :param name: Entity type name, unqualified.
    :type name: str
    :param key: The single key property reference.
    :type key: Key
    :param properties: Primitive properties in document order.
    :type properties: tuple[Property, ...]
    :param navigations: Navigation properties in document order.
    :type navigations: tuple[NavigationProperty, ...]
    """

    name: str
    key: Key
    properties: Tuple[Property, ...] = ()
    navigations: Tuple[NavigationProperty, ...] = ()

    def key_property(self) -> Optional[Property]:
        """
        Return the property named by the key.

        :return: The key property, or ``None`` when the key names a property
            the type does not declare.
        :rtype: Property | None
        """
        return next(
            (prop for prop in self.properties if prop.name == self.key.property_ref.name),
            None,
        )

    def property(self, name: str) -> Optional[Property]:
        """Return the property called ``name``, or ``None``."""
        return next((prop for prop in self.properties if prop.name == name), None)

    @classmethod
    def from_element(cls, element: etree._Element) -> "EntityType":
        return cls(
            name=required_attribute(element, "Name"),
            key=Key.from_element(single_child(element, ELEMENT_KEY)),
            properties=children(element, ELEMENT_PROPERTY, Property.from_element),
            navigations=children(element, ELEMENT_NAVIGATION_PROPERTY, NavigationProperty.from_element),
        )

    def to_element(self) -> etree._Element:
        element = make_element(ELEMENT_ENTITY_TYPE, {"Name": self.name})
        element.append(self.key.to_element())
        element.extend(prop.to_element() for prop in self.properties)
        element.extend(nav.to_element() for nav in self.navigations)
        return element


__all__ = ["PropertyRef", "Key", "Property", "NavigationProperty", "EntityType"]
