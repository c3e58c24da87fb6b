# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Schema and document root models.

:class:`Edmx` is the root of the parsed tree::

    edmx = Edmx.from_str(metadata_xml)
    schema = edmx.default_schema()
    if schema is not None:
        for entity_set in schema.entity_sets() or ():
            print(entity_set.name, entity_set.entity_type)

The tree is immutable. Accessors return tuples shared with the owning
document rather than copies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from lxml import etree

from ..common.constants import (
    DEFAULT_SCHEMA_NAMESPACE,
    EDM_NAMESPACE,
    EDMX_NAMESPACE,
    EDMX_VERSION_1_0,
    ELEMENT_ASSOCIATION,
    ELEMENT_DATA_SERVICES,
    ELEMENT_EDMX,
    ELEMENT_ENTITY_CONTAINER,
    ELEMENT_ENTITY_TYPE,
    ELEMENT_SCHEMA,
)
from ..core._error_codes import PARSE_UNEXPECTED_ROOT, PARSE_UNSUPPORTED_VERSION
from ..core.config import EdmxConfig
from ..core.errors import MetadataParseError
from ..data._xml import children, load_root, local_name, make_element, required_attribute, single_child
from .association import Association, AssociationSet
from .container import EntityContainer, EntitySet
from .entity import EntityType


class EdmxVersion(str, Enum):
    """Recognized values of the ``Edmx/@Version`` attribute."""

    V1_0 = EDMX_VERSION_1_0


@dataclass(frozen=True)
class Schema:
    """
    A CSDL schema: one namespace of entity types, associations and an
    optional entity container.

    A schema without a container is legal and typically holds types shared
    by other schemas.

    :param namespace: Schema namespace.
    :type namespace: str
    :param entities: Entity types in document order.
    :type entities: tuple[EntityType, ...]
    :param associations: Associations in document order.
    :type associations: tuple[Association, ...]
    :param entity_container: The container, if the schema declares one.
    :type entity_container: EntityContainer | None
    """

    namespace: str
    entities: Tuple[EntityType, ...] = ()
    associations: Tuple[Association, ...] = ()
    entity_container: Optional[EntityContainer] = None

    def entity_sets(self) -> Optional[Tuple[EntitySet, ...]]:
        """
        Return the container's entity sets.

        :return: The entity sets, ``()`` for a declared but empty container,
            or ``None`` when the schema has no container.
        :rtype: tuple[EntitySet, ...] | None
        """
        if self.entity_container is None:
            return None
        return self.entity_container.entity_sets

    def association_sets(self) -> Optional[Tuple[AssociationSet, ...]]:
        """
        Return the container's association sets.

        :return: The association sets, ``()`` for a declared but empty
            container, or ``None`` when the schema has no container.
        :rtype: tuple[AssociationSet, ...] | None
        """
        if self.entity_container is None:
            return None
        return self.entity_container.association_sets

    def entity_type(self, name: str) -> Optional[EntityType]:
        """Return the entity type called ``name`` (unqualified), or ``None``."""
        return next((et for et in self.entities if et.name == name), None)

    def association(self, name: str) -> Optional[Association]:
        """
        Return the association called ``name`` (unqualified), or ``None``.

        This is a linear scan. Index ``associations`` by name once when
        resolving many navigation properties.
        """
        return next((assoc for assoc in self.associations if assoc.name == name), None)

    @classmethod
    def from_element(cls, element: etree._Element) -> "Schema":
        container = single_child(element, ELEMENT_ENTITY_CONTAINER, required=False)
        return cls(
            namespace=required_attribute(element, "Namespace"),
            entities=children(element, ELEMENT_ENTITY_TYPE, EntityType.from_element),
            associations=children(element, ELEMENT_ASSOCIATION, Association.from_element),
            entity_container=None if container is None else EntityContainer.from_element(container),
        )

    def to_element(self) -> etree._Element:
        element = etree.Element(f"{{{EDM_NAMESPACE}}}{ELEMENT_SCHEMA}", nsmap={None: EDM_NAMESPACE})
        element.set("Namespace", self.namespace)
        element.extend(et.to_element() for et in self.entities)
        element.extend(assoc.to_element() for assoc in self.associations)
        if self.entity_container is not None:
            element.append(self.entity_container.to_element())
        return element


@dataclass(frozen=True)
class DataServices:
    """
    Body of the EDMX envelope.

    :param schemas: Schemas in document order. Lookups assume namespaces are unique.
    :type schemas: tuple[Schema, ...]
    """

    schemas: Tuple[Schema, ...] = ()

    def default_schema(self) -> Optional[Schema]:
        """
        Return the first schema whose namespace is exactly ``"Default"``.

        Naming the main schema ``Default`` is a convention followed by many
        services, not a rule of the format: services may use any namespace.
        Use :meth:`schema` when the namespace is known.

        :return: The schema, or ``None`` when no namespace matches.
        :rtype: Schema | None
        """
        return self.schema(DEFAULT_SCHEMA_NAMESPACE)

    def schema(self, namespace: str) -> Optional[Schema]:
        """Return the first schema with namespace ``namespace`` (case-sensitive), or ``None``."""
        return next((schema for schema in self.schemas if schema.namespace == namespace), None)

    @classmethod
    def from_element(cls, element: etree._Element) -> "DataServices":
        return cls(schemas=children(element, ELEMENT_SCHEMA, Schema.from_element))

    def to_element(self) -> etree._Element:
        element = make_element(ELEMENT_DATA_SERVICES, namespace=EDMX_NAMESPACE)
        element.extend(schema.to_element() for schema in self.schemas)
        return element


@dataclass(frozen=True)
class Edmx:
    """
    Root of a parsed metadata document.

    :param version: EDMX version; only ``1.0`` is recognized.
    :type version: EdmxVersion
    :param data_services: Document body.
    :type data_services: DataServices
    """

    version: EdmxVersion
    data_services: DataServices

    def default_schema(self) -> Optional[Schema]:
        """Shortcut for :meth:`DataServices.default_schema`."""
        return self.data_services.default_schema()

    def schema(self, namespace: str) -> Optional[Schema]:
        """Shortcut for :meth:`DataServices.schema`."""
        return self.data_services.schema(namespace)

    @classmethod
    def from_str(cls, xml: Union[str, bytes], config: Optional[EdmxConfig] = None) -> "Edmx":
        """
        Parse a complete metadata document.

        :param xml: The EDMX document.
        :type xml: str | bytes
        :param config: Parser configuration.
        :type config: ~OData.Edmx.core.config.EdmxConfig | None
        :return: The fully populated tree.
        :rtype: Edmx
        :raises TypeError: If ``xml`` is neither ``str`` nor ``bytes``.
        :raises ~OData.Edmx.core.errors.MetadataParseError: If the document is
            malformed; no partial tree is produced.
        """
        return cls.from_element(load_root(xml, config))

    @classmethod
    def from_element(cls, element: etree._Element) -> "Edmx":
        if local_name(element) != ELEMENT_EDMX:
            raise MetadataParseError(
                f"Metadata document root is {local_name(element)}, expected {ELEMENT_EDMX}",
                subcode=PARSE_UNEXPECTED_ROOT,
                element=local_name(element),
                expected=ELEMENT_EDMX,
                found=local_name(element),
            )
        literal = required_attribute(element, "Version")
        try:
            version = EdmxVersion(literal)
        except ValueError:
            raise MetadataParseError(
                f"Unsupported Edmx version {literal!r}",
                subcode=PARSE_UNSUPPORTED_VERSION,
                element=ELEMENT_EDMX,
                attribute="Version",
                expected=", ".join(v.value for v in EdmxVersion),
                found=literal,
            ) from None
        return cls(
            version=version,
            data_services=DataServices.from_element(single_child(element, ELEMENT_DATA_SERVICES)),
        )

    def to_element(self) -> etree._Element:
        element = etree.Element(f"{{{EDMX_NAMESPACE}}}{ELEMENT_EDMX}", nsmap={"edmx": EDMX_NAMESPACE})
        element.set("Version", self.version.value)
        element.append(self.data_services.to_element())
        return element

    def to_xml(self, pretty_print: bool = False) -> str:
        """
        Serialize the tree back to an EDMX document.

        Parsing the result with :meth:`from_str` yields an equal tree.

        :param pretty_print: Indent the output.
        :type pretty_print: bool
        :return: The document, without an XML declaration.
        :rtype: str
        """
        return etree.tostring(self.to_element(), encoding="unicode", pretty_print=pretty_print)


__all__ = ["EdmxVersion", "Schema", "DataServices", "Edmx"]
