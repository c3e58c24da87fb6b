# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Constants for OData v2 metadata documents.

These constants define the XML namespaces, element names and literal values
used when reading and writing EDMX 1.0 documents.

See: https://www.odata.org/documentation/odata-version-2-0/overview/
"""

# XML namespaces written on serialization. Parsing matches elements by local name.
EDMX_NAMESPACE = "http://schemas.microsoft.com/ado/2007/06/edmx"
EDM_NAMESPACE = "http://schemas.microsoft.com/ado/2008/09/edm"

EDMX_VERSION_1_0 = "1.0"

DEFAULT_SCHEMA_NAMESPACE = "Default"
"""Namespace many v2 services give their main schema. A convention, not part of the format."""

LOGGER_NAME = "OData.Edmx"

# Element local names
ELEMENT_EDMX = "Edmx"
ELEMENT_DATA_SERVICES = "DataServices"
ELEMENT_SCHEMA = "Schema"
ELEMENT_ENTITY_TYPE = "EntityType"
ELEMENT_KEY = "Key"
ELEMENT_PROPERTY_REF = "PropertyRef"
ELEMENT_PROPERTY = "Property"
ELEMENT_NAVIGATION_PROPERTY = "NavigationProperty"
ELEMENT_ASSOCIATION = "Association"
ELEMENT_END = "End"
ELEMENT_ENTITY_CONTAINER = "EntityContainer"
ELEMENT_ENTITY_SET = "EntitySet"
ELEMENT_ASSOCIATION_SET = "AssociationSet"

# Association end multiplicity literals
MULTIPLICITY_ONE = "1"
MULTIPLICITY_ZERO_OR_ONE = "0..1"
MULTIPLICITY_MANY = "*"
