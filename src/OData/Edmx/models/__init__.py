# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data models for OData v2 metadata documents.

This module provides immutable dataclasses for the EDMX document tree:

- :class:`~OData.Edmx.models.schema.Edmx`: Document root and parse entry point.
- :class:`~OData.Edmx.models.schema.Schema`: Namespace with entity types, associations and a container.
- :class:`~OData.Edmx.models.container.EntityContainer`: Entity sets and association sets.
- :class:`~OData.Edmx.models.entity.EntityType`: Named structured type with a key and properties.
- :class:`~OData.Edmx.models.association.Association`: Relationship between two entity types.
- :class:`~OData.Edmx.models.property_type.PropertyType`: The ten EDM primitive property types.

Note:
    This ``__init__.py`` does NOT import/export models.
    Import directly from the specific module files.
"""

__all__ = []
