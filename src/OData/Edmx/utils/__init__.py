# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Utility helpers for the EDMX metadata model.

- :func:`~OData.Edmx.utils._pandas.entity_sets_to_dataframe`: Entity sets of a schema as a DataFrame.
- :func:`~OData.Edmx.utils._pandas.properties_to_dataframe`: Properties of an entity type as a DataFrame.
"""

__all__ = []
