# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""pandas views over parsed metadata"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from ..models.entity import EntityType
from ..models.schema import Schema

_ENTITY_SET_COLUMNS = ["name", "entity_type"]
_PROPERTY_COLUMNS = [
    "name",
    "type",
    "nullable",
    "is_key",
    "precision",
    "max_length",
    "fixed_length",
    "default",
]


def entity_sets_to_dataframe(schema: Schema) -> pd.DataFrame:
    """One row per entity set of the schema's container; empty when the schema has no container."""
    entity_sets = schema.entity_sets() or ()
    return pd.DataFrame([es.to_dict() for es in entity_sets], columns=_ENTITY_SET_COLUMNS)


def properties_to_dataframe(entity_type: EntityType) -> pd.DataFrame:
    """
    One row per property of ``entity_type``.

    Facets a property type does not carry are left missing. ``is_key`` marks
    the property named by the entity's key.
    """
    key_name = entity_type.key.property_ref.name
    rows: List[Dict[str, Any]] = []
    for prop in entity_type.properties:
        row = prop.to_dict()
        row["is_key"] = prop.name == key_name
        rows.append(row)
    return pd.DataFrame(rows, columns=_PROPERTY_COLUMNS)
