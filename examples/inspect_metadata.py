# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import sys
from pathlib import Path

# Add src to PYTHONPATH for local runs
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from OData.Edmx.core.config import EdmxConfig
from OData.Edmx.core.errors import MetadataParseError
from OData.Edmx.parser import parse_edmx
from OData.Edmx.utils._pandas import entity_sets_to_dataframe, properties_to_dataframe

if len(sys.argv) != 2:
	print("Usage: python inspect_metadata.py <path to $metadata document>")
	sys.exit(1)

config = EdmxConfig(enable_logging=True, log_level="INFO")
try:
	edmx = parse_edmx(Path(sys.argv[1]).read_bytes(), config)
except MetadataParseError as ex:
	print(f"Could not parse metadata: {ex.message}")
	print(ex.to_dict())
	sys.exit(2)

print(f"EDMX version {edmx.version.value}, {len(edmx.data_services.schemas)} schema(s)")
schema = edmx.default_schema()
if schema is None:
	print("No 'Default' schema; nothing to inspect.")
	sys.exit(0)

print("Entity sets:")
print(entity_sets_to_dataframe(schema).to_string(index=False))

for entity in schema.entities:
	key = entity.key_property()
	print(f"\n{entity.name} (key: {key.name if key else entity.key.property_ref.name + ' [undeclared]'})")
	print(properties_to_dataframe(entity).to_string(index=False))

for association in schema.associations:
	ends = ", ".join(f"{end.role} {end.multiplicity}" for end in association.ends)
	print(f"\nAssociation {association.name}: {ends}")
