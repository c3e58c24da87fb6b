# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
OData v2 EDMX metadata model.

Parses the CSDL metadata document an OData v2 service exposes at ``$metadata``
into an immutable, strongly-typed tree. Start with
:func:`~OData.Edmx.parser.parse_edmx`.
"""

__version__ = "0.1.0"
