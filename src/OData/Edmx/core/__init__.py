# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the EDMX metadata model.

This module contains the foundational components: configuration and
structured error handling.
"""

from .config import EdmxConfig
from .errors import EdmxError, MetadataParseError

__all__ = [
    "EdmxConfig",
    "EdmxError",
    "MetadataParseError",
]
