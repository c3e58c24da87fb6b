# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Common constants for the EDMX metadata model.

This module contains the XML namespaces and literal values shared across the package.
"""

__all__ = []
