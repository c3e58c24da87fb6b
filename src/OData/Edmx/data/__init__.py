# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
XML access layer for the EDMX metadata model.

This module contains the internal helpers that load a metadata buffer with
lxml and read elements and attributes from it.
"""

__all__ = []
