# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for EDMX model tests.

This module provides the sample metadata document and parsed views of it
that can be used across all test modules.
"""

import pytest

from OData.Edmx.core.config import EdmxConfig
from OData.Edmx.parser import parse_edmx
from tests.fixtures.test_data import SAMPLE_METADATA_XML


@pytest.fixture
def sample_xml():
    """Sample metadata document as text."""
    return SAMPLE_METADATA_XML


@pytest.fixture
def sample_edmx(sample_xml):
    """The sample document, parsed."""
    return parse_edmx(sample_xml)


@pytest.fixture
def default_schema(sample_edmx):
    """The sample document's ``Default`` schema."""
    return sample_edmx.default_schema()


@pytest.fixture
def logging_config():
    """Configuration with parse logging enabled at DEBUG."""
    return EdmxConfig(enable_logging=True, log_level="DEBUG")
