# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Parse entry point for OData v2 metadata documents.

:func:`parse_edmx` turns the text a service returns from ``$metadata`` into an
immutable :class:`~OData.Edmx.models.schema.Edmx` tree in one pass. Fetching
the document is up to the caller::

    with open("metadata.xml", "rb") as f:
        edmx = parse_edmx(f.read())

    schema = edmx.default_schema()
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .core.config import EdmxConfig
from .core.errors import MetadataParseError
from .models.schema import Edmx


def _get_logger(config: EdmxConfig) -> Optional[logging.Logger]:
    if not config.enable_logging:
        return None
    logger = logging.getLogger(config.logger_name)
    logger.setLevel(getattr(logging, config.log_level.upper()))
    return logger


def parse_edmx(xml: Union[str, bytes], config: Optional[EdmxConfig] = None) -> Edmx:
    """
    Parse a complete EDMX 1.0 document.

    The parse is all-or-nothing: any malformed element, unknown property type
    literal or unsupported version raises and no partial tree is returned.

    :param xml: The metadata document.
    :type xml: str | bytes
    :param config: Optional parser configuration. Defaults to
        :meth:`~OData.Edmx.core.config.EdmxConfig.from_env`.
    :type config: ~OData.Edmx.core.config.EdmxConfig | None
    :return: The parsed document.
    :rtype: ~OData.Edmx.models.schema.Edmx
    :raises TypeError: If ``xml`` is neither ``str`` nor ``bytes``.
    :raises ~OData.Edmx.core.errors.MetadataParseError: If the document cannot be parsed.
    """
    config = config or EdmxConfig.from_env()
    logger = _get_logger(config)

    try:
        edmx = Edmx.from_str(xml, config)
    except MetadataParseError as ex:
        if logger:
            logger.warning("Metadata parse failed [%s]: %s", ex.subcode, ex.message)
        raise

    if logger:
        for schema in edmx.data_services.schemas:
            entity_sets = schema.entity_sets()
            logger.debug(
                "Parsed schema %s: %d entity types, %d associations, %s",
                schema.namespace,
                len(schema.entities),
                len(schema.associations),
                "no entity container" if entity_sets is None else f"{len(entity_sets)} entity sets",
            )
        if edmx.default_schema() is None:
            logger.warning(
                "Metadata has no 'Default' schema; namespaces: %s",
                ", ".join(schema.namespace for schema in edmx.data_services.schemas) or "(none)",
            )
    return edmx


__all__ = ["parse_edmx"]
