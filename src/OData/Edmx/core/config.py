# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from dataclasses import dataclass

from ..common.constants import LOGGER_NAME


@dataclass(frozen=True)
class EdmxConfig:
    """
    Configuration settings for metadata parsing.

    :param huge_tree: Lift lxml's safety limits on tree depth and text size for very large documents (default: False).
    :type huge_tree: bool
    :param enable_logging: Whether :func:`~OData.Edmx.parser.parse_edmx` logs parse summaries and failures (default: False).
    :type enable_logging: bool
    :param log_level: Level applied to the package logger when logging is enabled (default: "WARNING").
    :type log_level: str
    :param logger_name: Name of the logger used when logging is enabled (default: "OData.Edmx").
    :type logger_name: str
    """

    huge_tree: bool = False

    # Logging configuration
    enable_logging: bool = False
    log_level: str = "WARNING"
    logger_name: str = LOGGER_NAME

    @classmethod
    def from_env(cls) -> "EdmxConfig":
        """
        Create a configuration instance with default settings.

        :return: Configuration instance with default values.
        :rtype: ~OData.Edmx.core.config.EdmxConfig
        """
        # Environment-free defaults
        return cls(
            huge_tree=False,
            enable_logging=False,
            log_level="WARNING",
            logger_name=LOGGER_NAME,
        )
