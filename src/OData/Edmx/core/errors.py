# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured errors for the EDMX metadata model.

A metadata document either parses completely or raises
:class:`MetadataParseError`. Legal absences in a parsed document (no entity
container, a dangling key reference, no ``Default`` schema) are returned as
``None`` by the accessors and never raised.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Optional


class EdmxError(Exception):
    """Base structured error for the EDMX metadata model."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.details = details or {}
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "details": self.details,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class MetadataParseError(EdmxError):
    """
    Raised when a metadata document cannot be turned into a model.

    :param message: Human-readable description of the failure.
    :type message: str
    :param subcode: One of the ``PARSE_*`` subcodes in :mod:`OData.Edmx.core._error_codes`.
    :type subcode: str | None
    :param element: Local name of the offending element.
    :type element: str | None
    :param attribute: Name of the offending attribute.
    :type attribute: str | None
    :param expected: What the parser expected to find.
    :type expected: str | None
    :param found: What the parser found instead.
    :type found: str | None
    :param details: Additional context merged into :attr:`details`.
    :type details: dict[str, Any] | None
    """

    def __init__(
        self,
        message: str,
        *,
        subcode: Optional[str] = None,
        element: Optional[str] = None,
        attribute: Optional[str] = None,
        expected: Optional[str] = None,
        found: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = dict(details or {})
        if element is not None:
            d["element"] = element
        if attribute is not None:
            d["attribute"] = attribute
        if expected is not None:
            d["expected"] = expected
        if found is not None:
            d["found"] = found
        super().__init__(message, code="metadata_parse_error", subcode=subcode, details=d)

    @property
    def element(self) -> Optional[str]:
        return self.details.get("element")

    @property
    def attribute(self) -> Optional[str]:
        return self.details.get("attribute")

    @property
    def expected(self) -> Optional[str]:
        return self.details.get("expected")

    @property
    def found(self) -> Optional[str]:
        return self.details.get("found")


__all__ = ["EdmxError", "MetadataParseError"]
