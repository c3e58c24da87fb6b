# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
EDM primitive property types.

A ``Property`` element selects its type through the ``Type`` attribute, one of
ten ``Edm.*`` literals. Each literal maps to one frozen dataclass variant of
:class:`PropertyType` carrying only the facets meaningful for that kind:

========================== ============================================ =======================
Literal                    Facets                                       Default value type
========================== ============================================ =======================
``Edm.Binary``             ``MaxLength``, ``FixedLength``               ``bytes``
``Edm.Boolean``                                                         ``bool``
``Edm.Byte``               ``Precision``                                ``bytes``
``Edm.DateTime``           ``Precision``                                naive ``datetime``
``Edm.DateTimeOffset``     ``Precision``                                ``timedelta`` offset
``Edm.Decimal``            ``Precision``                                ``float``
``Edm.Double``             ``Precision``                                ``float``
``Edm.Int16``              ``Precision``                                ``int`` (16-bit)
``Edm.Int32``              ``Precision``                                ``bytes``
``Edm.String``             ``Precision``, ``MaxLength``, ``FixedLength``
========================== ============================================ =======================

Facets are optional and are not validated against each other: a
``StringType`` may carry both ``max_length`` and ``fixed_length``.

.. note::
    ``Int32Type.default`` is a byte sequence, not an integer. This mirrors the
    established mapping of the format and is kept as-is until a document
    shows the integer reading is the intended one.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Optional, Tuple, Type

from lxml import etree

from ..core._error_codes import PARSE_UNKNOWN_TYPE
from ..core.errors import MetadataParseError
from ..data import _literals
from ..data._xml import decode_attribute, local_name, required_attribute


class EdmType(str, Enum):
    """The ``Edm.*`` type literals recognized on a ``Property`` element."""

    BINARY = "Edm.Binary"
    BOOLEAN = "Edm.Boolean"
    BYTE = "Edm.Byte"
    DATE_TIME = "Edm.DateTime"
    DATE_TIME_OFFSET = "Edm.DateTimeOffset"
    DECIMAL = "Edm.Decimal"
    DOUBLE = "Edm.Double"
    INT16 = "Edm.Int16"
    INT32 = "Edm.Int32"
    STRING = "Edm.String"


@dataclass(frozen=True)
class _Facet:
    """Maps one XML attribute to one dataclass field."""

    attribute: str
    field: str
    decode: Callable[[str], Any]
    encode: Callable[[Any], str]
    expected: str


_PRECISION = _Facet("Precision", "precision", _literals.unsigned(8), _literals.encode_int, "integer in [0, 255]")
_MAX_LENGTH = _Facet("MaxLength", "max_length", _literals.unsigned(32), _literals.encode_int, "integer in [0, 4294967295]")
_FIXED_LENGTH = _Facet("FixedLength", "fixed_length", _literals.unsigned(32), _literals.encode_int, "integer in [0, 4294967295]")


def _default(decode: Callable[[str], Any], encode: Callable[[Any], str], expected: str) -> _Facet:
    return _Facet("Default", "default", decode, encode, expected)


_BYTES_DEFAULT = _default(_literals.decode_bytes, _literals.encode_bytes, "whitespace-separated octets")
_FLOAT_DEFAULT = _default(_literals.decode_float, _literals.encode_float, "finite floating point number")


@dataclass(frozen=True)
class PropertyType:
    """
    Base of the ten EDM primitive property type variants.

    Use :meth:`from_element` to decode the variant named by a ``Property``
    element's ``Type`` attribute. Subclasses declare their ``edm_type`` literal
    and the facets they read.
    """

    edm_type: ClassVar[EdmType]
    _facets: ClassVar[Tuple[_Facet, ...]] = ()

    @staticmethod
    def from_element(element: etree._Element) -> "PropertyType":
        """
        Decode the property type of a ``Property`` element.

        :param element: The ``Property`` element.
        :return: The variant selected by the ``Type`` attribute.
        :rtype: PropertyType
        :raises ~OData.Edmx.core.errors.MetadataParseError: If ``Type`` is missing or
            not one of the ten recognized literals, or a facet fails to decode.
        """
        literal = required_attribute(element, "Type")
        try:
            edm_type = EdmType(literal)
        except ValueError:
            raise MetadataParseError(
                f"Unknown property type {literal!r} on {element.get('Name')!r}",
                subcode=PARSE_UNKNOWN_TYPE,
                element=local_name(element),
                attribute="Type",
                expected=", ".join(t.value for t in EdmType),
                found=literal,
            ) from None
        return PROPERTY_TYPES[edm_type]._from_facets(element)

    @classmethod
    def _from_facets(cls, element: etree._Element) -> "PropertyType":
        values = {
            facet.field: decode_attribute(element, facet.attribute, facet.decode, facet.expected)
            for facet in cls._facets
        }
        return cls(**values)

    def to_attributes(self) -> Dict[str, Optional[str]]:
        """
        Encode the type back to ``Property`` attributes.

        :return: ``Type`` plus every facet, with ``None`` for unset facets.
        :rtype: dict[str, str | None]
        """
        attributes: Dict[str, Optional[str]] = {"Type": self.edm_type.value}
        for facet in self._facets:
            value = getattr(self, facet.field)
            attributes[facet.attribute] = None if value is None else facet.encode(value)
        return attributes

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary of the type literal and decoded facet values."""
        result: Dict[str, Any] = {"type": self.edm_type.value}
        for facet in self._facets:
            result[facet.field] = getattr(self, facet.field)
        return result


@dataclass(frozen=True)
class BinaryType(PropertyType):
    """``Edm.Binary``: fixed or variable length binary data."""

    edm_type: ClassVar[EdmType] = EdmType.BINARY
    _facets: ClassVar[Tuple[_Facet, ...]] = (_MAX_LENGTH, _FIXED_LENGTH, _BYTES_DEFAULT)

    max_length: Optional[int] = None
    fixed_length: Optional[int] = None
    default: Optional[bytes] = None


@dataclass(frozen=True)
class BooleanType(PropertyType):
    """``Edm.Boolean``."""

    edm_type: ClassVar[EdmType] = EdmType.BOOLEAN
    _facets: ClassVar[Tuple[_Facet, ...]] = (
        _default(_literals.decode_bool, _literals.encode_bool, "true or false"),
    )

    default: Optional[bool] = None


@dataclass(frozen=True)
class ByteType(PropertyType):
    """``Edm.Byte``: unsigned 8-bit integer value, default kept as raw octets."""

    edm_type: ClassVar[EdmType] = EdmType.BYTE
    _facets: ClassVar[Tuple[_Facet, ...]] = (_PRECISION, _BYTES_DEFAULT)

    precision: Optional[int] = None
    default: Optional[bytes] = None


@dataclass(frozen=True)
class DateTimeType(PropertyType):
    """``Edm.DateTime``: date and time without an offset."""

    edm_type: ClassVar[EdmType] = EdmType.DATE_TIME
    _facets: ClassVar[Tuple[_Facet, ...]] = (
        _PRECISION,
        _default(_literals.decode_datetime, _literals.encode_datetime, "ISO 8601 timestamp without offset"),
    )

    precision: Optional[int] = None
    default: Optional[datetime.datetime] = None


@dataclass(frozen=True)
class DateTimeOffsetType(PropertyType):
    """``Edm.DateTimeOffset``: the default is the offset from UTC."""

    edm_type: ClassVar[EdmType] = EdmType.DATE_TIME_OFFSET
    _facets: ClassVar[Tuple[_Facet, ...]] = (
        _PRECISION,
        _default(_literals.decode_offset, _literals.encode_offset, "Z or +HH:MM[:SS[.ffffff]]"),
    )

    precision: Optional[int] = None
    default: Optional[datetime.timedelta] = None


@dataclass(frozen=True)
class DecimalType(PropertyType):
    """``Edm.Decimal``."""

    edm_type: ClassVar[EdmType] = EdmType.DECIMAL
    _facets: ClassVar[Tuple[_Facet, ...]] = (_PRECISION, _FLOAT_DEFAULT)

    precision: Optional[int] = None
    default: Optional[float] = None


@dataclass(frozen=True)
class DoubleType(PropertyType):
    """``Edm.Double``."""

    edm_type: ClassVar[EdmType] = EdmType.DOUBLE
    _facets: ClassVar[Tuple[_Facet, ...]] = (_PRECISION, _FLOAT_DEFAULT)

    precision: Optional[int] = None
    default: Optional[float] = None


@dataclass(frozen=True)
class Int16Type(PropertyType):
    """``Edm.Int16``."""

    edm_type: ClassVar[EdmType] = EdmType.INT16
    _facets: ClassVar[Tuple[_Facet, ...]] = (
        _PRECISION,
        _default(_literals.signed(16), _literals.encode_int, "integer in [-32768, 32767]"),
    )

    precision: Optional[int] = None
    default: Optional[int] = None


@dataclass(frozen=True)
class Int32Type(PropertyType):
    """``Edm.Int32``. See the module note on ``default``."""

    edm_type: ClassVar[EdmType] = EdmType.INT32
    _facets: ClassVar[Tuple[_Facet, ...]] = (_PRECISION, _BYTES_DEFAULT)

    precision: Optional[int] = None
    default: Optional[bytes] = None


@dataclass(frozen=True)
class StringType(PropertyType):
    """``Edm.String``. Carries no default."""

    edm_type: ClassVar[EdmType] = EdmType.STRING
    _facets: ClassVar[Tuple[_Facet, ...]] = (_PRECISION, _MAX_LENGTH, _FIXED_LENGTH)

    precision: Optional[int] = None
    max_length: Optional[int] = None
    fixed_length: Optional[int] = None


PROPERTY_TYPES: Dict[EdmType, Type[PropertyType]] = {
    variant.edm_type: variant
    for variant in (
        BinaryType,
        BooleanType,
        ByteType,
        DateTimeType,
        DateTimeOffsetType,
        DecimalType,
        DoubleType,
        Int16Type,
        Int32Type,
        StringType,
    )
}
"""Variant class for every :class:`EdmType` literal."""


__all__ = [
    "EdmType",
    "PropertyType",
    "BinaryType",
    "BooleanType",
    "ByteType",
    "DateTimeType",
    "DateTimeOffsetType",
    "DecimalType",
    "DoubleType",
    "Int16Type",
    "Int32Type",
    "StringType",
    "PROPERTY_TYPES",
]
