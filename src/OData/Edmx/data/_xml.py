# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Element-level helpers over lxml used by the model ``from_element`` and
``to_element`` methods.

Elements are matched by local name so that prefixed (``edmx:DataServices``)
and default-namespace (``<Schema xmlns="...">``) documents read the same way.
Only unqualified attributes are read; vendor annotations such as
``sap:label`` live in their own namespace and are ignored.
"""

from __future__ import annotations

import io
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, TypeVar, Union

from lxml import etree

from ..common.constants import EDM_NAMESPACE
from ..core._error_codes import (
    PARSE_DUPLICATE_ELEMENT,
    PARSE_INVALID_VALUE,
    PARSE_MISSING_ATTRIBUTE,
    PARSE_MISSING_ELEMENT,
    PARSE_XML_SYNTAX,
)
from ..core.config import EdmxConfig
from ..core.errors import MetadataParseError
from . import _literals

T = TypeVar("T")


def load_root(xml: Union[str, bytes], config: Optional[EdmxConfig] = None) -> etree._Element:
    """
    Load a metadata buffer and return its root element.

    :param xml: Complete EDMX document. ``str`` input may carry an encoding declaration.
    :type xml: str | bytes
    :param config: Parser configuration. Defaults to :meth:`EdmxConfig.from_env`.
    :type config: ~OData.Edmx.core.config.EdmxConfig | None
    :return: The document's root element.
    :raises TypeError: If ``xml`` is neither ``str`` nor ``bytes``.
    :raises ~OData.Edmx.core.errors.MetadataParseError: If the buffer is not well-formed XML.
    """
    if isinstance(xml, str):
        # lxml refuses unicode text carrying an encoding declaration
        source = io.BytesIO(xml.encode("utf-8"))
        encoding = "utf-8"
    elif isinstance(xml, bytes):
        source = io.BytesIO(xml)
        encoding = None
    else:
        raise TypeError(f"Expected bytes or str type on metadata xml, got : {type(xml)}")

    config = config or EdmxConfig.from_env()
    parser = etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
        huge_tree=config.huge_tree,
    )
    try:
        tree = etree.parse(source, parser)
    except etree.XMLSyntaxError as ex:
        raise MetadataParseError(
            f"Metadata document syntax error: {ex}",
            subcode=PARSE_XML_SYNTAX,
            details={"line": ex.lineno, "column": ex.offset},
        ) from ex
    except ValueError as ex:
        raise MetadataParseError(
            f"Metadata document could not be read: {ex}",
            subcode=PARSE_XML_SYNTAX,
        ) from ex
    return tree.getroot()


def local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def iter_children(element: etree._Element, name: str) -> Iterator[etree._Element]:
    """Yield the child elements of ``element`` whose local name is ``name``, in document order."""
    for child in element:
        if isinstance(child.tag, str) and local_name(child) == name:
            yield child


def children(element: etree._Element, name: str, factory: Callable[[etree._Element], T]) -> Tuple[T, ...]:
    return tuple(factory(child) for child in iter_children(element, name))


def single_child(element: etree._Element, name: str, required: bool = True) -> Optional[etree._Element]:
    """
    Return the only child named ``name``.

    :raises ~OData.Edmx.core.errors.MetadataParseError: If more than one such child exists,
        or none exists and ``required`` is set.
    """
    found: List[etree._Element] = list(iter_children(element, name))
    parent = local_name(element)
    if len(found) > 1:
        raise MetadataParseError(
            f"{parent} has {len(found)} {name} elements, expected at most one",
            subcode=PARSE_DUPLICATE_ELEMENT,
            element=name,
            expected="1",
            found=str(len(found)),
            details={"parent": parent},
        )
    if not found:
        if required:
            raise MetadataParseError(
                f"{parent} is missing the element {name}",
                subcode=PARSE_MISSING_ELEMENT,
                element=name,
                expected="1",
                found="0",
                details={"parent": parent},
            )
        return None
    return found[0]


def required_attribute(element: etree._Element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise MetadataParseError(
            f"{local_name(element)} is missing the attribute {name}",
            subcode=PARSE_MISSING_ATTRIBUTE,
            element=local_name(element),
            attribute=name,
        )
    return value


def optional_attribute(element: etree._Element, name: str) -> Optional[str]:
    return element.get(name)


def decode_attribute(
    element: etree._Element,
    name: str,
    decode: Callable[[str], Any],
    expected: str,
) -> Any:
    """
    Decode an optional attribute with ``decode``.

    :return: The decoded value, or ``None`` when the attribute is absent.
    :raises ~OData.Edmx.core.errors.MetadataParseError: If ``decode`` rejects the value.
    """
    value = element.get(name)
    if value is None:
        return None
    try:
        return decode(value)
    except ValueError as ex:
        raise MetadataParseError(
            f"Invalid value for {local_name(element)}/@{name}: {ex}",
            subcode=PARSE_INVALID_VALUE,
            element=local_name(element),
            attribute=name,
            expected=expected,
            found=value,
        ) from ex


def attribute_get_bool(element: etree._Element, name: str, default: bool) -> bool:
    value = decode_attribute(element, name, _literals.decode_bool, "true or false")
    return default if value is None else value


def make_element(name: str, attributes: Optional[Dict[str, Optional[str]]] = None, namespace: str = EDM_NAMESPACE) -> etree._Element:
    """Create an element in ``namespace``, skipping attributes whose value is ``None``."""
    element = etree.Element(f"{{{namespace}}}{name}")
    for key, value in (attributes or {}).items():
        if value is not None:
            element.set(key, value)
    return element
