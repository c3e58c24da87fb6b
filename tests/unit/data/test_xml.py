# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Tests for the lxml element helpers."""

import pytest
from lxml import etree

from OData.Edmx.core._error_codes import PARSE_DUPLICATE_ELEMENT, PARSE_MISSING_ELEMENT, PARSE_XML_SYNTAX
from OData.Edmx.core.errors import MetadataParseError
from OData.Edmx.data._xml import (
    attribute_get_bool,
    iter_children,
    load_root,
    local_name,
    make_element,
    single_child,
)


class TestLoadRoot:
    def test_str_with_encoding_declaration(self):
        root = load_root('<?xml version="1.0" encoding="utf-8"?><Edmx Version="1.0" />')
        assert local_name(root) == "Edmx"

    def test_bytes(self):
        root = load_root(b"<a><b /></a>")
        assert local_name(root) == "a"

    def test_str_with_non_utf8_declaration(self):
        root = load_root('<?xml version="1.0" encoding="iso-8859-1"?><Edmx Name="Aktør" />')
        assert root.get("Name") == "Aktør"

    def test_declared_str_is_structured_error_when_malformed(self):
        with pytest.raises(MetadataParseError) as exc_info:
            load_root('<?xml version="1.0" encoding="utf-8"?><Edmx>')
        assert exc_info.value.subcode == PARSE_XML_SYNTAX

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            load_root(["<a />"])

    def test_comments_are_dropped(self):
        root = load_root("<a><!-- note --><b /></a>")
        assert [local_name(child) for child in root] == ["b"]


class TestChildren:
    def test_matches_local_name_across_namespaces(self):
        root = etree.fromstring('<a xmlns:x="urn:x"><x:b /><b /><c /></a>')
        assert len(list(iter_children(root, "b"))) == 2

    def test_single_child_missing(self):
        with pytest.raises(MetadataParseError) as exc_info:
            single_child(etree.fromstring("<a />"), "b")
        assert exc_info.value.subcode == PARSE_MISSING_ELEMENT
        assert exc_info.value.details["parent"] == "a"

    def test_single_child_optional(self):
        assert single_child(etree.fromstring("<a />"), "b", required=False) is None

    def test_single_child_duplicate(self):
        with pytest.raises(MetadataParseError) as exc_info:
            single_child(etree.fromstring("<a><b /><b /></a>"), "b", required=False)
        assert exc_info.value.subcode == PARSE_DUPLICATE_ELEMENT
        assert exc_info.value.found == "2"


class TestAttributes:
    def test_bool_default_when_absent(self):
        assert attribute_get_bool(etree.fromstring("<a />"), "Nullable", True) is True

    def test_bool_present(self):
        assert attribute_get_bool(etree.fromstring('<a Nullable="false" />'), "Nullable", True) is False

    def test_make_element_skips_none(self):
        element = make_element("End", {"Role": "A", "Type": None})
        assert dict(element.attrib) == {"Role": "A"}
        assert etree.QName(element).namespace == "http://schemas.microsoft.com/ado/2008/09/edm"
