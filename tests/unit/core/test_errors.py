# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from OData.Edmx.core._error_codes import ALL_PARSE_SUBCODES, PARSE_INVALID_VALUE, PARSE_XML_SYNTAX
from OData.Edmx.core.errors import EdmxError, MetadataParseError


def test_parse_error_is_structured():
    err = MetadataParseError(
        "Invalid value for Property/@MaxLength",
        subcode=PARSE_INVALID_VALUE,
        element="Property",
        attribute="MaxLength",
        expected="integer",
        found="Max",
    )
    assert isinstance(err, EdmxError)
    assert err.code == "metadata_parse_error"
    assert err.subcode == PARSE_INVALID_VALUE
    assert err.element == "Property"
    assert err.attribute == "MaxLength"
    assert err.expected == "integer"
    assert err.found == "Max"
    assert str(err) == "Invalid value for Property/@MaxLength"


def test_context_is_omitted_when_not_given():
    err = MetadataParseError("boom", subcode=PARSE_XML_SYNTAX, details={"line": 3})
    assert err.details == {"line": 3}
    assert err.element is None
    assert err.found is None


def test_to_dict():
    err = MetadataParseError("boom", subcode=PARSE_XML_SYNTAX, element="Edmx")
    d = err.to_dict()
    assert d["message"] == "boom"
    assert d["code"] == "metadata_parse_error"
    assert d["subcode"] == PARSE_XML_SYNTAX
    assert d["details"] == {"element": "Edmx"}
    assert d["timestamp"] == err.timestamp


def test_subcodes_are_unique_strings():
    assert len(ALL_PARSE_SUBCODES) == 10
    assert all(code.startswith("parse_") for code in ALL_PARSE_SUBCODES)


def test_syntax_error_carries_position():
    from OData.Edmx.parser import parse_edmx

    try:
        parse_edmx("<edmx:Edmx>\n<unclosed>")
    except MetadataParseError as err:
        assert err.subcode == PARSE_XML_SYNTAX
        assert "line" in err.details
        assert isinstance(err.__cause__, Exception)
    else:
        raise AssertionError("expected MetadataParseError")


def test_caller_details_are_not_modified():
    details = {"line": 1}
    err = MetadataParseError("boom", subcode=PARSE_INVALID_VALUE, details=details, element="Property", found="x")
    assert details == {"line": 1}
    assert err.details == {"line": 1, "element": "Property", "found": "x"}
