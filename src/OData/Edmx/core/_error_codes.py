# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

# Metadata parse subcodes
PARSE_XML_SYNTAX = "parse_xml_syntax"
PARSE_UNEXPECTED_ROOT = "parse_unexpected_root"
PARSE_MISSING_ELEMENT = "parse_missing_element"
PARSE_DUPLICATE_ELEMENT = "parse_duplicate_element"
PARSE_MISSING_ATTRIBUTE = "parse_missing_attribute"
PARSE_INVALID_VALUE = "parse_invalid_value"
PARSE_UNSUPPORTED_VERSION = "parse_unsupported_version"
PARSE_UNKNOWN_TYPE = "parse_unknown_type"
PARSE_END_COUNT = "parse_end_count"
PARSE_COMPOSITE_KEY = "parse_composite_key"

ALL_PARSE_SUBCODES = {
    PARSE_XML_SYNTAX,
    PARSE_UNEXPECTED_ROOT,
    PARSE_MISSING_ELEMENT,
    PARSE_DUPLICATE_ELEMENT,
    PARSE_MISSING_ATTRIBUTE,
    PARSE_INVALID_VALUE,
    PARSE_UNSUPPORTED_VERSION,
    PARSE_UNKNOWN_TYPE,
    PARSE_END_COUNT,
    PARSE_COMPOSITE_KEY,
}
