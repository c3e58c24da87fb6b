# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Tests for Association, AssociationSet, End and Multiplicity."""

import pytest
from lxml import etree

from OData.Edmx.core._error_codes import PARSE_END_COUNT, PARSE_MISSING_ATTRIBUTE
from OData.Edmx.core.errors import MetadataParseError
from OData.Edmx.models.association import Association, AssociationSet, End, Multiplicity


class TestMultiplicity:
    """Tests for the multiplicity view over raw markers."""

    def test_known_markers(self):
        assert Multiplicity.parse("1") is Multiplicity.ONE
        assert Multiplicity.parse("0..1") is Multiplicity.ZERO_OR_ONE
        assert Multiplicity.parse("*") is Multiplicity.MANY

    def test_unknown_marker_falls_back_to_raw(self):
        assert Multiplicity.parse("1..*") == "1..*"
        assert not isinstance(Multiplicity.parse("1..*"), Multiplicity)

    def test_missing_marker(self):
        assert Multiplicity.parse(None) is None

    def test_end_keeps_raw_string(self):
        end = End(role="A", multiplicity="many")
        assert end.multiplicity == "many"
        assert end.multiplicity_kind == "many"

    def test_end_multiplicity_kind(self):
        assert End(multiplicity="0..1").multiplicity_kind is Multiplicity.ZERO_OR_ONE


class TestEnd:
    """Tests for End parsing."""

    def test_all_attributes_optional(self):
        assert End.from_element(etree.fromstring("<End />")) == End()

    def test_from_element(self):
        end = End.from_element(
            etree.fromstring('<End Role="Sag" Type="Default.Sag" EntitySet="Sager" Multiplicity="*" />')
        )
        assert end == End(role="Sag", entity_set="Sager", entity_type="Default.Sag", multiplicity="*")

    def test_to_element_skips_missing_attributes(self):
        element = End(role="Sag").to_element()
        assert dict(element.attrib) == {"Role": "Sag"}


class TestAssociation:
    """Tests for Association."""

    @staticmethod
    def _association(end_count):
        ends = "".join(f'<End Role="R{i}" Type="Default.Item" Multiplicity="1" />' for i in range(end_count))
        return etree.fromstring(f'<Association Name="Link">{ends}</Association>')

    def test_two_ends(self):
        association = Association.from_element(self._association(2))
        assert association.name == "Link"
        assert [end.role for end in association.ends] == ["R0", "R1"]

    @pytest.mark.parametrize("end_count", [0, 1, 3])
    def test_other_end_counts_fail(self, end_count):
        with pytest.raises(MetadataParseError) as exc_info:
            Association.from_element(self._association(end_count))

        err = exc_info.value
        assert err.subcode == PARSE_END_COUNT
        assert err.element == "Association"
        assert err.expected == "2"
        assert err.found == str(end_count)

    def test_constructor_enforces_two_ends(self):
        with pytest.raises(ValueError):
            Association(name="Link", ends=(End(role="A"),))

    def test_end_by_role(self):
        association = Association(name="Link", ends=(End(role="A"), End(role="B")))
        assert association.end_by_role("B") is association.ends[1]
        assert association.end_by_role("C") is None

    def test_missing_name_fails(self):
        with pytest.raises(MetadataParseError) as exc_info:
            Association.from_element(etree.fromstring("<Association><End /><End /></Association>"))
        assert exc_info.value.subcode == PARSE_MISSING_ATTRIBUTE


class TestAssociationSet:
    """Tests for AssociationSet."""

    def test_from_element(self):
        element = etree.fromstring(
            '<AssociationSet Name="LinkSet" Association="Default.Link">'
            '<End Role="A" EntitySet="As" /><End Role="B" EntitySet="Bs" />'
            "</AssociationSet>"
        )
        association_set = AssociationSet.from_element(element)

        assert association_set.name == "LinkSet"
        assert association_set.association == "Default.Link"
        assert association_set.ends == (End(role="A", entity_set="As"), End(role="B", entity_set="Bs"))
        assert association_set.end_by_role("A").entity_set == "As"

    @pytest.mark.parametrize("end_count", [1, 3])
    def test_other_end_counts_fail(self, end_count):
        ends = "<End />" * end_count
        element = etree.fromstring(f'<AssociationSet Name="S" Association="Default.Link">{ends}</AssociationSet>')
        with pytest.raises(MetadataParseError) as exc_info:
            AssociationSet.from_element(element)
        assert exc_info.value.subcode == PARSE_END_COUNT

    def test_missing_association_fails(self):
        element = etree.fromstring('<AssociationSet Name="S"><End /><End /></AssociationSet>')
        with pytest.raises(MetadataParseError) as exc_info:
            AssociationSet.from_element(element)
        assert exc_info.value.attribute == "Association"

    def test_constructor_enforces_two_ends(self):
        with pytest.raises(ValueError):
            AssociationSet(name="S", association="Default.Link", ends=(End(), End(), End()))

    def test_to_element_round_trip(self):
        association_set = AssociationSet(
            name="S", association="Default.Link", ends=(End(role="A", entity_set="As"), End(role="B"))
        )
        assert AssociationSet.from_element(association_set.to_element()) == association_set
