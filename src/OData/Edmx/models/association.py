# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Relationship models: ``Association``, ``AssociationSet`` and their ``End`` roles.

An association describes the two sides of a relationship between entity
types; an association set binds those sides to entity sets inside a
container. Both carry exactly two ends.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from lxml import etree

from ..common.constants import (
    ELEMENT_ASSOCIATION,
    ELEMENT_ASSOCIATION_SET,
    ELEMENT_END,
    MULTIPLICITY_MANY,
    MULTIPLICITY_ONE,
    MULTIPLICITY_ZERO_OR_ONE,
)
from ..core._error_codes import PARSE_END_COUNT
from ..core.errors import MetadataParseError
from ..data._xml import iter_children, local_name, make_element, optional_attribute, required_attribute


class Multiplicity(str, Enum):
    """Known multiplicity markers of an association end."""

    ONE = MULTIPLICITY_ONE
    ZERO_OR_ONE = MULTIPLICITY_ZERO_OR_ONE
    MANY = MULTIPLICITY_MANY

    @classmethod
    def parse(cls, value: Optional[str]) -> Union["Multiplicity", str, None]:
        """
        Interpret a raw multiplicity marker.

        :param value: The ``Multiplicity`` attribute as written.
        :return: The matching member, the raw string unchanged when it is not a
            known marker, or ``None`` when there is no marker.
        """
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return value


@dataclass(frozen=True)
class End:
    """
    One side of an association or association set.

    :param role: Role name, referenced by navigation properties.
    :type role: str | None
    :param entity_set: Entity set bound to this side (association sets).
    :type entity_set: str | None
    :param entity_type: Qualified entity type of this side (associations).
    :type entity_type: str | None
    :param multiplicity: Multiplicity marker as written, e.g. ``"1"``, ``"0..1"``, ``"*"``.
    :type multiplicity: str | None
    """

    role: Optional[str] = None
    entity_set: Optional[str] = None
    entity_type: Optional[str] = None
    multiplicity: Optional[str] = None

    @property
    def multiplicity_kind(self) -> Union[Multiplicity, str, None]:
        """:attr:`multiplicity` as a :class:`Multiplicity` where recognized."""
        return Multiplicity.parse(self.multiplicity)

    @classmethod
    def from_element(cls, element: etree._Element) -> "End":
        return cls(
            role=optional_attribute(element, "Role"),
            entity_set=optional_attribute(element, "EntitySet"),
            entity_type=optional_attribute(element, "Type"),
            multiplicity=optional_attribute(element, "Multiplicity"),
        )

    def to_element(self) -> etree._Element:
        return make_element(
            ELEMENT_END,
            {
                "Role": self.role,
                "EntitySet": self.entity_set,
                "Type": self.entity_type,
                "Multiplicity": self.multiplicity,
            },
        )


def _check_two_ends(owner: str, name: str, ends: Tuple[End, ...]) -> None:
    if len(ends) != 2:
        raise ValueError(f"{owner} {name} must have exactly two ends, got {len(ends)}")


def _ends_from_element(element: etree._Element) -> Tuple[End, End]:
    nodes = list(iter_children(element, ELEMENT_END))
    if len(nodes) != 2:
        raise MetadataParseError(
            f"{local_name(element)} {element.get('Name')!r} does not have two end roles",
            subcode=PARSE_END_COUNT,
            element=local_name(element),
            expected="2",
            found=str(len(nodes)),
        )
    return End.from_element(nodes[0]), End.from_element(nodes[1])


@dataclass(frozen=True)
class Association:
    """
    Named relationship between two entity types.

    :param name: Association name, referenced by ``NavigationProperty.relationship``.
    :type name: str
    :param ends: The two ends.
    :type ends: tuple[End, End]
    :raises ValueError: If ``ends`` does not hold exactly two ends.
    """

    name: str
    ends: Tuple[End, End]

    def __post_init__(self) -> None:
        _check_two_ends("Association", self.name, self.ends)

    def end_by_role(self, role: str) -> Optional[End]:
        """Return the end playing ``role``, or ``None``."""
        return next((end for end in self.ends if end.role == role), None)

    @classmethod
    def from_element(cls, element: etree._Element) -> "Association":
        return cls(name=required_attribute(element, "Name"), ends=_ends_from_element(element))

    def to_element(self) -> etree._Element:
        element = make_element(ELEMENT_ASSOCIATION, {"Name": self.name})
        element.extend(end.to_element() for end in self.ends)
        return element


@dataclass(frozen=True)
class AssociationSet:
    """
    Binds the ends of an association to entity sets within a container.

    :param name: Association set name.
    :type name: str
    :param association: Qualified name of the association it instantiates.
    :type association: str
    :param ends: The two ends.
    :type ends: tuple[End, End]
    :raises ValueError: If ``ends`` does not hold exactly two ends.
    """

    name: str
    association: str
    ends: Tuple[End, End]

    def __post_init__(self) -> None:
        _check_two_ends("AssociationSet", self.name, self.ends)

    def end_by_role(self, role: str) -> Optional[End]:
        """Return the end playing ``role``, or ``None``."""
        return next((end for end in self.ends if end.role == role), None)

    @classmethod
    def from_element(cls, element: etree._Element) -> "AssociationSet":
        return cls(
            name=required_attribute(element, "Name"),
            association=required_attribute(element, "Association"),
            ends=_ends_from_element(element),
        )

    def to_element(self) -> etree._Element:
        element = make_element(ELEMENT_ASSOCIATION_SET, {"Name": self.name, "Association": self.association})
        element.extend(end.to_element() for end in self.ends)
        return element


__all__ = ["Multiplicity", "End", "Association", "AssociationSet"]
