"""Declarative view schemas.

A view names the fields of one result shape and tags each one as a plain
value (``SCALAR``), a nested struct (another ``DataView``) or a collection
(``ListOf``). Projection is driven entirely by these declarations.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Scalar:
    """A leaf value, copied as-is when selected."""


SCALAR = Scalar()


@dataclass(frozen=True, eq=False)
class DataView:
    """Field declarations for one result type.

    Attributes:
        name: Type name (e.g. "WellnessMetric")
        fields: Ordered mapping of field name to field kind
        key: Field whose value becomes the cursor when this view is a list element
    """

    name: str
    fields: Mapping[str, FieldKind] = field(default_factory=dict)
    key: str = "id"


@dataclass(frozen=True, eq=False)
class ListOf:
    """A collection field; every element is projected through ``view``."""

    view: DataView


FieldKind = Union[Scalar, DataView, ListOf]


def list_of(view: DataView) -> ListOf:
    return ListOf(view=view)
