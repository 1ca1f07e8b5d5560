"""Connection wrapper for projected list fields.

A projected collection is returned as a ``Connection``: each element is
paired with a cursor and the list carries pagination metadata. Clients
that want plain arrays flatten it back with ``unwrap_connection``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Pagination:
    has_next: bool = False
    has_previous: bool = False
    next_cursor: str | None = None
    previous_cursor: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "has_next": self.has_next,
            "has_previous": self.has_previous,
            "next_cursor": self.next_cursor,
            "previous_cursor": self.previous_cursor,
        }


@dataclass(frozen=True)
class ConnectionItem(Generic[T]):
    cursor: str
    node: T


@dataclass(frozen=True)
class Connection(Generic[T]):
    items: list[ConnectionItem[T]]
    pagination: Pagination = field(default_factory=Pagination)

    def nodes(self) -> list[T]:
        return [item.node for item in self.items]

    def to_dict(self) -> dict[str, Any]:
        """Serialized form: ``{"items": [{"cursor", "node"}], "pagination": {...}}``."""
        return {
            "items": [{"cursor": item.cursor, "node": item.node} for item in self.items],
            "pagination": self.pagination.to_dict(),
        }


def unwrap_connection(value: Any) -> Any:
    """Flatten a connection to the list of its nodes.

    Accepts a ``Connection`` or its serialized mapping form (anything with an
    ``items`` key). Any other value, including an already flat list or None,
    is returned unchanged.
    """
    if isinstance(value, Connection):
        return value.nodes()
    # JSON clients hold the shape produced by Connection.to_dict()
    if isinstance(value, Mapping) and "items" in value:
        return [item["node"] for item in value["items"]]
    return value


def unwrap_connections_in_place(obj: MutableMapping[str, Any], field_names: Iterable[str]) -> MutableMapping[str, Any]:
    """Replace each named connection field of ``obj`` with its flat node list.

    Fields that are missing or not connections are left alone. Returns ``obj``.
    """
    for name in field_names:
        if name in obj:
            obj[name] = unwrap_connection(obj[name])
    return obj
