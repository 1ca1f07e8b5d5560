"""View projection: declarative views, field selection and connections."""

from readiness.views.connection import (
    Connection,
    ConnectionItem,
    Pagination,
    unwrap_connection,
    unwrap_connections_in_place,
)
from readiness.views.resolver import generate_select_paths, resolve
from readiness.views.schema import SCALAR, DataView, ListOf, Scalar, list_of

__all__ = [
    "SCALAR",
    "Connection",
    "ConnectionItem",
    "DataView",
    "ListOf",
    "Pagination",
    "Scalar",
    "generate_select_paths",
    "list_of",
    "resolve",
    "unwrap_connection",
    "unwrap_connections_in_place",
]
