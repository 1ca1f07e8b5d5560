"""Field selection and projection over declarative views.

Selection paths are dot-delimited (``"wellness_history.rhr"``). Rules:

- A bare container path (``"acwr"``, ``"wellness_history"``) selects every
  field of that container, recursively.
- Dotted paths select only the named children.
- List fields are always returned as a ``Connection``, even when a single
  element field is selected.
- Paths that match nothing in the view are ignored. A container whose
  selected children are all unknown is left out.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from readiness.core.logger import get_logger
from readiness.views.connection import Connection, ConnectionItem
from readiness.views.schema import DataView, ListOf, Scalar

logger = get_logger("VIEW")

# Per-field selection: None selects the whole field, a dict selects children
Selection = dict[str, "Selection | None"]


def generate_select_paths(view: DataView, prefix: str = "") -> list[str]:
    """Enumerate every leaf path of a view.

    Nested structs and list elements are walked the same way, so the result
    is a "select everything" selection for ``resolve``.

    Example:
        >>> generate_select_paths(READINESS_VIEW)[:2]
        ['acwr.acute_load', 'acwr.chronic_load']
    """
    paths: list[str] = []
    for name, kind in view.fields.items():
        path = f"{prefix}.{name}" if prefix else name
        nested = kind.view if isinstance(kind, ListOf) else kind
        if isinstance(nested, DataView):
            paths.extend(generate_select_paths(nested, path))
        else:
            paths.append(path)
    return paths


def _build_selection(view: DataView, paths: set[str]) -> Selection:
    selected: Selection = {}
    for name, kind in view.fields.items():
        if name in paths:
            selected[name] = None
            continue
        if isinstance(kind, Scalar):
            continue
        prefix = f"{name}."
        child_paths = {p[len(prefix) :] for p in paths if p.startswith(prefix)}
        if not child_paths:
            continue
        nested = _build_selection(kind.view if isinstance(kind, ListOf) else kind, child_paths)
        if nested:
            selected[name] = nested
    return selected


def _has_field(data: Any, name: str) -> bool:
    if isinstance(data, Mapping):
        return name in data
    return hasattr(data, name)


def _read_field(data: Any, name: str) -> Any:
    if isinstance(data, Mapping):
        return data[name]
    return getattr(data, name)


def _project(data: Any, view: DataView, selected: Selection | None) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for name, kind in view.fields.items():
        if selected is not None and name not in selected:
            continue
        if not _has_field(data, name):
            continue
        sub = None if selected is None else selected[name]
        value = _read_field(data, name)
        if isinstance(kind, Scalar) or value is None:
            out[name] = value
        elif isinstance(kind, ListOf):
            out[name] = _to_connection(value, kind.view, sub)
        else:
            out[name] = _project(value, kind, sub)
    return out


def _cursor(element: Any, view: DataView, index: int) -> str:
    if _has_field(element, view.key):
        key = _read_field(element, view.key)
        if key is not None:
            return str(key)
    return str(index)


def _to_connection(elements: Iterable[Any], view: DataView, selected: Selection | None) -> Connection[dict[str, Any]]:
    items = [
        ConnectionItem(cursor=_cursor(element, view, index), node=_project(element, view, selected))
        for index, element in enumerate(elements)
    ]
    return Connection(items=items)


def resolve(data: Any, view: DataView, selection: Iterable[str]) -> dict[str, Any]:
    """Project ``data`` down to the fields named by ``selection``.

    Args:
        data: Mapping (or attribute object) shaped like ``view``
        view: Declarative view of the result type
        selection: Selection paths; an empty selection yields ``{}``

    Returns:
        Dict with only the selected fields. List fields become ``Connection``
        objects whose nodes hold the selected element fields.
    """
    paths = set(selection)
    selected = _build_selection(view, paths)

    known = generate_select_paths(view)
    unknown = sorted(p for p in paths if p not in known and not any(k.startswith(f"{p}.") for k in known))
    if unknown:
        logger.debug(f"Ignoring unknown selection paths for {view.name}: {unknown}")

    return _project(data, view, selected)
