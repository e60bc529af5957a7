"""Precondition checks for reorder requests.

Rejects input the engine cannot place: an empty list, an empty selection,
indices outside the list and documents without a string identifier.
Selected ids that are missing from the list, or a destination that lands
on a selected document, are passed through.
"""

from __future__ import annotations

from typing import Any, Collection, Sequence


class ReorderError(ValueError):
    code = "REORDER_INVALID"


class EmptyList(ReorderError):
    code = "REORDER_EMPTY_LIST"


class EmptySelection(ReorderError):
    code = "REORDER_EMPTY_SELECTION"


class InvalidIndex(ReorderError):
    code = "REORDER_INVALID_INDEX"


class MissingIdentifier(ReorderError):
    code = "REORDER_MISSING_ID"


def validate_reorder(
    entities: Sequence[Any],
    selected_ids: Collection[str],
    source_index: int,
    destination_index: int,
    id_field: str = "_id",
) -> None:
    if not entities:
        raise EmptyList("documents must not be empty")
    if not selected_ids:
        raise EmptySelection("selected_ids must not be empty")
    size = len(entities)
    for name, index in (("source", source_index), ("destination", destination_index)):
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < size:
            raise InvalidIndex(f"{name} index {index!r} is outside 0..{size - 1}")
    for position, doc in enumerate(entities):
        if not isinstance(doc.get(id_field), str):
            raise MissingIdentifier(f"document at index {position} has no string {id_field!r}")


__all__ = [
    "ReorderError",
    "EmptyList",
    "EmptySelection",
    "InvalidIndex",
    "MissingIdentifier",
    "validate_reorder",
]
