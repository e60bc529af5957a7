"""Render reorder changes as persistence patch operations.

A change ``(id, key)`` becomes ``(id, {"set": {<order field>: key}})``, the
only field-level write needed to persist one moved document. Mutations wrap
the same patches in the ``{"patch": {"id": ..., "set": ...}}`` envelope that
document stores accept as one transaction.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, NamedTuple, Tuple

Patch = Tuple[str, Dict[str, Dict[str, str]]]


class Change(NamedTuple):
    id: str
    order_key: str


def changes_to_patches(changes: Iterable[Change], order_field: str) -> List[Patch]:
    return [(doc_id, {"set": {order_field: key}}) for doc_id, key in changes]


def patches_to_mutations(patches: Iterable[Patch]) -> List[Dict[str, Any]]:
    return [{"patch": {"id": doc_id, **ops}} for doc_id, ops in patches]


__all__ = ["Change", "Patch", "changes_to_patches", "patches_to_mutations"]
