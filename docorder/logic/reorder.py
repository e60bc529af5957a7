"""Drag-and-drop reorder engine (fractional ranks).

Given the current ordered documents, the ids being dragged together and the
source/destination indices reported by the drag surface, assigns new order
keys to the dragged documents only. Keys of every other document are read
as anchors and never rewritten, so persisting the move costs one field
write per dragged document.

No FastAPI/Starlette imports; route handlers call ``reorder_documents``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Collection, List, MutableMapping, Optional, Sequence
import logging

from docorder.logic.patches import Change, Patch, changes_to_patches
from docorder.logic.rank import RankGenerator, RankSpace
from docorder.logic.validation import validate_reorder

logger = logging.getLogger(__name__)

ID_FIELD = "_id"
ORDER_FIELD = "orderRank"

Document = MutableMapping[str, Any]


@dataclass
class ReorderResult:
    new_order: List[Document]
    changes: List[Change]
    message: str
    patches: List[Patch] = field(default_factory=list)


def move_message(count: int, moving_up: bool, source_index: int, destination_index: int) -> str:
    """Human-facing summary using 1-based positions."""
    return " ".join(
        [
            "Moved",
            "1 Document" if count == 1 else f"{count} Documents",
            "up" if moving_up else "down",
            "from position",
            f"{source_index + 1} to {destination_index + 1}",
        ]
    )


def reorder_documents(
    entities: Sequence[Document],
    selected_ids: Collection[str],
    source_index: int,
    destination_index: int,
    *,
    rank_space: Optional[RankSpace] = None,
    id_field: str = ID_FIELD,
    order_field: str = ORDER_FIELD,
    debug: bool = False,
    validate: bool = True,
) -> ReorderResult:
    """Move the selected documents to ``destination_index`` and re-rank them.

    The selected documents keep their original relative order (list order,
    not selection order). When moving up they land just before the document
    at ``destination_index``; otherwise just after it. Each gets a key
    strictly inside the gap next to that anchor, so no existing key collides.

    The selected document objects have their order field overwritten in
    place. ``new_order`` is a new list sorted by order key.
    ``changes`` only lists documents that were ranked at the anchor.

    With ``validate=False`` malformed input is not rejected and yields
    best-effort output.
    """
    if validate:
        validate_reorder(entities, selected_ids, source_index, destination_index, id_field=id_field)
    ranks = rank_space or RankGenerator()
    selected = set(selected_ids)
    moving_up = source_index > destination_index
    selected_items = [doc for doc in entities if doc[id_field] in selected]

    assembled: List[Document] = []
    ranked: List[Document] = []
    for index, current in enumerate(entities):
        if current[id_field] in selected:
            continue
        if index != destination_index:
            assembled.append(current)
            continue

        prev_key = entities[index - 1].get(order_field) if index > 0 else None
        cur_key = current.get(order_field)
        next_key = entities[index + 1].get(order_field) if index + 1 < len(entities) else None
        prev_key = prev_key or ranks.min_key()
        next_key = next_key or ranks.max_key()

        upper = cur_key if moving_up else next_key
        key = ranks.between(prev_key, cur_key) if moving_up else ranks.between(cur_key, next_key)
        for doc in selected_items:
            doc[order_field] = key
            key = ranks.between(key, upper)
        ranked = selected_items

        if moving_up:
            assembled.extend(selected_items)
            assembled.append(current)
        else:
            assembled.append(current)
            assembled.extend(selected_items)

    # The interleave above already matches the keys; the sort is a safety net.
    new_order = sorted(assembled, key=lambda doc: doc.get(order_field) or "")
    changes = [Change(doc[id_field], doc[order_field]) for doc in ranked]
    message = move_message(len(selected_items), moving_up, source_index, destination_index)

    if debug:
        logger.info(
            "reorder.debug before_ids=%s after_ids=%s changes=%s",
            [doc.get(id_field) for doc in entities],
            [doc.get(id_field) for doc in new_order],
            changes,
        )
    logger.info(
        "reorder.completed moved=%s direction=%s source=%s destination=%s",
        len(selected_items),
        "up" if moving_up else "down",
        source_index,
        destination_index,
    )
    return ReorderResult(
        new_order=new_order,
        changes=changes,
        message=message,
        patches=changes_to_patches(changes, order_field),
    )


__all__ = [
    "ID_FIELD",
    "ORDER_FIELD",
    "ReorderResult",
    "move_message",
    "reorder_documents",
]
