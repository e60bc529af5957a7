"""Reorder and rank routes.

Handlers translate payloads to engine calls; ranking logic lives in
`docorder/logic/`. Domain errors propagate to the problem+json handlers
registered in `docorder.main`.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from docorder.config import AppConfig, load_config
from docorder.logic.patches import patches_to_mutations
from docorder.logic.reorder import reorder_documents
from docorder.models.reorder import (
    ChangeModel,
    RankBetweenRequest,
    RankBetweenResponse,
    RankSeedRequest,
    RankSeedResponse,
    ReorderRequest,
    ReorderResponse,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _config(request: Request) -> AppConfig:
    cfg = getattr(request.app.state, "config", None)
    return cfg if isinstance(cfg, AppConfig) else load_config()


@router.post(
    "/documents/reorder",
    response_model=ReorderResponse,
    summary="Re-rank documents after a drag-and-drop move",
)
def reorder(payload: ReorderRequest, request: Request) -> ReorderResponse:
    """Compute the new order and the minimal order-key writes for a move.

    Returns the full list sorted by order key, one change per moved
    document, the same changes as ``set`` patches and mutations, and a
    confirmation message.
    """
    cfg = _config(request)
    source_index, destination_index = payload.resolved_indices()
    result = reorder_documents(
        payload.documents,
        payload.selected_ids,
        source_index,
        destination_index,
        rank_space=cfg.rank.generator(),
        id_field=cfg.documents.id_field,
        order_field=cfg.documents.order_field,
        debug=payload.debug,
        validate=cfg.reorder.strict_preconditions,
    )
    return ReorderResponse(
        new_order=result.new_order,
        changes=[ChangeModel(id=c.id, order_key=c.order_key) for c in result.changes],
        patches=result.patches,
        mutations=patches_to_mutations(result.patches),
        message=result.message,
    )


@router.post("/ranks/between", response_model=RankBetweenResponse, summary="Key strictly between two keys")
def rank_between(payload: RankBetweenRequest, request: Request) -> RankBetweenResponse:
    ranks = _config(request).rank.generator()
    low = payload.low or ranks.min_key()
    high = payload.high or ranks.max_key()
    return RankBetweenResponse(key=ranks.between(low, high))


@router.post("/ranks/seed", response_model=RankSeedResponse, summary="Evenly spaced initial keys")
def rank_seed(payload: RankSeedRequest, request: Request) -> RankSeedResponse:
    ranks = _config(request).rank.generator()
    return RankSeedResponse(keys=ranks.seed(payload.count))


__all__ = ["router", "reorder", "rank_between", "rank_seed"]
