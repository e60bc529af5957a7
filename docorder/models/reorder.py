"""Pydantic models for reorder and rank payloads.

Kept out of the route module so handlers and tests share one declaration of
the request and response shapes.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DragLocation(BaseModel):
    """Drag surface location; extra keys such as ``droppableId`` are kept."""

    model_config = ConfigDict(extra="allow")

    index: int


class ReorderRequest(BaseModel):
    documents: List[Dict[str, Any]]
    selected_ids: List[str]
    source: Optional[DragLocation] = None
    destination: Optional[DragLocation] = None
    source_index: Optional[int] = None
    destination_index: Optional[int] = None
    debug: bool = False

    @model_validator(mode="after")
    def indices_present(self) -> "ReorderRequest":
        if self.source is None and self.source_index is None:
            raise ValueError("source or source_index is required")
        if self.destination is None and self.destination_index is None:
            raise ValueError("destination or destination_index is required")
        return self

    def resolved_indices(self) -> Tuple[int, int]:
        source = self.source.index if self.source is not None else self.source_index
        destination = self.destination.index if self.destination is not None else self.destination_index
        return int(source), int(destination)  # type: ignore[arg-type]


class ChangeModel(BaseModel):
    id: str
    order_key: str


class ReorderResponse(BaseModel):
    new_order: List[Dict[str, Any]]
    changes: List[ChangeModel]
    patches: List[Tuple[str, Dict[str, Dict[str, str]]]]
    mutations: List[Dict[str, Any]]
    message: str


class RankBetweenRequest(BaseModel):
    low: Optional[str] = None
    high: Optional[str] = None


class RankBetweenResponse(BaseModel):
    key: str


class RankSeedRequest(BaseModel):
    count: int = Field(ge=0, le=10000)


class RankSeedResponse(BaseModel):
    keys: List[str]


__all__ = [
    "DragLocation",
    "ReorderRequest",
    "ChangeModel",
    "ReorderResponse",
    "RankBetweenRequest",
    "RankBetweenResponse",
    "RankSeedRequest",
    "RankSeedResponse",
]
