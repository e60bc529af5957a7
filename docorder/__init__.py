"""Document reorder service package.

Computes fractional order keys for documents moved by drag-and-drop and the
minimal per-document writes that persist the move. Ranking logic lives in
`docorder/logic/`; the FastAPI surface in `docorder/routes/`.
"""

from __future__ import annotations

from docorder.logic.reorder import ReorderResult, reorder_documents
from docorder.main import create_app

__all__ = ["create_app", "reorder_documents", "ReorderResult"]
