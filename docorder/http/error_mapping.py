"""Central error mapping for reorder and rank failures.

Single source of truth for mapping domain error codes to problem+json
titles and HTTP statuses. Handlers import from here instead of hardcoding
strings or numbers.
"""

from __future__ import annotations

REORDER_ERROR_MAP = {
    "REORDER_INVALID": {"title": "Invalid Reorder", "status": 422},
    "REORDER_EMPTY_LIST": {"title": "Invalid Reorder", "status": 422},
    "REORDER_EMPTY_SELECTION": {"title": "Invalid Reorder", "status": 422},
    "REORDER_INVALID_INDEX": {"title": "Invalid Reorder", "status": 422},
    "REORDER_MISSING_ID": {"title": "Invalid Reorder", "status": 422},
    "RANK_INVALID_INTERVAL": {"title": "Invalid Rank", "status": 422},
}

DEFAULT_CODE = "REORDER_INVALID"
DEFAULT_ERROR = {"title": "Invalid Request", "status": 400}

__all__ = ["REORDER_ERROR_MAP", "DEFAULT_CODE", "DEFAULT_ERROR"]
