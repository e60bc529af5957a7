"""Configuration utilities for the reorder service.

This module loads application configuration with the following rules:
- Primary source: `docorder_config.json` at the project root.
- Overrides: environment variables, then optional text files under `config/`.
- Validation: Pydantic models enforce required fields and value constraints.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from docorder.logic.rank import BASE36, DEFAULT_WIDTH, RankGenerator


CONFIG_DIR = Path("config")
ROOT_CONFIG = Path("docorder_config.json")
logger = logging.getLogger(__name__)


def _read_config_file(rel_path: str) -> Optional[str]:
    path = CONFIG_DIR / rel_path
    try:
        if path.exists():
            return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        # Recoverable: log and ignore unreadable override
        logger.warning("Failed to read override %s: %s", path, e)
        return None
    return None


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(key, default)


class DocumentsConfig(BaseModel):
    id_field: str = "_id"
    order_field: str = "orderRank"

    @field_validator("id_field", "order_field")
    @classmethod
    def field_name_must_be_non_empty(cls, v: str) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("document field names must be non-empty strings")
        return v.strip()


class RankConfig(BaseModel):
    alphabet: str = BASE36
    width: int = Field(default=DEFAULT_WIDTH, gt=0)

    @field_validator("alphabet")
    @classmethod
    def alphabet_must_ascend(cls, v: str) -> str:
        if len(v) < 3 or list(v) != sorted(set(v)):
            raise ValueError("rank.alphabet must hold at least 3 strictly ascending characters")
        return v

    def generator(self) -> RankGenerator:
        return RankGenerator(alphabet=self.alphabet, width=self.width)


class ReorderConfig(BaseModel):
    strict_preconditions: bool = Field(default=True)


class AppConfig(BaseModel):
    documents: DocumentsConfig = Field(default_factory=DocumentsConfig)
    rank: RankConfig = Field(default_factory=RankConfig)
    reorder: ReorderConfig = Field(default_factory=ReorderConfig)


def _read_json_file(path: Path) -> dict:
    try:
        if path.exists():
            return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("Failed to read JSON config %s: %s", path, e)
    return {}


def load_config() -> AppConfig:
    """Load configuration with validation.

    Precedence (highest first):
    1) Environment variables
    2) Text files in `config/` (optional)
    3) docorder_config.json at project root (primary base)
    4) Defaults
    """

    base = _read_json_file(ROOT_CONFIG)

    def _base(path: str, default: Optional[str] = None) -> Optional[str]:
        cur: object = base
        for key in path.split("."):
            if not isinstance(cur, dict) or key not in cur:
                return default
            cur = cur[key]
        return str(cur) if cur is not None else default

    id_field = _env("DOCORDER_ID_FIELD") or _read_config_file("documents.id_field") or _base("documents.id_field", "_id")
    order_field = _env("DOCORDER_ORDER_FIELD") or _read_config_file("documents.order_field") or _base("documents.order_field", "orderRank")

    alphabet = _env("DOCORDER_RANK_ALPHABET") or _read_config_file("rank.alphabet") or _base("rank.alphabet", BASE36)
    width_text = _env("DOCORDER_RANK_WIDTH") or _read_config_file("rank.width") or _base("rank.width", str(DEFAULT_WIDTH))

    strict_text = (
        _env("DOCORDER_STRICT_PRECONDITIONS")
        or _read_config_file("reorder.strict_preconditions")
        or _base("reorder.strict_preconditions", "true")
    )
    strict = str(strict_text).strip().lower() in {"1", "true", "yes"}

    try:
        cfg = AppConfig(
            documents=DocumentsConfig(id_field=id_field, order_field=order_field),
            rank=RankConfig(alphabet=alphabet, width=int(str(width_text).strip())),
            reorder=ReorderConfig(strict_preconditions=strict),
        )
        return cfg
    except (PydanticValidationError, ValueError) as e:
        logger.error("Invalid application configuration: %s", e)
        raise


__all__ = [
    "AppConfig",
    "DocumentsConfig",
    "RankConfig",
    "ReorderConfig",
    "load_config",
]
