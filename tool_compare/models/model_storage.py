"""Storage file models for persisting the tool catalog."""

from datetime import datetime

from pydantic import BaseModel, Field

from tool_compare.consts import CATALOG_VERSION
from tool_compare.models.common import _utc_now
from tool_compare.models.model_tool import ToolRecord


class CatalogFile(BaseModel):
    """Catalog file stored in data/processed/tools.json.

    Version field enables schema migrations on load.
    """

    version: str = Field(default=CATALOG_VERSION, description="Schema version for migrations")
    updated_at: datetime = Field(default_factory=_utc_now)
    total_tools: int = Field(default=0, ge=0)
    tools: list[ToolRecord] = Field(default_factory=list)
