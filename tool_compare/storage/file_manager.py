"""File-based storage for the tool catalog.

The catalog is the only persisted input of the comparison engine; all
scores are recomputed from it on demand.
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from pydantic import ValidationError

from tool_compare.consts import DEFAULT_DATA_DIR
from tool_compare.models.model_storage import CatalogFile
from tool_compare.models.model_tool import ToolRecord

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when a catalog file exists but cannot be parsed."""


def find_tool_by_id(tools: list[ToolRecord], tool_id: str) -> ToolRecord | None:
    """Find a tool by id, ignoring case."""
    wanted = tool_id.lower()
    for tool in tools:
        if tool.id.lower() == wanted:
            return tool
    return None


class FileManager:
    """File-based storage manager for the tool catalog.

    Directory structure:
        data/
        └── processed/tools.json    # Tool catalog
    """

    def __init__(self, data_dir: Path | str = DEFAULT_DATA_DIR):
        """Initialize FileManager with data directory.

        Args:
            data_dir: Root directory for all data files.
        """
        self.data_dir = Path(data_dir)
        self._processed_dir = self.data_dir / "processed"

    @property
    def catalog_path(self) -> Path:
        return self._processed_dir / "tools.json"

    def save_tools(self, tools: list[ToolRecord], path: Path | None = None) -> Path:
        """Save the tool catalog.

        Args:
            tools: Tools to store.
            path: Optional explicit file path. Uses the default catalog path if None.

        Returns:
            Path to the saved file.
        """
        path = Path(path) if path else self.catalog_path
        path.parent.mkdir(parents=True, exist_ok=True)

        catalog = CatalogFile(
            updated_at=datetime.now(UTC),
            total_tools=len(tools),
            tools=tools,
        )
        path.write_text(catalog.model_dump_json(indent=2, by_alias=True), encoding="utf-8")
        logger.info(f"Saved tool catalog: {path} ({len(tools)} tools)")
        return path

    def load_tools(self, path: Path | None = None) -> list[ToolRecord] | None:
        """Load the tool catalog.

        Accepts either a catalog file or a bare JSON list of tools.

        Args:
            path: Optional explicit file path. Uses the default catalog path if None.

        Returns:
            List of tools if the file exists, None otherwise.

        Raises:
            CatalogError: If the file is not valid JSON or fails validation.
        """
        path = Path(path) if path else self.catalog_path
        if not path.exists():
            logger.warning(f"Tool catalog not found: {path}")
            return None

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if isinstance(data, list):
                tools = [ToolRecord.model_validate(item) for item in data]
            else:
                tools = CatalogFile.model_validate(data).tools
        except (json.JSONDecodeError, ValidationError) as e:
            raise CatalogError(f"Invalid tool catalog {path}: {e}") from e

        logger.info(f"Loaded tool catalog: {path} ({len(tools)} tools)")
        return tools

    def find_tool(self, tool_id: str, path: Path | None = None) -> ToolRecord | None:
        """Find a tool by id (case-insensitive) in the catalog."""
        return find_tool_by_id(self.load_tools(path) or [], tool_id)
