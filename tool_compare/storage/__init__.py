"""Storage layer for the tool catalog."""

from tool_compare.storage.file_manager import CatalogError, FileManager, find_tool_by_id

__all__ = ["CatalogError", "FileManager", "find_tool_by_id"]
