"""Tests for catalog file storage."""

import json

import pytest

from tool_compare.storage.file_manager import CatalogError, FileManager, find_tool_by_id


@pytest.fixture
def file_manager(temp_dir) -> FileManager:
    """Create a FileManager rooted in a temp directory."""
    return FileManager(data_dir=temp_dir)


class TestCatalog:
    """Tests for catalog save/load."""

    def test_save_and_load(self, file_manager, sample_tools) -> None:
        path = file_manager.save_tools(sample_tools)
        assert path == file_manager.catalog_path
        assert path.exists()

        loaded = file_manager.load_tools()
        assert loaded is not None
        assert [t.id for t in loaded] == [t.id for t in sample_tools]
        assert loaded[0].raw_pricing is not None
        assert loaded[0].raw_pricing.starting_price == "$20/month"

    def test_saved_file_uses_camel_case(self, file_manager, gpt4) -> None:
        path = file_manager.save_tools([gpt4])
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["total_tools"] == 1
        assert data["tools"][0]["pricingText"] == "Pay-as-you-go API pricing"
        assert data["tools"][0]["rawPricing"]["freeTier"] is False

    def test_load_missing_returns_none(self, file_manager) -> None:
        assert file_manager.load_tools() is None

    def test_load_bare_list(self, file_manager, temp_dir) -> None:
        path = temp_dir / "tools.json"
        path.write_text(
            json.dumps(
                [
                    {
                        "id": "cursor",
                        "name": "Cursor",
                        "category": "ide",
                        "pricingText": "Freemium",
                        "openSource": False,
                        "easeOfUse": "Easy",
                    }
                ]
            ),
            encoding="utf-8",
        )
        tools = file_manager.load_tools(path)
        assert tools is not None
        assert tools[0].pricing_text == "Freemium"
        assert tools[0].ease_of_use == "Easy"

    def test_load_numeric_ratings(self, file_manager, temp_dir) -> None:
        path = temp_dir / "numeric.json"
        path.write_text(
            json.dumps([{"id": "x", "name": "X", "easeOfUse": 3, "documentation": "Good"}]),
            encoding="utf-8",
        )
        tools = file_manager.load_tools(path)
        assert tools is not None
        assert tools[0].ease_of_use is None
        assert tools[0].documentation == "Good"

    def test_load_invalid_json(self, file_manager, temp_dir) -> None:
        path = temp_dir / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError):
            file_manager.load_tools(path)

    def test_load_invalid_schema(self, file_manager, temp_dir) -> None:
        path = temp_dir / "bad.json"
        path.write_text(json.dumps([{"name": "missing id"}]), encoding="utf-8")
        with pytest.raises(CatalogError):
            file_manager.load_tools(path)

    def test_find_tool(self, file_manager, sample_tools) -> None:
        file_manager.save_tools(sample_tools)
        tool = file_manager.find_tool("GPT-4")
        assert tool is not None
        assert tool.name == "GPT-4"
        assert file_manager.find_tool("nope") is None

    def test_find_tool_by_id(self, sample_tools) -> None:
        assert find_tool_by_id(sample_tools, "LLAMA").id == "llama"
        assert find_tool_by_id(sample_tools, "nope") is None
        assert find_tool_by_id([], "gpt-4") is None
