import json

import pytest

from design_tools_website.data_manager import CategoryReadError
from design_tools_website.data_manager import category_exists
from design_tools_website.data_manager import list_categories
from design_tools_website.data_manager import load_catalog
from design_tools_website.data_manager import read_category
from design_tools_website.data_manager import write_category
from design_tools_website.models import Tool


def _tool(name="Contrast Checker", slug="contrast-checker", tags=("a11y", "color")):
    return Tool(
        name=name,
        slug=slug,
        description="Checks WCAG contrast",
        url="https://example.com/contrast",
        tags=list(tags),
    )


class TestListCategories:
    """Tests for list_categories."""

    def test_lists_only_json_files_sorted(self, content_dir):
        """Only .json files count, in sorted order."""
        (content_dir / "typography.json").write_text("[]")
        (content_dir / "color.json").write_text("[]")
        (content_dir / "notes.txt").write_text("not a category")

        assert list_categories() == ["color", "typography"]

    def test_missing_directory_is_empty(self, tmp_path):
        """A missing content directory lists nothing."""
        assert list_categories(tmp_path / "missing") == []


class TestReadWrite:
    """Tests for reading and writing category files."""

    def test_round_trip(self, content_dir):
        """What is written reads back unchanged."""
        tools = [_tool(), _tool(name="Palette", slug="palette", tags=("color",))]

        write_category("color", tools)

        assert read_category("color") == tools

    def test_written_file_shape(self, content_dir):
        """Files hold a pretty-printed array in wire key order."""
        write_category("color", [_tool()])

        data = json.loads((content_dir / "color.json").read_text())
        assert data == [
            {
                "name": "Contrast Checker",
                "slug": "contrast-checker",
                "description": "Checks WCAG contrast",
                "url": "https://example.com/contrast",
                "tags": ["a11y", "color"],
            }
        ]
        assert list(data[0]) == ["name", "slug", "description", "url", "tags"]

    def test_empty_category_is_an_empty_array(self, content_dir):
        write_category("color-tools", [])
        assert (content_dir / "color-tools.json").read_text() == "[]"
        assert category_exists("color-tools")

    def test_write_creates_missing_directory(self, tmp_path):
        target = tmp_path / "nested" / "tools"
        write_category("icons", [_tool()], target)
        assert read_category("icons", target) == [_tool()]

    def test_non_ascii_text_is_kept_readable(self, content_dir):
        write_category("fonts", [_tool(name="Café Type", slug="caf-type")])
        assert "Café Type" in (content_dir / "fonts.json").read_text(encoding="utf-8")

    def test_missing_file_reads_as_empty(self, content_dir):
        assert read_category("nothing-here") == []
        assert not category_exists("nothing-here")

    @pytest.mark.parametrize("contents", ["{not json", '{"tools": []}', '[{"name": "No slug"}]'])
    def test_unusable_file_raises(self, content_dir, contents):
        """Corrupt or mis-shaped files raise instead of reading as empty."""
        (content_dir / "broken.json").write_text(contents)

        with pytest.raises(CategoryReadError) as exc_info:
            read_category("broken")

        assert exc_info.value.slug == "broken"
        assert exc_info.value.path == content_dir / "broken.json"


def test_load_catalog_skips_unreadable_categories(content_dir):
    """Broken files are skipped, the rest load."""
    write_category("color", [_tool()])
    write_category("typography", [])
    (content_dir / "broken.json").write_text("{not json")

    catalog = load_catalog()

    assert list(catalog) == ["color", "typography"]
    assert catalog["color"] == [_tool()]


def test_load_catalog_skips_non_canonical_names(content_dir):
    """Only files named by a canonical slug make it into the catalog."""
    write_category("color", [])
    write_category("My Tools", [])

    assert list(load_catalog()) == ["color"]
    assert "My Tools" in list_categories()
