"""
Tests for sync_display.config module.
"""
import json
from pathlib import Path

from sync_display.config import get_default_paths, load_display_strings, save_display_strings
from sync_display.models import DEFAULT_STRINGS, DisplayStrings


class TestDefaultPaths:
    """Tests for get_default_paths."""

    def test_keys(self):
        paths = get_default_paths()
        assert paths["log_dir"] == Path("logs")
        assert paths["strings_path"] == Path("display_strings.json")


class TestLoadDisplayStrings:
    """Tests for loading localized strings."""

    def test_missing_file(self, tmp_path):
        assert load_display_strings(tmp_path / "missing.json") == DEFAULT_STRINGS

    def test_valid_file(self, tmp_path):
        path = tmp_path / "strings.json"
        path.write_text(json.dumps({"pending": "Ausstehend", "seconds_ago": "gerade eben"}), encoding="utf-8")
        strings = load_display_strings(path)
        assert strings == DisplayStrings(pending="Ausstehend", seconds_ago="gerade eben")

    def test_corrupted_file(self, tmp_path):
        """Test that invalid JSON falls back to defaults."""
        path = tmp_path / "strings.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_display_strings(path) == DEFAULT_STRINGS

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "strings.json"
        path.write_text('["Pending"]', encoding="utf-8")
        assert load_display_strings(path) == DEFAULT_STRINGS


class TestSaveDisplayStrings:
    """Tests for saving localized strings."""

    def test_save_and_load(self, tmp_path):
        strings = DisplayStrings(pending="В ожидании", seconds_ago="только что")
        path = save_display_strings(strings, tmp_path / "nested" / "strings.json")
        assert path.exists()
        assert "В ожидании" in path.read_text(encoding="utf-8")
        assert load_display_strings(path) == strings


class TestNullValues:
    """Tests for JSON null values in the strings file."""

    def test_null_marker_uses_default(self, tmp_path):
        path = tmp_path / "strings.json"
        path.write_text('{"pending": null, "seconds_ago": "gerade eben"}', encoding="utf-8")
        strings = load_display_strings(path)
        assert strings.pending == "Pending"
        assert strings.seconds_ago == "gerade eben"
