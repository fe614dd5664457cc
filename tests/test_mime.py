"""
Tests for sync_display.mime module.
"""
import pytest

from sync_display.constants import MIME_TYPE_LABELS
from sync_display.mime import mime_to_pretty_print


class TestKnownTypes:
    """Tests for types in the lookup table."""

    def test_images(self):
        assert mime_to_pretty_print("image/png") == "PNG image"
        assert mime_to_pretty_print("image/jpeg") == "JPEG image"
        assert mime_to_pretty_print("image/jpg") == "JPEG image"
        assert mime_to_pretty_print("image/bmp") == "Bitmap image"

    def test_music(self):
        assert mime_to_pretty_print("audio/mpeg") == "MP3 music file"
        assert mime_to_pretty_print("application/ogg") == "OGG music file"

    def test_lookup_is_case_sensitive(self):
        """Test that differently cased types use the generic rule."""
        assert mime_to_pretty_print("Image/Jpeg") == "JPEG file"

    @pytest.mark.parametrize("mimetype,label", sorted(MIME_TYPE_LABELS.items()))
    def test_every_table_entry(self, mimetype, label):
        assert mime_to_pretty_print(mimetype) == label


class TestFallback:
    """Tests for types not in the lookup table."""

    def test_subtype_uppercased(self):
        assert mime_to_pretty_print("x-custom/foo") == "FOO file"
        assert mime_to_pretty_print("application/pdf") == "PDF file"
        assert mime_to_pretty_print("application/vnd.ms-excel") == "VND.MS-EXCEL file"

    def test_extra_parts_ignored(self):
        assert mime_to_pretty_print("a/b/c") == "B file"

    def test_empty_type(self):
        assert mime_to_pretty_print("/png") == "PNG file"

    def test_unknown(self):
        """Test inputs without a subtype."""
        assert mime_to_pretty_print("noslash") == "Unknown type"
        assert mime_to_pretty_print("") == "Unknown type"
        assert mime_to_pretty_print("image/") == "Unknown type"
        assert mime_to_pretty_print("/") == "Unknown type"
