"""Tests for the extension table."""

from __future__ import annotations

from pathlib import Path

import pytest

from mediatype.media.extensions import (
    EXTENSION_ROWS,
    EXTENSION_TO_MEDIA_TYPE,
    _build_table,
    file_extensions_for,
    media_type_for_file_extension,
    media_type_for_path,
)
from mediatype.media.media_type import MediaType


class TestLookup:
    def test_json(self) -> None:
        assert media_type_for_file_extension("json") == MediaType("application", "json")

    def test_unknown(self) -> None:
        assert media_type_for_file_extension("unknownext") is None

    def test_case_sensitive(self) -> None:
        assert media_type_for_file_extension("JSON") is None

    def test_leading_dot_not_stripped(self) -> None:
        assert media_type_for_file_extension(".json") is None

    def test_common_extensions(self) -> None:
        expected = {
            "html": "text/html",
            "png": "image/png",
            "jpg": "image/jpeg",
            "mp3": "audio/mpeg",
            "mp4": "video/mp4",
            "pdf": "application/pdf",
            "css": "text/css",
            "txt": "text/plain",
        }
        for ext, essence in expected.items():
            mt = media_type_for_file_extension(ext)
            assert mt is not None, ext
            assert mt.essence == essence

    def test_many_to_one(self) -> None:
        assert media_type_for_file_extension("htm") == media_type_for_file_extension("html")

    def test_entries_have_no_parameters(self) -> None:
        assert dict(media_type_for_file_extension("json").parameters) == {}


class TestTable:
    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            EXTENSION_TO_MEDIA_TYPE["json"] = MediaType("text", "plain")  # type: ignore[index]

    def test_keys_lowercase(self) -> None:
        assert [ext for ext in EXTENSION_TO_MEDIA_TYPE if ext != ext.lower()] == ["pcf.Z"]

    def test_mixed_case_key(self) -> None:
        assert media_type_for_file_extension("pcf.Z") == MediaType("application", "x-font")
        assert media_type_for_path("font.pcf.Z") is None

    def test_disabled_duplicates_keep_first_mapping(self) -> None:
        assert media_type_for_file_extension("sh") == MediaType("application", "x-sh")
        assert media_type_for_file_extension("cpt") == MediaType("application", "mac-compactpro")

    def test_last_row_wins(self) -> None:
        table = _build_table([("x", "text", "plain"), ("x", "image", "png")])
        assert table["x"] == MediaType("image", "png")

    @pytest.mark.slow
    def test_every_row_resolves(self) -> None:
        last = {ext: (t, s) for ext, t, s in EXTENSION_ROWS}
        for ext, (type_, subtype) in last.items():
            mt = media_type_for_file_extension(ext)
            assert mt == MediaType(type_, subtype)
            assert MediaType.parse(str(mt)) == mt


class TestPathLookup:
    def test_file_name(self) -> None:
        assert media_type_for_path("report.pdf") == MediaType("application", "pdf")

    def test_path_object(self) -> None:
        assert media_type_for_path(Path("/srv/www/index.html")) == MediaType("text", "html")

    def test_suffix_lowercased(self) -> None:
        assert media_type_for_path("PHOTO.PNG") == MediaType("image", "png")

    def test_last_suffix_used(self) -> None:
        assert media_type_for_path("notes.backup.txt") == MediaType("text", "plain")

    def test_no_suffix(self) -> None:
        assert media_type_for_path("Makefile") is None

    def test_unknown_suffix(self) -> None:
        assert media_type_for_path("data.unknownext") is None


class TestReverseLookup:
    def test_html(self) -> None:
        exts = file_extensions_for(MediaType("text", "html"))
        assert "html" in exts
        assert "htm" in exts
        assert exts == sorted(exts)

    def test_parameters_ignored(self) -> None:
        assert "json" in file_extensions_for(MediaType.parse("application/json; charset=utf-8"))

    def test_unknown(self) -> None:
        assert file_extensions_for(MediaType("x-nothing", "here")) == []
