"""
Tests for directory-wide encoding conversion.

Verifies conversion between encodings, backup creation, silent mode,
extension filtering, and excluded build directories.
"""

import logging

import pytest

from csh2sh.encoding import (
    EncodingConverter,
    convert_directory,
    list_files,
    normalize_extensions,
)
from csh2sh.errors import InvalidInputError

ORIGINAL = "áéíóú ñ Ñ"


def write_cp1252(path, text=ORIGINAL):
    path.write_bytes(text.encode("windows-1252"))


class TestConvertDirectory:

    def test_convert_single_file(self, tmp_path):
        target = tmp_path / "test.java"
        write_cp1252(target)

        convert_directory(tmp_path, "windows-1252", "utf-8", [".java"], backup=True, silent=False)

        assert target.read_bytes().decode("utf-8") == ORIGINAL
        assert (tmp_path / "test.java.bak").exists()

    def test_backup_keeps_original_bytes(self, tmp_path):
        target = tmp_path / "test.sql"
        write_cp1252(target)
        convert_directory(tmp_path, "windows-1252", "utf-8", [".sql"])
        assert (tmp_path / "test.sql.bak").read_bytes() == ORIGINAL.encode("windows-1252")

    def test_existing_backup_not_overwritten(self, tmp_path):
        target = tmp_path / "test.sql"
        write_cp1252(target)
        (tmp_path / "test.sql.bak").write_bytes(b"first backup")
        convert_directory(tmp_path, "windows-1252", "utf-8", [".sql"])
        assert (tmp_path / "test.sql.bak").read_bytes() == b"first backup"

    def test_no_backup_option(self, tmp_path):
        write_cp1252(tmp_path / "test.js", "á")
        convert_directory(tmp_path, "windows-1252", "utf-8", [".js"], backup=False)
        assert not (tmp_path / "test.js.bak").exists()

    def test_silent_mode_logs_nothing(self, tmp_path, caplog):
        write_cp1252(tmp_path / "test.jsp", "á")
        with caplog.at_level(logging.INFO, logger="csh2sh.encoding"):
            convert_directory(tmp_path, "windows-1252", "utf-8", [".jsp"], silent=True)
        assert caplog.records == []

    def test_converted_files_are_logged(self, tmp_path, caplog):
        write_cp1252(tmp_path / "test.jsp", "á")
        with caplog.at_level(logging.INFO, logger="csh2sh.encoding"):
            convert_directory(tmp_path, "windows-1252", "utf-8", [".jsp"])
        assert any("Converted" in r.getMessage() for r in caplog.records)

    def test_excluded_dir(self, tmp_path):
        excluded = tmp_path / "target"
        excluded.mkdir()
        target = excluded / "test.java"
        write_cp1252(target, "á")

        convert_directory(tmp_path, "windows-1252", "utf-8", [".java"])

        assert not (excluded / "test.java.bak").exists()
        assert target.read_bytes().decode("windows-1252") == "á"

    def test_extension_filter(self, tmp_path):
        write_cp1252(tmp_path / "a.java", "á")
        write_cp1252(tmp_path / "b.txt", "á")

        convert_directory(tmp_path, "windows-1252", "utf-8", [".java"])

        assert (tmp_path / "a.java").read_bytes().decode("utf-8") == "á"
        assert (tmp_path / "b.txt").read_bytes().decode("windows-1252") == "á"

    def test_nested_directories(self, tmp_path):
        nested = tmp_path / "src" / "main"
        nested.mkdir(parents=True)
        write_cp1252(nested / "App.java", "ñ")
        convert_directory(tmp_path, "windows-1252", "utf-8", ["java"])
        assert (nested / "App.java").read_bytes().decode("utf-8") == "ñ"

    def test_returns_root(self, tmp_path):
        assert convert_directory(tmp_path, "windows-1252", "utf-8") == tmp_path

    def test_not_a_directory(self, tmp_path):
        path = tmp_path / "file.txt"
        path.write_text("x")
        with pytest.raises(InvalidInputError, match="Not a valid directory"):
            convert_directory(path, "windows-1252", "utf-8")

    def test_unknown_encoding(self, tmp_path):
        with pytest.raises(InvalidInputError, match="Unsupported encoding"):
            convert_directory(tmp_path, "no-such-charset", "utf-8")

    def test_undecodable_file_is_logged_and_skipped(self, tmp_path, caplog):
        (tmp_path / "bad.java").write_bytes(b"\xff\xfe\xfd")
        (tmp_path / "good.java").write_text("plain", encoding="utf-8")
        with caplog.at_level(logging.ERROR, logger="csh2sh.encoding"):
            convert_directory(tmp_path, "utf-8", "utf-16", [".java"], backup=False)
        assert any("bad.java" in r.getMessage() for r in caplog.records)


class TestHelpers:

    def test_normalize_extensions(self):
        assert normalize_extensions(["JAVA", ".Js", " ", "sql "]) == [".java", ".js", ".sql"]

    def test_list_files_case_insensitive(self, tmp_path):
        (tmp_path / "UPPER.JAVA").write_text("x")
        (tmp_path / "skip.py").write_text("x")
        assert [p.name for p in list_files(tmp_path, [".java"])] == ["UPPER.JAVA"]


class TestEncodingConverter:

    def test_defaults(self, tmp_path):
        write_cp1252(tmp_path / "page.html", "é")
        EncodingConverter().convert(tmp_path)
        assert (tmp_path / "page.html").read_bytes().decode("utf-8") == "é"
        assert (tmp_path / "page.html.bak").exists()

    def test_txt_not_in_default_extensions(self, tmp_path):
        write_cp1252(tmp_path / "notes.txt", "é")
        EncodingConverter().convert(tmp_path)
        assert (tmp_path / "notes.txt").read_bytes().decode("windows-1252") == "é"
