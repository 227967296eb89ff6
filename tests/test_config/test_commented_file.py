import logging

import pytest

from drivekit.config.commented_file import read_commented_file


def write(tmp_path, text):
    p = tmp_path / ".driveignore"
    p.write_text(text)
    return str(p)


def test_skips_comments_and_blank_lines(tmp_path):
    path = write(tmp_path, "# comment\n\nkeep-this\n  \nkeep-that  \n")

    assert read_commented_file(path, "#") == ["keep-this", "keep-that"]


def test_marker_after_leading_spaces_is_comment(tmp_path):
    path = write(tmp_path, "   # indented comment\n*.tmp\n")

    assert read_commented_file(path, "#") == ["*.tmp"]


def test_inline_marker_is_kept(tmp_path):
    path = write(tmp_path, "build/ # generated\n")

    assert read_commented_file(path, "#") == ["build/ # generated"]


def test_custom_marker(tmp_path):
    path = write(tmp_path, "// skip\n#keep\n")

    assert read_commented_file(path, "//") == ["#keep"]


def test_tabs_are_not_trimmed(tmp_path):
    path = write(tmp_path, "\tvalue\n")

    assert read_commented_file(path, "#") == ["\tvalue"]


def test_last_line_without_newline(tmp_path):
    path = write(tmp_path, "first\nsecond")

    assert read_commented_file(path, "#") == ["first", "second"]


def test_only_comments_gives_empty_list(tmp_path):
    path = write(tmp_path, "# a\n# b\n")

    assert read_commented_file(path, "#") == []


def test_empty_file(tmp_path):
    path = write(tmp_path, "")

    assert read_commented_file(path, "#") == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_commented_file(str(tmp_path / "missing"), "#")


def test_directory_raises(tmp_path):
    with pytest.raises(OSError):
        read_commented_file(str(tmp_path), "#")


# ---------- line endings and encoding ----------

def test_crlf_line_endings(tmp_path):
    p = tmp_path / ".driveignore"
    p.write_bytes(b"# comment\r\nkeep-this  \r\n\r\nlast\r")

    assert read_commented_file(str(p), "#") == ["keep-this", "last"]


def test_lone_carriage_return_is_not_a_line_break(tmp_path):
    p = tmp_path / ".driveignore"
    p.write_bytes(b"a\rb\n")

    assert read_commented_file(str(p), "#") == ["a\rb"]


def test_non_utf8_bytes_are_kept(tmp_path):
    p = tmp_path / ".driveignore"
    p.write_bytes(b"caf\xe9\n# r\xe9sum\xe9\nkeep\n")

    clauses = read_commented_file(str(p), "#")

    assert clauses == ["caf\udce9", "keep"]
    assert clauses[0].encode("utf-8", "surrogateescape") == b"caf\xe9"


# ---------- logging ----------

def test_logs_path_as_extra(tmp_path, caplog):
    path = write(tmp_path, "keep\n")
    caplog.set_level(logging.DEBUG, logger="drivekit")

    read_commented_file(path, "#")

    assert [r.path for r in caplog.records] == [path]
