"""Tests for loading and structural edits in Buffer."""

import pytest
from glyphedit.buffer import Buffer, BufferLoadError
from glyphedit.model import Location


def lines_of(buffer):
    return [str(line) for line in buffer.lines]


class TestLoad:
    def test_load_splits_on_line_feeds(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("first\nsecond\nthird\n", encoding="utf-8")
        buffer = Buffer()
        buffer.load(str(path))
        assert lines_of(buffer) == ["first", "second", "third"]
        assert buffer.height() == 3

    def test_load_without_trailing_newline(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("a\nb", encoding="utf-8")
        buffer = Buffer()
        buffer.load(str(path))
        assert lines_of(buffer) == ["a", "b"]

    def test_load_keeps_blank_lines(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("a\n\n\nb\n", encoding="utf-8")
        buffer = Buffer()
        buffer.load(str(path))
        assert lines_of(buffer) == ["a", "", "", "b"]

    def test_load_empty_file_gives_empty_buffer(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")
        buffer = Buffer(["old"])
        buffer.load(str(path))
        assert buffer.is_empty()
        assert buffer.height() == 0

    def test_load_keeps_carriage_returns(self, tmp_path):
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"one\r\ntwo\r\n")
        buffer = Buffer()
        buffer.load(str(path))
        assert lines_of(buffer) == ["one\r", "two\r"]

    def test_load_unicode(self, tmp_path):
        path = tmp_path / "unicode.txt"
        path.write_text("héllo\n你好\n", encoding="utf-8")
        buffer = Buffer()
        buffer.load(str(path))
        assert buffer.lines[1].grapheme_count() == 2
        assert buffer.lines[1].width_until(2) == 4

    def test_missing_file_raises_and_keeps_contents(self, tmp_path):
        buffer = Buffer(["keep", "me"])
        with pytest.raises(BufferLoadError):
            buffer.load(str(tmp_path / "missing.txt"))
        assert lines_of(buffer) == ["keep", "me"]

    def test_invalid_utf8_raises_and_keeps_contents(self, tmp_path):
        path = tmp_path / "binary.bin"
        path.write_bytes(b"ok\n\xff\xfe\xfa\n")
        buffer = Buffer(["keep"])
        with pytest.raises(BufferLoadError) as excinfo:
            buffer.load(str(path))
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
        assert lines_of(buffer) == ["keep"]

    def test_directory_raises(self, tmp_path):
        buffer = Buffer()
        with pytest.raises(BufferLoadError):
            buffer.load(str(tmp_path))
        assert buffer.is_empty()


def test_from_text():
    buffer = Buffer.from_text("a\nb\n")
    assert lines_of(buffer) == ["a", "b"]
    assert buffer.text() == "a\nb"


def test_empty_buffer():
    buffer = Buffer()
    assert buffer.is_empty()
    assert buffer.height() == 0
    assert buffer.get_line(0) is None


class TestInsertChar:
    def test_insert_into_line(self):
        buffer = Buffer(["ac"])
        buffer.insert_char("b", Location(0, 1))
        assert lines_of(buffer) == ["abc"]

    def test_insert_on_line_after_last_appends_line(self):
        buffer = Buffer(["a"])
        buffer.insert_char("b", Location(1, 0))
        assert lines_of(buffer) == ["a", "b"]

    def test_insert_into_empty_buffer(self):
        buffer = Buffer()
        buffer.insert_char("x", Location(0, 0))
        assert lines_of(buffer) == ["x"]

    def test_insert_far_past_end_is_noop(self):
        buffer = Buffer(["a"])
        buffer.insert_char("b", Location(5, 0))
        buffer.insert_char("b", Location(-1, 0))
        assert lines_of(buffer) == ["a"]


class TestInsertNewline:
    def test_split_line(self):
        buffer = Buffer(["hello", "world"])
        buffer.insert_newline(Location(0, 2))
        assert lines_of(buffer) == ["he", "llo", "world"]

    def test_at_start_of_line(self):
        buffer = Buffer(["hello"])
        buffer.insert_newline(Location(0, 0))
        assert lines_of(buffer) == ["", "hello"]

    def test_at_end_of_line(self):
        buffer = Buffer(["hello"])
        buffer.insert_newline(Location(0, 5))
        assert lines_of(buffer) == ["hello", ""]

    def test_after_last_line_appends(self):
        buffer = Buffer(["hello"])
        buffer.insert_newline(Location(1, 0))
        assert lines_of(buffer) == ["hello", ""]

    def test_far_past_end_is_noop(self):
        buffer = Buffer(["hello"])
        buffer.insert_newline(Location(3, 0))
        assert lines_of(buffer) == ["hello"]


class TestDelete:
    def test_delete_grapheme(self):
        buffer = Buffer(["abc"])
        assert buffer.delete(Location(0, 1))
        assert lines_of(buffer) == ["ac"]

    def test_delete_combined_grapheme(self):
        buffer = Buffer(["ae\u0301c"])
        buffer.delete(Location(0, 1))
        assert lines_of(buffer) == ["ac"]

    def test_delete_at_end_of_line_joins_next(self):
        buffer = Buffer(["ab", "cd", "ef"])
        assert buffer.delete(Location(0, 2))
        assert lines_of(buffer) == ["abcd", "ef"]

    def test_delete_at_end_of_buffer_is_noop(self):
        buffer = Buffer(["ab", "cd"])
        assert not buffer.delete(Location(1, 2))
        assert lines_of(buffer) == ["ab", "cd"]

    def test_delete_out_of_range_is_noop(self):
        buffer = Buffer(["ab"])
        assert not buffer.delete(Location(1, 0))
        assert not buffer.delete(Location(0, 7))
        assert not buffer.delete(Location(-1, 0))
        assert lines_of(buffer) == ["ab"]

    def test_insert_then_delete_round_trip(self):
        buffer = Buffer(["hello"])
        buffer.insert_char("X", Location(0, 3))
        buffer.delete(Location(0, 3))
        assert lines_of(buffer) == ["hello"]
