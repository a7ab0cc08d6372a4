import io

import pytest

from sysprogkit.iohelpers import (
    BytesRead,
    copy_buffer,
    copy_exact,
    copy_n,
    format_sample,
    read_1024bytes,
    read_lines,
    scan,
)


def test_read_1024bytes_short_source():
    result = read_1024bytes(io.BytesIO(b"abc"))
    assert result.length == 3
    assert len(result.data) == 1024
    assert result.data[:3] == b"abc"
    assert result.data[3:] == bytes(1021)


def test_read_1024bytes_caps_at_1024():
    result = read_1024bytes(io.BytesIO(b"x" * 3000))
    assert result.length == 1024
    assert result.data == b"x" * 1024


def test_bytes_read_str_layout():
    text = str(read_1024bytes(io.BytesIO(b"abc")))
    header, body = text.split("\n")
    assert header == "3 bytes read:"
    assert body.startswith("[") and body.endswith("]")
    assert len(body[1:-1].split(", ")) == 1024


def test_bytes_read_str_hex_digits():
    text = str(BytesRead(bytes([0x0A, 0xFF]), 2))
    assert text == "2 bytes read:\n[0a, ff]"


def test_copy_n_partial():
    writer = io.BytesIO()
    assert copy_n(io.BytesIO(b"hello!"), writer, 3) == 3
    assert writer.getvalue() == b"hel"


def test_copy_n_more_than_available():
    writer = io.BytesIO()
    assert copy_n(io.BytesIO(b"hello!"), writer, 100) == len(b"hello!")
    assert writer.getvalue() == b"hello!"


def test_copy_exact_copies_n_bytes():
    reader = io.BytesIO(b"test data")
    writer = io.BytesIO()
    assert copy_exact(reader, writer, 4) == 4
    assert writer.getvalue() == b"test"
    assert reader.read() == b" data"


def test_copy_exact_short_source():
    writer = io.BytesIO()
    with pytest.raises(EOFError):
        copy_exact(io.BytesIO(b"ab"), writer, 4)
    assert writer.getvalue() == b""


def test_copy_buffer_copies_everything():
    data = b"abcdefg" * 5000
    writer = io.BytesIO()
    assert copy_buffer(io.BytesIO(data), writer, 8 * 1024) == len(data)
    assert writer.getvalue() == data


def test_copy_buffer_rejects_empty_buffer():
    with pytest.raises(ValueError):
        copy_buffer(io.BytesIO(b"abc"), io.BytesIO(), 0)


def test_scan_source_example():
    assert scan("123 1.234 1.0e4 test", int, float, float, str) == (
        123,
        1.234,
        1.0e4,
        "test",
    )


def test_scan_bad_word():
    with pytest.raises(ValueError, match="couldn't parse abc"):
        scan("abc", int)


def test_scan_missing_word():
    with pytest.raises(ValueError):
        scan("1", int, int)


def test_scan_consecutive_whitespace_gives_empty_word():
    with pytest.raises(ValueError):
        scan("1  2", int, int)


def test_read_lines_source_example():
    assert list(read_lines("1行目\n2行目\n3行目\n")) == ["1行目", "2行目", "3行目"]


def test_read_lines_crlf_and_no_trailing_newline():
    assert list(read_lines("a\r\nb")) == ["a", "b"]


def test_read_lines_empty():
    assert list(read_lines("")) == []


def test_format_sample():
    assert format_sample() == '{}("10"): 10, {}(10): 10, {:.1}(10.0): 10.0\n'