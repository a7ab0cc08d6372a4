import gzip
import io
import zipfile

import pytest

from sysprogkit.httpdemo import (
    JSON_BODY,
    MAX_HEADERS,
    TEXT_BODY,
    ZIP_ENTRY_CONTENT,
    ZIP_ENTRY_NAME,
    Header,
    build_zip_archive,
    handle_client,
    handle_gzip_request,
    parse_response_head,
    read_request_line,
    text_response,
    zip_response,
)


def test_text_response_layout():
    response = text_response()
    head, _, body = response.partition(b"\n\n")
    lines = head.decode().split("\n")
    assert lines[0] == "HTTP/1.1 200 OK"
    assert "Content-Type: text/plain; charset=UTF-8" in lines
    assert f"Content-Length: {len(TEXT_BODY)}" in lines
    assert body == TEXT_BODY.encode() + b"\n"


def test_handle_client_answers_get():
    wfile = io.BytesIO()
    handle_client(io.BytesIO(b"GET /index HTTP/1.1\r\nHost: x\r\n\r\n"), wfile)
    assert wfile.getvalue() == text_response()


@pytest.mark.parametrize("request_line", [b"POST / HTTP/1.1\r\n", b"GET\r\n", b""])
def test_handle_client_rejects_other_requests(request_line):
    wfile = io.BytesIO()
    with pytest.raises(ValueError):
        handle_client(io.BytesIO(request_line), wfile)
    assert wfile.getvalue() == b""


def test_read_request_line_stops_at_newline():
    rfile = io.BytesIO(b"GET / HTTP/1.1\nHost: a\n")
    assert read_request_line(rfile) == "GET / HTTP/1.1"
    assert rfile.read() == b"Host: a\n"


def test_read_request_line_requires_newline():
    with pytest.raises(EOFError):
        read_request_line(io.BytesIO(b"GET /"))


def test_gzip_request_round_trip():
    wfile = io.BytesIO()
    log = io.StringIO()
    assert handle_gzip_request("GET / HTTP/1.1\r", wfile, log) is True
    head, _, body = wfile.getvalue().partition(b"\n\n")
    assert b"Content-Encoding: gzip" in head.split(b"\n")
    assert gzip.decompress(body).decode() == JSON_BODY
    assert log.getvalue() == JSON_BODY + "\n"


def test_gzip_request_other_path_is_refused(capsys):
    wfile = io.BytesIO()
    log = io.StringIO()
    assert handle_gzip_request("GET /other HTTP/1.1", wfile, log) is False
    assert wfile.getvalue() == b""
    assert log.getvalue() == ""
    assert "GET /other" in capsys.readouterr().err


def test_zip_archive_holds_entry():
    with zipfile.ZipFile(io.BytesIO(build_zip_archive())) as archive:
        assert archive.namelist() == [ZIP_ENTRY_NAME]
        assert archive.read(ZIP_ENTRY_NAME) == ZIP_ENTRY_CONTENT


def test_zip_response_carries_content():
    content = build_zip_archive()
    response = zip_response(content)
    head, _, body = response.partition(b"\n\n")
    assert body == content
    lines = head.decode().split("\n")
    assert "Content-Type: application/zip" in lines
    assert "Content-Disposition: attachment" in lines
    assert f"Content-Length: {len(content)}" in lines


def test_parse_response_head_leaves_body():
    reader = io.BytesIO(
        b"HTTP/1.0 200 OK\r\nContent-Type: text/html\r\nX-Note:  hi there \r\n\r\nbody bytes"
    )
    headers = parse_response_head(reader)
    assert headers == [Header("Content-Type", "text/html"), Header("X-Note", "hi there")]
    assert reader.read() == b"body bytes"


def test_parse_response_head_incomplete():
    with pytest.raises(ValueError):
        parse_response_head(io.BytesIO(b"HTTP/1.0 200 OK\r\nContent-Type: text/html\r\n"))


def test_parse_response_head_bad_status():
    with pytest.raises(ValueError):
        parse_response_head(io.BytesIO(b"NOT HTTP\r\n\r\n"))


def test_parse_response_head_too_many_headers():
    lines = b"".join(b"X-H%d: v\r\n" % i for i in range(MAX_HEADERS + 1))
    with pytest.raises(ValueError):
        parse_response_head(io.BytesIO(b"HTTP/1.1 200 OK\r\n" + lines + b"\r\n"))


def test_parse_response_head_accepts_limit():
    lines = b"".join(b"X-H%d: v\r\n" % i for i in range(MAX_HEADERS))
    headers = parse_response_head(io.BytesIO(b"HTTP/1.1 200 OK\r\n" + lines + b"\r\n"))
    assert len(headers) == MAX_HEADERS