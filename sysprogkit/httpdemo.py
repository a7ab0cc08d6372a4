"""Minimal HTTP responders over raw streams, a zip download and a response-head parser."""

from __future__ import annotations

import argparse
import gzip
import io
import re
import shutil
import socket
import socketserver
import sys
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Callable, TextIO

TEXT_BODY = "HTTP server sample"
JSON_BODY = '{ "Hello": "World" }'
ZIP_FILE_NAME = "file.zip"
ZIP_ENTRY_NAME = "file.txt"
ZIP_ENTRY_CONTENT = b"zipzipzipzipzipzipzipzipzipzipzipzipzipzipzipzip"
MAX_HEADERS = 30
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080

_STATUS_LINE = re.compile(r"HTTP/1\.\d \d{3}(?: .*)?")
_HEADER_NAME = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


@dataclass(frozen=True)
class Header:
    """One response header with its value decoded as UTF-8."""

    name: str
    value: str


def text_response(body: str = TEXT_BODY) -> bytes:
    """Build a plain-text ``200 OK`` response carrying ``body``."""
    payload = body.encode("utf-8")
    head = (
        "HTTP/1.1 200 OK\n"
        "Content-Type: text/plain; charset=UTF-8\n"
        f"Content-Length: {len(payload)}\n"
        "\n"
    )
    return head.encode("ascii") + payload + b"\n"


def handle_client(rfile: BinaryIO, wfile: BinaryIO) -> None:
    """Answer a ``GET`` request read from ``rfile`` with the sample text response.

    Raises ValueError when the request line is not a GET with a path.
    """
    first_line = rfile.readline().decode("utf-8")
    params = first_line.split()
    if len(params) >= 2 and params[0] == "GET":
        wfile.write(text_response())
        return
    raise ValueError("failed to parse")


def read_request_line(rfile: BinaryIO) -> str:
    """Read bytes up to the first ``\\n`` and return them, without it, as text.

    Raises EOFError when the stream ends before a newline.
    """
    line = bytearray()
    while True:
        byte = rfile.read(1)
        if not byte:
            raise EOFError("stream ended before the end of the request line")
        if byte == b"\n":
            return line.decode("utf-8")
        line += byte


def handle_gzip_request(
    request_line: str, wfile: BinaryIO, log: TextIO | None = None
) -> bool:
    """Answer ``GET /`` with a gzip-encoded JSON body, echoing the body to ``log``.

    Any other request is reported on stderr and left unanswered; the return
    value tells whether the request was answered.
    """
    words = request_line.split()
    if words[:2] != ["GET", "/"]:
        print(f"cannot accept the following request: {request_line}", file=sys.stderr)
        return False
    log = sys.stdout if log is None else log
    wfile.write(
        b"HTTP/1.1 200 OK\n"
        b"Content-Encoding: gzip\n"
        b"Content-Type: application/json\n"
        b"\n"
    )
    with gzip.GzipFile(fileobj=wfile, mode="wb") as encoder:
        encoder.write(JSON_BODY.encode("utf-8"))
    log.write(JSON_BODY)
    log.write("\n")
    return True


def build_zip_archive() -> bytes:
    """Return a zip archive holding the sample text file."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.writestr(ZIP_ENTRY_NAME, ZIP_ENTRY_CONTENT)
    return buffer.getvalue()


def zip_response(content: bytes) -> bytes:
    """Build a response offering ``content`` as a zip attachment."""
    head = (
        "HTTP/1.1 200 OK\n"
        "Content-Type: application/zip\n"
        "Content-Disposition: attachment\n"
        f"Content-Length: {len(content)}\n"
        "\n"
    )
    return head.encode("ascii") + content


def _strip_line_end(line: bytes) -> bytes:
    if line.endswith(b"\r\n"):
        return line[:-2]
    if line.endswith(b"\n"):
        return line[:-1]
    return line


def parse_response_head(reader: BinaryIO) -> list[Header]:
    """Read a response's status line and headers, leaving ``reader`` at the body.

    Raises ValueError on a malformed or incomplete head, or on more than
    ``MAX_HEADERS`` headers.
    """
    status = reader.readline()
    if not status.endswith(b"\n"):
        raise ValueError("incomplete response head")
    if not _STATUS_LINE.fullmatch(_strip_line_end(status).decode("latin-1")):
        raise ValueError("invalid status line")
    headers: list[Header] = []
    while True:
        raw = reader.readline()
        if not raw.endswith(b"\n"):
            raise ValueError("incomplete response head")
        line = _strip_line_end(raw)
        if not line:
            return headers
        name, sep, value = line.partition(b":")
        name_text = name.decode("latin-1")
        if not sep or not _HEADER_NAME.fullmatch(name_text):
            raise ValueError(f"invalid header line: {line!r}")
        if len(headers) == MAX_HEADERS:
            raise ValueError("too many headers")
        headers.append(Header(name_text, value.strip(b" \t").decode("utf-8")))


def _serve(handler: Callable[[BinaryIO, BinaryIO], None], host: str, port: int) -> None:
    class _Handler(socketserver.StreamRequestHandler):
        def handle(self) -> None:
            handler(self.rfile, self.wfile)

    with socketserver.TCPServer((host, port), _Handler) as server:
        server.serve_forever()


def _gzip_handler(rfile: BinaryIO, wfile: BinaryIO) -> None:
    handle_gzip_request(read_request_line(rfile), wfile, sys.stdout)


def _zip_handler(rfile: BinaryIO, wfile: BinaryIO) -> None:
    wfile.write(zip_response(Path(ZIP_FILE_NAME).read_bytes()))


def _fetch(host: str, port: int) -> None:
    with socket.create_connection((host, port)) as conn:
        conn.sendall(f"GET / HTTP/1.0\r\nHost: {host}\r\n\r\n".encode("ascii"))
        with conn.makefile("rb") as reader:
            print(parse_response_head(reader))
            sys.stdout.flush()
            shutil.copyfileobj(reader, sys.stdout.buffer)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sysprogkit-http", description="Tiny HTTP servers and client."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, text in (
        ("serve", "answer GET requests with a text body"),
        ("gzip-serve", "answer GET / with a gzip-encoded JSON body"),
        ("zip-serve", "offer a zip file for download"),
    ):
        sub = commands.add_parser(name, help=text)
        sub.add_argument("--host", default=DEFAULT_HOST)
        sub.add_argument("--port", type=int, default=DEFAULT_PORT)
    commands.add_parser("write-zip", help=f"write {ZIP_FILE_NAME}")
    fetch = commands.add_parser("fetch", help="print a site's response headers and body")
    fetch.add_argument("host")
    fetch.add_argument("--port", type=int, default=80)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    if args.command == "serve":
        _serve(handle_client, args.host, args.port)
    elif args.command == "gzip-serve":
        _serve(_gzip_handler, args.host, args.port)
    elif args.command == "zip-serve":
        Path(ZIP_FILE_NAME).write_bytes(build_zip_archive())
        _serve(_zip_handler, args.host, args.port)
    elif args.command == "write-zip":
        Path(ZIP_FILE_NAME).write_bytes(build_zip_archive())
    else:
        _fetch(args.host, args.port)
    return 0