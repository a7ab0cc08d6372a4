# sysprogkit

A small toolkit of systems-programming building blocks, written with the
standard library only.

## Modules

- `sysprogkit.streams` – `SectionReader` (read a byte window of a seekable
  stream), `LimitedReader` (read at most *n* bytes from the start) and
  `MultiWriter` (write the same bytes to several writers, and flush them all).
- `sysprogkit.binary` – `read(reader, endian, size)` reads an unsigned integer
  of 1, 2, 4 or 8 bytes in the chosen `Endian` order (`BIG_ENDIAN` or
  `LITTLE_ENDIAN`); `from_be_bytes(buf, size)` decodes big-endian bytes.
  A stream that ends early raises `EOFError`.
- `sysprogkit.tempfiles` – `temp_file()` returns a fresh path in the system
  temporary directory, named after the current time; the file is not created.
- `sysprogkit.iohelpers` – `read_1024bytes` (one read into a 1024-byte
  `BytesRead`), `copy_n` (copy at most *n* bytes), `copy_exact` (copy exactly
  *n* bytes or raise `EOFError`), `copy_buffer` (copy everything through a
  buffer, then flush), `scan` (split text at whitespace and convert each word),
  `read_lines` and `format_sample`.
- `sysprogkit.png` – `PngAnalyzer` checks the PNG signature and iterates over
  `PngChunk` objects; `PngCreator` assembles a file from chunks;
  `PngChunk.new_text_chunk` builds a `tEXt` chunk.
- `sysprogkit.pngcli` – `describe_chunks` and `embed_text_chunk`, plus the
  `sysprogkit-png` command.
- `sysprogkit.paths` – `clean` (resolve an existing path, keeping relative
  paths relative to the current directory), `expand_env` (expand `${VAR}`,
  `$VAR` and `~` components), `expand_and_clean` and `relative_to`; failures
  raise `PathError`.
- `sysprogkit.context` – cancellation trees for asyncio: `BackgroundContext`
  as the root, `ContextWithCancel` and `Canceler`, created together by
  `with_cancel(parent)`. Cancelling a context cancels all its descendants;
  `value(key)` is looked up through the ancestors and raises
  `ContextValueError` when nothing holds the key.
- `sysprogkit.channels` – asyncio queue patterns: `primes_below` and
  `prime_channel` (primes produced by a separate task through a bounded queue),
  `run_and_wait` (run a function in its own task and wait for its result),
  `multi_channel` and `collect_multi_channel` (select over two queues until an
  end signal).
- `sysprogkit.httpdemo` – `text_response`, `handle_client`,
  `read_request_line`, `handle_gzip_request`, `build_zip_archive`,
  `zip_response` and `parse_response_head` (returns `Header` objects), plus
  the `sysprogkit-http` command.
- `sysprogkit.fstools` – `split_path` (directory, name, extension and
  components), `which` (first match on a search path, `PATH` by default) and
  `find_images` (image files under a directory, depth first), plus the
  `sysprogkit-fs` command.
- `sysprogkit.udp` – `serve_once` (receive one datagram and reply
  `Hello from Server`), `udp_request` (send a message and return the reply)
  and `format_tick` (a `dd/mm/YYYY HH:MM:SS` timestamp).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Read a window out of a stream:

```python
import io
from sysprogkit.streams import SectionReader, LimitedReader

data = b"Example of io.SectionReader\n"
print(SectionReader(io.BytesIO(data), 14, 7).read(-1))   # b'Section'
print(LimitedReader(io.BytesIO(data), 7).read(-1))       # b'Example'
```

Decode integers:

```python
import io
from sysprogkit.binary import Endian, read

print(read(io.BytesIO(b"\x00\x00\x27\x10"), Endian.BIG_ENDIAN, 4))  # 10000
```

Send the same bytes to several places:

```python
import io
from sysprogkit.streams import MultiWriter

first, second = io.BytesIO(), io.BytesIO()
writer = MultiWriter([first, second])
writer.write(b"example\n")
writer.flush()
```

Add a text chunk to a PNG file:

```python
from sysprogkit.pngcli import embed_text_chunk

with open("picture.png", "rb") as original:
    new_png = embed_text_chunk(original, "ASCII PROGRAMMING++")
```

Cancel a context from another task:

```python
import asyncio
from sysprogkit.context import BackgroundContext, ContextError, with_cancel

async def demo():
    ctx, canceler = with_cancel(BackgroundContext())
    asyncio.get_running_loop().call_soon(canceler.cancel)
    assert await ctx.done() is ContextError.CANCELED

asyncio.run(demo())
```

## Commands

- `sysprogkit-png show FILE` – print one line per chunk of a PNG file.
- `sysprogkit-png embed FILE [--text TEXT] [-o OUTPUT]` – copy a PNG file with
  a `tEXt` chunk inserted after the first chunk. The text defaults to
  `ASCII PROGRAMMING++`; without `-o` the copy goes to a new temporary path,
  which is printed.
- `sysprogkit-http serve [--host HOST] [--port PORT]` – answer GET requests
  with a plain-text body (default `127.0.0.1:8080`).
- `sysprogkit-http gzip-serve [--host HOST] [--port PORT]` – answer `GET /`
  with a gzip-encoded JSON body, echoing the body to standard output.
- `sysprogkit-http zip-serve [--host HOST] [--port PORT]` – write `file.zip`
  in the current directory and offer it for download.
- `sysprogkit-http write-zip` – only write `file.zip`.
- `sysprogkit-http fetch HOST [--port PORT]` – send `GET /` (port 80 by
  default), print the parsed response headers and then the body.
- `sysprogkit-fs temp` – print the path of `temp.txt` in the temporary
  directory.
- `sysprogkit-fs split PATH` – print the parts of a path.
- `sysprogkit-fs which NAME` – print the first match on `PATH`; exits with
  status 1 when there is none.
- `sysprogkit-fs images ROOT` – list image files (`jpg`, `jpeg`, `png`,
  `webp`, `gif`, `tiff`, `eps`) below a directory.

The HTTP servers handle one connection at a time and understand only the
request line; they are demonstrations, not general web servers.

## What it does not do

- There is no UDP command: `sysprogkit.udp` handles one datagram per
  `serve_once` call, and a long-running UDP server loop is left to the caller.
- There is no multicast support; `format_tick` only formats a timestamp and
  nothing sends or receives ticks.
- `sysprogkit.png` reads and writes chunks as they are; it does not verify
  CRCs or decode image data.