"""Small systems-programming toolkit: streams, binary data, PNG chunks, paths, asyncio contexts and queues, and network helpers."""

__version__ = "0.1.0"