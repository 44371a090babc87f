"""Stdio transport for the server side of the protocol.

Reads newline-delimited messages from stdin through an asyncio
``StreamReader`` and writes each outbound line to stdout, flushing after every
write so the client sees a response as soon as it is produced.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import IO, Protocol, runtime_checkable

from medium_mcp.protocol.errors import ParseError

logger = logging.getLogger(__name__)

# Longest accepted input line; asyncio's own default is 64 KiB.
DEFAULT_LINE_LIMIT = 16 * 1024 * 1024


@runtime_checkable
class LineTransport(Protocol):
    """Abstract line-oriented transport owned by the protocol engine."""

    async def connect(self) -> None: ...
    async def receive(self) -> str | None: ...
    def send(self, line: str) -> None: ...
    async def close(self) -> None: ...


class StdioTransport:
    """Serves one client over the process's stdin/stdout.

    Both streams may be injected, which is how tests drive the engine::

        reader = asyncio.StreamReader()
        reader.feed_data(b'{"jsonrpc":"2.0","id":1,"method":"ping"}\\n')
        reader.feed_eof()
        transport = StdioTransport(reader=reader, writer=io.StringIO())
    """

    def __init__(
        self,
        reader: asyncio.StreamReader | None = None,
        writer: IO[str] | None = None,
        *,
        encoding: str = "utf-8",
        line_limit: int = DEFAULT_LINE_LIMIT,
    ) -> None:
        self._reader = reader
        self._writer = writer
        self._encoding = encoding
        self._line_limit = line_limit
        self._pipe: asyncio.BaseTransport | None = None

    async def connect(self) -> None:
        """Attach a stream reader to stdin unless one was injected."""
        if self._writer is None:
            self._writer = sys.stdout
        if self._reader is not None:
            return
        loop = asyncio.get_running_loop()
        reader = asyncio.StreamReader(limit=self._line_limit)
        protocol = asyncio.StreamReaderProtocol(reader)
        self._pipe, _ = await loop.connect_read_pipe(lambda: protocol, sys.stdin)
        self._reader = reader

    async def receive(self) -> str | None:
        """Read one line; ``None`` means end of input.

        Raises:
            ParseError: If the line exceeds the reader's limit. The oversized
                data has been discarded, so the next call reads on.
        """
        if self._reader is None:
            msg = "Transport not connected"
            raise RuntimeError(msg)
        try:
            raw = await self._reader.readline()
        except ValueError as exc:
            logger.warning("Discarding oversized input line: %s", exc)
            msg = "Invalid JSON request"
            raise ParseError(msg) from exc
        if not raw:
            return None
        return raw.decode(self._encoding, errors="replace").rstrip("\r\n")

    def send(self, line: str) -> None:
        """Write one line and flush synchronously."""
        if self._writer is None:
            msg = "Transport not connected"
            raise RuntimeError(msg)
        self._writer.write(line + "\n")
        self._writer.flush()

    async def close(self) -> None:
        """Detach from stdin; the output stream is left open."""
        if self._pipe is not None:
            self._pipe.close()
            self._pipe = None
        self._reader = None
