"""Tests for the stdio line transport."""

from __future__ import annotations

import asyncio
import io
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from medium_mcp.protocol.errors import ParseError
from medium_mcp.protocol.transport import DEFAULT_LINE_LIMIT, LineTransport, StdioTransport


class TestLineTransportProtocol:
    def test_stdio_satisfies_protocol(self) -> None:
        assert isinstance(StdioTransport(), LineTransport)


class TestStdioTransport:
    async def test_receive_strips_line_endings(self) -> None:
        reader = asyncio.StreamReader()
        reader.feed_data(b'{"a":1}\r\n{"b":2}\n')
        reader.feed_eof()
        transport = StdioTransport(reader=reader, writer=io.StringIO())
        await transport.connect()

        assert await transport.receive() == '{"a":1}'
        assert await transport.receive() == '{"b":2}'
        assert await transport.receive() is None

    async def test_receive_last_line_without_newline(self) -> None:
        reader = asyncio.StreamReader()
        reader.feed_data(b"tail")
        reader.feed_eof()
        transport = StdioTransport(reader=reader, writer=io.StringIO())
        assert await transport.receive() == "tail"

    def test_send_writes_line_and_flushes(self) -> None:
        writer = MagicMock()
        transport = StdioTransport(writer=writer)
        transport.send('{"x":1}')
        writer.write.assert_called_once_with('{"x":1}\n')
        writer.flush.assert_called_once()

    async def test_receive_without_connect_raises(self) -> None:
        with pytest.raises(RuntimeError, match="not connected"):
            await StdioTransport().receive()

    def test_send_without_connect_raises(self) -> None:
        with pytest.raises(RuntimeError, match="not connected"):
            StdioTransport().send("{}")

    async def test_connect_defaults_writer_to_stdout(self) -> None:
        transport = StdioTransport(reader=asyncio.StreamReader())
        fake_stdout = io.StringIO()
        with patch("sys.stdout", fake_stdout):
            await transport.connect()
        transport.send("hello")
        assert fake_stdout.getvalue() == "hello\n"

    async def test_connect_attaches_stdin_pipe(self) -> None:
        pipe = MagicMock()
        loop = asyncio.get_running_loop()
        with patch.object(loop, "connect_read_pipe", AsyncMock(return_value=(pipe, MagicMock()))) as connect:
            transport = StdioTransport(writer=io.StringIO())
            await transport.connect()
            connect.assert_awaited_once()

        await transport.close()
        pipe.close.assert_called_once()
        with pytest.raises(RuntimeError):
            await transport.receive()

    async def test_over_limit_line_is_parse_error_and_reading_resumes(self) -> None:
        reader = asyncio.StreamReader(limit=16)
        reader.feed_data(b'{"query":"' + b"x" * 64 + b'"}\n{"b":2}\n')
        reader.feed_eof()
        transport = StdioTransport(reader=reader, writer=io.StringIO())

        with pytest.raises(ParseError):
            await transport.receive()
        assert await transport.receive() == '{"b":2}'
        assert await transport.receive() is None

    async def test_stdin_reader_uses_line_limit(self) -> None:
        loop = asyncio.get_running_loop()
        with (
            patch.object(loop, "connect_read_pipe", AsyncMock(return_value=(MagicMock(), MagicMock()))),
            patch.object(asyncio, "StreamReader", wraps=asyncio.StreamReader) as stream_reader,
        ):
            await StdioTransport(writer=io.StringIO()).connect()
            await StdioTransport(writer=io.StringIO(), line_limit=1024).connect()

        assert [c.kwargs["limit"] for c in stream_reader.call_args_list] == [DEFAULT_LINE_LIMIT, 1024]
        assert DEFAULT_LINE_LIMIT > 64 * 1024
