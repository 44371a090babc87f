"""medium-mcp: a stdio JSON-RPC tool server for Medium content lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from medium_mcp.protocol.engine import ProtocolEngine as ProtocolEngine
    from medium_mcp.server import build_engine as build_engine
    from medium_mcp.server import serve as serve

_LAZY_EXPORTS = {
    "ProtocolEngine": "medium_mcp.protocol.engine",
    "build_engine": "medium_mcp.server",
    "serve": "medium_mcp.server",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'medium_mcp' has no attribute {name!r}")
