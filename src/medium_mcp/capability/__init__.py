"""Content capability: the operations behind each tool and their result records."""

from medium_mcp.capability.provider import ContentCapability
from medium_mcp.capability.results import CapabilityResult
from medium_mcp.capability.service import ContentService

__all__ = [
    "CapabilityResult",
    "ContentCapability",
    "ContentService",
]
